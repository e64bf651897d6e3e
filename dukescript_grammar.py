#!/usr/bin/env python
"""
Duke Script compiler

    Use, distribution, and modification of the Duke Script compiler, source code,
    or documentation, is subject to the terms of the MIT license, as below.

    Copyright (c) 2011 Laurence Dougal Myers

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in
    all copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
    THE SOFTWARE.

Parameter grammars for each command. A grammar only describes what follows
the keyword on a command line; block structure (script bodies, pages, message
boxes) is handled line by line in the compiler.
"""
from pyparsing import Group, Opt, ZeroOrMore, ParserElement
from dukescript_lexicon import *

# keyword -> grammar element name
command_table = {
    "FADEIN": "grFadeIn",
    "FADEOUT": "grFadeOut",
    "DELAY": "grDelay",
    "BABBLEON": "grBabbleOn",
    "BABBLEOFF": "grBabbleOff",
    "NOSOUNDS": "grNoSounds",
    "KEYS": "grKeys",
    "GETNAMES": "grGetNames",
    "PAK": "grPressAnyKey",
    "LOADRAW": "grLoadRaw",
    "Z": "grSelectionIndicator",
    "XYTEXT": "grXYText",
    "GETPAL": "grGetPal",
    "WAIT": "grWait",
    "SHIFTWIN": "grShiftWin",
    "EXITTODEMO": "grExitToDemo",
    "TOGGS": "grToggs",
}


class GrammarBase(object):
    def __init__(self):
        self.construct_grammar()
        for gname, gram in self:
            gram.parse_with_tabs()

    def __iter__(self):
        """ Iterating a grammar returns a tuple containing the name of the grammar element and the actual object."""
        return ((g, getattr(self, g)) for g in dir(self) if g.startswith("gr") and isinstance(getattr(self, g), ParserElement))

    def construct_grammar(self):
        pass

    def lookup(self, keyword):
        """ Returns the grammar element for a one-line command, or None if the keyword has none."""
        gname = command_table.get(keyword)
        if gname is None:
            return None
        return getattr(self, gname)


class DukeScriptGrammar(GrammarBase):
    def construct_grammar(self):
        # Commands without parameters. Each one needs its own element so it
        # can carry its own parse action.
        self.grFadeIn = leNothing.copy()
        self.grFadeOut = leNothing.copy()
        self.grBabbleOff = leNothing.copy()
        self.grNoSounds = leNothing.copy()
        self.grKeys = leNothing.copy()
        self.grPressAnyKey = leNothing.copy()
        self.grWait = leNothing.copy()
        self.grShiftWin = leNothing.copy()
        self.grExitToDemo = leNothing.copy()

        self.grDelay = leNumber("amount")
        self.grBabbleOn = leNumber("duration")
        self.grGetNames = leNumber("slot")
        self.grSelectionIndicator = leNumber("ypos")
        self.grLoadRaw = leToken("name")
        self.grGetPal = leToken("name")

        # XYTEXT <x> <y> <payload>
        # A bad coordinate is left out of the results rather than read as 0.
        self.grXYText = Opt(leInt("x")) + Opt(leInt("y")) + leSeparator + leTextPayload("payload")

        # TOGGS <x> <count> [<y> <id>]... - pairs are cut to "count" by the compiler
        self.grToggs = leNumber("xpos") + leNumber("count") + Group(ZeroOrMore(leInt))("pairs")

        # Block commands. These don't produce an action on their own.
        self.grMenu = leNumber("slot")
        self.grCenterWindow = leNumber("y") + leNumber("height") + leNumber("width")
        self.grMessageText = leSeparator + leTextPayload("text")
