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

Atomic parsing elements.

Parameters are read the way the original game's loader read them off a C++
input stream: numbers skip leading whitespace, a missing or malformed number
reads as 0, and anything after the last parameter is ignored.
"""
from pyparsing import Opt, Regex, Empty
from dukescript_misc import WHITESPACE

# le = lexicon entry, also gives the code a French feel

def StreamElement(element):
    """ Makes an element skip the same whitespace characters as a C++ stream."""
    return element.set_whitespace_chars(WHITESPACE)

def RawElement(element):
    """ An element that does not skip any whitespace before matching."""
    return element.leave_whitespace()

# Numbers
leInt = StreamElement(Regex(r"[+-]?[0-9]+")).set_parse_action(lambda s, loc, toks: int(toks[0]))
leNumber = Opt(leInt, default=0)

# Words (file names etc.)
leWord = StreamElement(Regex(r"[^ \t\n\v\f\r]+"))
leToken = Opt(leWord, default="")

# Text: one separator character after the previous parameter, then everything
# up to a carriage return.
leSeparator = Opt(RawElement(Regex(r"[\s\S]"))).suppress()
leTextPayload = RawElement(Regex(r"[^\r]*"))

# Command line: keyword, then the residual text exactly as written
leKeyword = Opt(leWord, default="")("keyword")
leResidual = RawElement(Regex(r"[\s\S]*"))("residual")
leCommand = (leKeyword + leResidual).parse_with_tabs()

leNothing = Empty()
