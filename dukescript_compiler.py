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

Compiles Duke Script source (TEXT.MNI, MENU.MNI etc.) into a bundle of named
scripts, each a list of actions.

A bundle is a sequence of script names, each followed by the script's lines
and an "//END" line. Only lines starting with "//" are commands, everything
else is ignored. Most commands produce one action from one line; a few open
a block that spans several lines:

  //PAGESSTART ... //APAGE ... //PAGESEND   - multiple pages of actions
  //CENTERWINDOW <y> <height> <width>        - message box, followed by its
                                              //CWTEXT and //SKLINE lines

Gotchas:
 - The message box has no end marker. It ends at the first command that
   isn't CWTEXT or SKLINE, and that command is then parsed normally.
 - MENU produces two actions.
 - Unknown commands are ignored, except for block commands used in the
   wrong place.
"""
from dukescript_actions import *
from dukescript_grammar import DukeScriptGrammar
from dukescript_lexicon import leCommand
from dukescript_misc import *
from dukescript_scanner import ScriptLines, trim_line, is_command, strip_command_prefix
from dukescript_text import decode_xytext


class CompilerBase(object):
    def __init__(self, grammar=None):
        self.grammar = None
        if grammar is not None:
            self.map_parse_actions(grammar)

    def map_parse_actions(self, grammar):
        self.grammar = grammar
        for gname, gram in grammar:
            pact = getattr(self, 'do_' + gname, None)
            if pact is not None:
                gram.set_parse_action(pact)

    def split_command(self, line):
        """ Accepts a command line with the "//" prefix removed, returns the keyword and
        the rest of the line after it."""
        toks = leCommand.parse_string(line)
        return toks.get("keyword", ""), toks.get("residual", "")

    def iter_commands(self, lines, end_marker):
        """ Yields (keyword, residual) for each command line until a line equal to
        end_marker. Non-command lines are skipped. Raises MissingEndMarkerException
        if the source runs out first."""
        for line in lines:
            line = trim_line(line)
            if not is_command(line):
                continue
            line = strip_command_prefix(line)
            if line == end_marker:
                return
            yield self.split_command(line)
        raise MissingEndMarkerException(end_marker)


class Compiler(CompilerBase):
    def __init__(self, grammar=None):
        if grammar is None:
            grammar = DukeScriptGrammar()
        CompilerBase.__init__(self, grammar)

    def compile_string(self, source):
        """ Accepts the whole script source (str, or bytes decoded with the global
        encoding), returns a dict of script name -> list of actions.

        Any error aborts the whole bundle."""
        if isinstance(source, bytes):
            source = source.decode(global_options.encoding)

        lines = ScriptLines(source)
        bundle = {}
        while not lines.at_end():
            script_name = lines.read_word()
            if not script_name:
                break
            try:
                # later scripts with the same name replace earlier ones
                bundle[script_name] = self.parse_script(lines)
            except DukeScriptException as e:
                if e.script_name is None:
                    e.script_name = script_name
                if e.line_number is None:
                    e.line_number = lines.line_number
                raise
        return bundle

    def compile_file(self, filename):
        with open(filename, 'rb') as script_file:
            return self.compile_string(script_file.read())

    def parse_script(self, lines):
        script = []
        for keyword, residual in self.iter_commands(lines, END_MARKER):
            if keyword == "PAGESSTART":
                script.append(self.parse_pages_definition(lines))
            elif keyword == "MENU":
                toks = self.grammar.grMenu.parse_string(residual)
                script.append(ConfigurePersistentMenuSelection(toks["slot"]))
                script.append(ScheduleFadeInBeforeNextWaitState())
            elif keyword == "CENTERWINDOW":
                toks = self.grammar.grCenterWindow.parse_string(residual)
                message_lines = self.parse_message_box_text(lines)
                script.append(ShowMessageBox(toks["y"], toks["width"], toks["height"], message_lines))
            else:
                action = self.parse_one_line_action(keyword, residual)
                if action is not None:
                    script.append(action)
        return script

    def parse_pages_definition(self, lines):
        pages = [[]]
        for keyword, residual in self.iter_commands(lines, PAGES_END_MARKER):
            if keyword == "APAGE":
                pages.append([])
            else:
                action = self.parse_one_line_action(keyword, residual)
                if action is not None:
                    pages[-1].append(action)
        return PagesDefinition(pages)

    def parse_message_box_text(self, lines):
        """ Reads CWTEXT and SKLINE lines. On the first other command, rewinds to the
        start of that line so the caller parses it, and returns the text lines."""
        message_lines = []
        start_of_line = lines.tell()
        for line in lines:
            line = trim_line(line)
            if not is_command(line):
                continue
            keyword, residual = self.split_command(strip_command_prefix(line))
            if keyword == "CWTEXT":
                message_lines.append(self.grammar.grMessageText.parse_string(residual)[0])
            elif keyword == "SKLINE":
                message_lines.append("")
            else:
                lines.seek(start_of_line)
                break
            start_of_line = lines.tell()
        return message_lines

    def parse_one_line_action(self, keyword, residual):
        """ Returns the action for a single command line, or None for commands that
        are ignored."""
        gram = self.grammar.lookup(keyword)
        if gram is None:
            if keyword in DISALLOWED_COMMANDS:
                raise DisallowedCommandException(keyword)
            return None
        return gram.parse_string(residual)[0]

    # Parse actions
    def do_grFadeIn(self, s, loc, toks):
        return FadeIn()

    def do_grFadeOut(self, s, loc, toks):
        return FadeOut()

    def do_grDelay(self, s, loc, toks):
        amount = toks["amount"]
        if amount <= 0:
            raise InvalidParameterException("DELAY", "amount must be positive, got " + str(amount))
        return Delay(amount)

    def do_grBabbleOn(self, s, loc, toks):
        duration = toks["duration"]
        if duration <= 0:
            raise InvalidParameterException("BABBLEON", "duration must be positive, got " + str(duration))
        return AnimateNewsReporter(duration)

    def do_grBabbleOff(self, s, loc, toks):
        return StopNewsReporterAnimation()

    def do_grNoSounds(self, s, loc, toks):
        return DisableMenuFunctionality()

    def do_grKeys(self, s, loc, toks):
        return ShowKeyBindings()

    def do_grGetNames(self, s, loc, toks):
        slot = toks["slot"]
        if slot < 0 or slot >= MAX_SAVE_SLOTS:
            raise InvalidParameterException("GETNAMES", "save slot " + str(slot) + " out of range")
        return ShowSaveSlots(slot)

    def do_grPressAnyKey(self, s, loc, toks):
        return DrawSprite(0, 0, PAK_ACTOR_ID, 0)

    def do_grLoadRaw(self, s, loc, toks):
        image_name = toks["name"]
        if not image_name:
            raise InvalidParameterException("LOADRAW", "missing image name")
        return ShowFullScreenImage(image_name)

    def do_grSelectionIndicator(self, s, loc, toks):
        return ShowMenuSelectionIndicator(toks["ypos"])

    def do_grXYText(self, s, loc, toks):
        if "x" not in toks or "y" not in toks:
            raise InvalidParameterException("XYTEXT", "bad coordinates")
        return decode_xytext(toks["x"], toks["y"], toks.get("payload", ""))

    def do_grGetPal(self, s, loc, toks):
        palette_file = toks["name"]
        if not palette_file:
            raise InvalidParameterException("GETPAL", "missing palette file")
        return SetPalette(palette_file)

    def do_grWait(self, s, loc, toks):
        return WaitForUserInput()

    def do_grShiftWin(self, s, loc, toks):
        return EnableTextOffset()

    def do_grExitToDemo(self, s, loc, toks):
        return EnableTimeOutToDemo()

    def do_grToggs(self, s, loc, toks):
        values = list(toks["pairs"])
        definitions = []
        for i in range(toks["count"]):
            # missing numbers read as 0
            y_pos = values[i * 2] if i * 2 < len(values) else 0
            check_box_id = values[i * 2 + 1] if i * 2 + 1 < len(values) else 0
            definitions.append(CheckBoxDefinition(y_pos, check_box_id))
        return SetupCheckBoxes(toks["xpos"], definitions)

    def do_grMessageText(self, s, loc, toks):
        message_line = toks.get("text", "")
        if not message_line:
            raise InvalidParameterException("CWTEXT", "no text")
        return message_line.rstrip(WHITESPACE)


def load_scripts(source):
    return Compiler().compile_string(source)

def load_script_file(filename):
    return Compiler().compile_file(filename)
