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

Shared constants, exceptions and global options.
"""

# Format markers
COMMAND_MARKER = "//"
END_MARKER = "END"
PAGES_END_MARKER = "PAGESEND"

# Characters treated as whitespace by the original loader (C "isspace")
WHITESPACE = " \t\n\v\f\r"

# Commands that only make sense inside a block, or that the script body
# handles itself. Seeing one of these in the one-line compiler is an error.
DISALLOWED_COMMANDS = frozenset([
    "APAGE",
    "CENTERWINDOW",
    "CWTEXT",
    "MENU",
    "PAGESEND",
    "PAGESSTART",
    "SKLINE",
])

MAX_SAVE_SLOTS = 8

# [P]ress [A]ny [K]ey, actor 146 is an image of "Press any key to continue"
PAK_ACTOR_ID = 146

# XYTEXT markup bytes
SPRITE_MARKER = 0xEF
BIG_TEXT_MARKER = 0xF0


class DukeScriptException(Exception):
    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message
        self.script_name = None
        self.line_number = None

    def __str__(self):
        location = []
        if self.script_name is not None:
            location.append("script '" + self.script_name + "'")
        if self.line_number is not None:
            location.append("line " + str(self.line_number))
        if location:
            return self.message + " (" + ", ".join(location) + ")"
        return self.message


class MissingEndMarkerException(DukeScriptException):
    def __init__(self, marker):
        DukeScriptException.__init__(self, "Missing end marker '" + marker + "' in Duke Script file")
        self.marker = marker


class InvalidParameterException(DukeScriptException):
    def __init__(self, command, detail=None):
        message = "Invalid " + command + " command in Duke Script file"
        if detail:
            message += ": " + detail
        DukeScriptException.__init__(self, message)
        self.command = command


class DisallowedCommandException(DukeScriptException):
    def __init__(self, command):
        DukeScriptException.__init__(self, "The command " + command + " is not allowed in this context")
        self.command = command


# Global options (set by the command-line tool)
class GlobalOptions(object):
    def __init__(self, **kwds):
        self.encoding = kwds.get('encoding', "latin-1")
        self.indent = kwds.get('indent', 4)

global_options = GlobalOptions()
