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

Line scanner. Script source is held as a list of physical lines with a
(row, column) cursor, so block parsers can remember a position and seek back
to it.
"""
from dukescript_misc import COMMAND_MARKER, WHITESPACE


def trim_line(line):
    return line.strip(WHITESPACE)

def is_command(line):
    return line.startswith(COMMAND_MARKER)

def strip_command_prefix(line):
    # "///FOO" and "//FOO" are the same command
    return line.lstrip("/")


class ScriptLines(object):
    def __init__(self, source):
        """ Accepts the whole script source as a string. Lines are split on "\\n" only;
        a "\\r" left at the end of a line is removed by trim_line, one in the middle
        terminates text payloads."""
        self.lines = source.split("\n")
        self.row = 0
        self.column = 0

    def __iter__(self):
        line = self.next_line()
        while line is not None:
            yield line
            line = self.next_line()

    def at_end(self):
        return self.row >= len(self.lines)

    def tell(self):
        return (self.row, self.column)

    def seek(self, position):
        self.row, self.column = position

    @property
    def line_number(self):
        """ 1-based number of the line read last."""
        if self.column:
            return self.row + 1
        return min(self.row, len(self.lines))

    def next_line(self):
        """ Returns the rest of the current physical line and moves to the next one,
        or None at the end of the source."""
        if self.at_end():
            return None
        line = self.lines[self.row][self.column:]
        self.row += 1
        self.column = 0
        return line

    def read_word(self):
        """ Skips whitespace (including line breaks) and returns the next
        whitespace-delimited word, leaving the cursor just after it on the same line.
        Returns an empty string at the end of the source."""
        while not self.at_end():
            line = self.lines[self.row]
            start = self.column
            while start < len(line) and line[start] in WHITESPACE:
                start += 1
            if start == len(line):
                self.row += 1
                self.column = 0
                continue
            end = start
            while end < len(line) and line[end] not in WHITESPACE:
                end += 1
            self.column = end
            return line[start:end]
        return ""
