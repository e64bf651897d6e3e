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

XYTEXT decoding.

One command covers three different things, picked by markup bytes in the
text:

1. Draw normal text. The text is drawn as-is at x, y.
2. Draw a sprite. The text starts with 0xEF, followed by a 3 digit actor ID
   (index into ACTORINFO.MNI) and a 2 digit animation frame.
3. Draw big, colorized text. Any byte >= 0xF0 switches to the big font, with
   the lower nibble as color index into the current palette. "\\xF7Hello"
   draws "Hello" in the big font using color 7. Characters above 0xFF
   can only come from str sources and are plain text.

For variant 3, the game's files only ever have spaces in front of the marker,
so preceding characters are turned into an x offset instead of being drawn.
"""
import re

from dukescript_actions import DrawBigText, DrawSprite, DrawText
from dukescript_misc import BIG_TEXT_MARKER, SPRITE_MARKER, InvalidParameterException

# Leading digits as read by "stoi": optional whitespace and sign, then digits
leading_number = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def find_big_text_marker(payload):
    for i, c in enumerate(payload):
        if BIG_TEXT_MARKER <= ord(c) <= 0xFF:
            return i
    return -1

def parse_sprite_number(digits, what):
    m = leading_number.match(digits)
    if m is None:
        raise InvalidParameterException("XYTEXT", "bad sprite " + what + " " + repr(digits))
    return int(m.group(1))

def decode_xytext(x, y, payload):
    if not payload:
        raise InvalidParameterException("XYTEXT", "no text")

    marker_pos = find_big_text_marker(payload)
    if marker_pos != -1:
        color_index = ord(payload[marker_pos]) - BIG_TEXT_MARKER
        return DrawBigText(x + marker_pos, y, color_index, payload[marker_pos + 1:])

    if ord(payload[0]) == SPRITE_MARKER:
        if len(payload) < 5:
            raise InvalidParameterException("XYTEXT", "sprite reference too short")
        actor_id = parse_sprite_number(payload[1:4], "actor")
        frame = parse_sprite_number(payload[4:6], "frame")
        return DrawSprite(x + 2, y + 1, actor_id, frame)

    return DrawText(x, y, payload)
