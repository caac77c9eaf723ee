# -*- coding: utf-8 -*-
#
# This file is part of `vinculum`, a library for Roman numerals
#
# Copyright © 2025-2026 by the vinculum developers
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Helpers to display Roman numerals with a vinculum.

Not all fonts draw the combining overline nicely, so in HTML the overlined
letters are put in a span with ``text-decoration: overline`` instead.

"""

import html

from .encode import Segment, encode_segments
from .symbols import OVERLINE


OVERLINE_STYLE = "text-decoration: overline"


def strip_overlines(text):
    """Return the text with all combining overlines removed."""
    return text.replace(OVERLINE, "")


def split_marked(text):
    """Split text with combining overlines in a list of :class:`Segment` tuples.

    The overline characters are removed, and consecutive characters with the
    same overline status are grouped. An overline that does not follow a
    character is ignored.

    """
    segments = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == OVERLINE:
            pos += 1
            continue
        overline = text[pos+1:pos+2] == OVERLINE
        if segments and segments[-1].overline == overline:
            segments[-1] = Segment(segments[-1].text + char, overline)
        else:
            segments.append(Segment(char, overline))
        pos += 2 if overline else 1
    return segments


def segments_to_html(segments):
    """Return a HTML string for the segments."""
    def spans():
        yield '<span>'
        for text, overline in segments:
            if overline:
                yield '<span style="{}">{}</span>'.format(OVERLINE_STYLE, html.escape(text))
            else:
                yield '<span>{}</span>'.format(html.escape(text))
        yield '</span>'
    return "".join(spans())


def to_html(value):
    """Return a HTML string displaying a Roman numeral.

    If ``value`` is an integer, it is encoded first; a value that can't be
    written as Roman numeral is displayed as "-". If ``value`` is a string, it
    is split using :func:`split_marked`.

    """
    if isinstance(value, str):
        segments = split_marked(value)
    else:
        segments = encode_segments(value) or [Segment("-", False)]
    return segments_to_html(segments)
