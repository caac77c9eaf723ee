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
Functions to write integers as Roman numerals.

Values from 1 to 3999 are written the usual way; from 4000 up to 3999999 the
thousands are written with a vinculum (an overline), which multiplies the
overlined letters by 1000. For example::

    >>> from vinculum.encode import *
    >>> encode_plain(1994)
    'MCMXCIV'
    >>> encode_segments(4500)
    [Segment(text='IV', overline=True), Segment(text='D', overline=False)]
    >>> encode_to_marked_string(4500)
    'I̅V̅D'

None of these functions raise an exception; a value that can't be written
yields an empty result.

"""

import collections

from .symbols import EXTENDED, STANDARD, OVERLINE, MIN_VALUE, MAX_PLAIN, MAX_VALUE


#: A run of letters that either all have an overline or all don't.
Segment = collections.namedtuple("Segment", "text overline")


def is_integer(n):
    """Return True if ``n`` is an integer number (but not a bool)."""
    return isinstance(n, int) and not isinstance(n, bool)


def encode_segments(n):
    """Return a list of :class:`Segment` tuples writing the integer ``n``.

    Consecutive letters with the same overline status are collected in one
    segment, so in practice there are at most two segments: an overlined one
    for the thousands and a plain one for the rest.

    Returns an empty list if ``n`` is not an integer in the range 1 to
    3999999.

    """
    if not is_integer(n) or not MIN_VALUE <= n <= MAX_VALUE:
        return []
    segments = []
    for value, numeral, overline in EXTENDED:
        while n >= value:
            if segments and segments[-1].overline == overline:
                segments[-1] = Segment(segments[-1].text + numeral, overline)
            else:
                segments.append(Segment(numeral, overline))
            n -= value
    return segments


def encode_plain(n):
    """Convert an integer value to a plain Roman numeral string.

    E.g. 1 -> "I", 12 -> "XII", 2015 -> "MMXV"

    Returns an empty string if ``n`` is not an integer in the range 1 to 3999.

    """
    if not is_integer(n) or not MIN_VALUE <= n <= MAX_PLAIN:
        return ""
    roman = []
    for num, char in STANDARD:
        k, n = divmod(n, num)
        roman.append(char * k)
    return "".join(roman)


def encode_to_marked_string(n):
    """Convert an integer value to a Roman numeral string with overlines.

    Every letter of an overlined segment is followed by a combining overline
    (U+0305), e.g. 4000 -> "I̅V̅", 5001 -> "V̅I".

    Returns an empty string if ``n`` is not an integer in the range 1 to
    3999999.

    """
    def parts():
        for text, overline in encode_segments(n):
            if overline:
                for char in text:
                    yield char
                    yield OVERLINE
            else:
                yield text
    return "".join(parts())
