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
Read Roman numerals, with or without vinculum, back to integers.
"""


from .symbols import CHAR_VALUE, MULTIPLIER, OVERLINE


def _symbol(text, pos):
    """Return the two-tuple (value, length) of the symbol at ``pos``.

    The value is the letter's value, multiplied if the letter is followed by
    an overline, and 0 if there is no valid letter at ``pos``. The length is
    the number of characters the symbol occupies (1 or 2).

    """
    value = CHAR_VALUE.get(text[pos], 0) if pos < len(text) else 0
    if value and text[pos+1:pos+2] == OVERLINE:
        return value * MULTIPLIER, 2
    return value, 1


def decode(text):
    """Convert a string with a Roman numeral to an integer.

    E.g. "MCMLXVII" -> 1967, "iii" -> 3, "V̅I" -> 5001

    A letter followed by a combining overline (U+0305) is multiplied by 1000.
    A symbol with a smaller value than the symbol following it is subtracted,
    all others are added. No further checks are done, so "IIII" yields 4; use
    :func:`~vinculum.classify.is_valid_roman` to check the numeral is written
    the canonical way.

    Returns 0 for an empty string, non-string input or when an invalid
    character is encountered.

    """
    if not isinstance(text, str):
        return 0
    text = text.upper().strip()
    total = 0
    pos = 0
    while pos < len(text):
        if text[pos] == OVERLINE:
            # stray overline, not preceded by a letter
            pos += 1
            continue
        value, length = _symbol(text, pos)
        if not value:
            return 0
        next_value = _symbol(text, pos + length)[0]
        if value < next_value:
            total -= value
        else:
            total += value
        pos += length
    return total
