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
The symbol tables used for encoding and decoding Roman numerals.

All tables are ordered by descending value, which is the order the greedy
encoder walks them. They are never modified.

"""


#: The combining overline (U+0305), placed directly after a letter to
#: multiply its value by :py:data:`MULTIPLIER`.
OVERLINE = '\u0305'

#: The value a vinculum (overline) multiplies a numeral with.
MULTIPLIER = 1000

#: Lowest value that can be written as a Roman numeral.
MIN_VALUE = 1

#: Highest value that can be written without the vinculum.
MAX_PLAIN = 3999

#: Highest value that can be written using the vinculum.
MAX_VALUE = 3999999


#: The plain (value, numeral) pairs, covering 1 to 3999.
STANDARD = (
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'),
    (1, 'I'),
)


def _make_extended_table():
    """Yield the (value, numeral, overline) triples of the extended table.

    The overlined band stops at IV, because an overlined I would have the
    same value as a plain M.

    """
    for value, numeral in STANDARD:
        if value * MULTIPLIER > MAX_PLAIN:
            yield value * MULTIPLIER, numeral, True
    for value, numeral in STANDARD:
        yield value, numeral, False

#: The (value, numeral, overline) triples, covering 1 to 3999999.
EXTENDED = tuple(_make_extended_table())

del _make_extended_table


#: Value of every single Roman letter.
CHAR_VALUE = {'I': 1, 'V': 5, 'X': 10, 'L': 50, 'C': 100, 'D': 500, 'M': 1000}
