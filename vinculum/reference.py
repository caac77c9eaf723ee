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
A short reference of how Roman numerals are written.
"""

import collections

from .convert import format_arabic
from .encode import encode_plain, encode_to_marked_string
from .symbols import CHAR_VALUE, STANDARD, MULTIPLIER, MAX_PLAIN


#: A reference section. The rows are tuples of strings.
Section = collections.namedtuple("Section", "id title rows")


RULES = (
    ("Left to right", "Roman numerals are read from left to right, adding "
        "values unless subtractive notation applies."),
    ("Maximum repetition", "A numeral can be repeated up to three times in a "
        "row (III = 3, XXX = 30, CCC = 300)."),
    ("V, L, D never repeat", "These numerals (5, 50, 500) are never repeated "
        "as adding them would equal the next higher numeral."),
    ("Subtractive pairs", "Only I, X, and C can be used subtractively, and only "
        "before specific numerals (IV, IX, XL, XC, CD, CM)."),
    ("No zero", "Roman numerals have no symbol for zero. The system represents "
        "positive integers only."),
    ("Modern range", "Standard Roman numerals (without vinculum) can represent "
        "1 to 3,999. With vinculum, the range extends to 3,999,999."),
)

EXAMPLES = (
    (1994, "Year 1994"),
    (2024, "Year 2024"),
    (49, "Super Bowl XLIX"),
    (100, "Centennial"),
    (500, "Half millennium"),
    (1000, "Millennium"),
    (3999, "Largest standard"),
)


def sections():
    """Yield the :class:`Section` tuples of the reference."""
    yield Section('basic', "Basic Numerals", tuple(
        (numeral, format_arabic(value)) for numeral, value in CHAR_VALUE.items()))

    yield Section('subtractive', "Subtractive Notation", tuple(
        (numeral, str(value), "{} - {}".format(CHAR_VALUE[numeral[1]], CHAR_VALUE[numeral[0]]))
        for value, numeral in reversed(STANDARD) if len(numeral) == 2))

    yield Section('vinculum', "Vinculum (Overline)", tuple(
        (encode_to_marked_string(value * MULTIPLIER), format_arabic(value * MULTIPLIER))
        for numeral, value in CHAR_VALUE.items() if value * MULTIPLIER > MAX_PLAIN))

    yield Section('rules', "Rules & Tips", RULES)

    yield Section('examples', "Common Examples", tuple(
        (encode_plain(value), note, format_arabic(value)) for value, note in EXAMPLES))


def format_section(section):
    """Return the section as plain text, with the columns aligned."""
    lines = [section.title, "=" * len(section.title)]
    if section.id == 'rules':
        lines.extend("* {}: {}".format(title, text) for title, text in section.rows)
    else:
        widths = [max(len(row[i]) for row in section.rows) for i in range(len(section.rows[0]))]
        for row in section.rows:
            lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
    return "\n".join(lines)
