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
Language and transformation definition to find numbers in running text.

The :class:`Numerals` language marks every run of decimal digits, and every
word consisting of Roman letters (possibly with overlines), as a number token.
Numbers with a decimal point or thousands separator are matched as a whole,
so that their parts are not mistaken for separate numbers.
Other text is not tokenized. The :class:`NumeralsTransform` turns the tokens
in a list of :class:`Numeral` tuples, dropping words that are not a valid
Roman numeral.

"""

import collections
import re

from parce import Language, lexicon
from parce.transform import Transform
import parce.action as a

from vinculum.classify import is_valid_roman
from vinculum.decode import decode
from vinculum.symbols import CHAR_VALUE, OVERLINE


#: A number found in text. ``roman`` is True for a Roman numeral.
Numeral = collections.namedtuple("Numeral", "pos text value roman")


ARABIC = r'(?<![\w.,])[0-9]+(?:[.,][0-9]+)*(?!\w)'
ROMAN = r'(?<!\w)(?:[{0}]{1}?)+(?![\w{1}])'.format("".join(CHAR_VALUE), OVERLINE)


class Numerals(Language):
    """Find Arabic numbers and Roman numerals in text."""
    @lexicon
    def root(cls):
        """Roman numerals are only recognized in upper case."""
        yield ARABIC, a.Literal.Number.Arabic
        yield ROMAN, a.Literal.Number.Roman

    @lexicon(re_flags=re.IGNORECASE)
    def nocase(cls):
        """Roman numerals are recognized in upper and lower case."""
        yield from cls.root


class NumeralsTransform(Transform):
    """Transform Numerals tokens to a list of Numeral tuples."""
    def root(self, items):
        """Return the list of Numeral tuples."""
        numerals = []
        for i in items:
            if i.is_token:
                if i.action == a.Literal.Number.Arabic:
                    # grouped or decimal numbers are matched whole and skipped
                    if i.text.isdigit():
                        numerals.append(Numeral(i.pos, i.text, int(i.text), False))
                elif i.action == a.Literal.Number.Roman and is_valid_roman(i.text):
                    numerals.append(Numeral(i.pos, i.text, decode(i.text), True))
        return numerals

    def nocase(self, items):
        """Return the list of Numeral tuples."""
        return self.root(items)
