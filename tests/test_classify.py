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
Test vinculum.classify
"""

### find vinculum
import sys
sys.path.insert(0, '.')

from vinculum.classify import is_valid_roman, looks_like_arabic, looks_like_roman
from vinculum.decode import decode
from vinculum.encode import encode_to_marked_string
from vinculum.symbols import OVERLINE

O = OVERLINE


def test_looks_like():
    assert looks_like_roman("XIV")
    assert looks_like_roman("mcm")
    assert looks_like_roman(" IIII ")
    assert looks_like_roman("V" + O)
    assert not looks_like_roman("123")
    assert not looks_like_roman("ABC")
    assert not looks_like_roman("X IV")
    assert not looks_like_roman("")
    assert not looks_like_roman("  ")
    assert not looks_like_roman(None)

    assert looks_like_arabic("123")
    assert looks_like_arabic(" 1994 ")
    assert looks_like_arabic("0")
    assert not looks_like_arabic("XIV")
    assert not looks_like_arabic("12a3")
    assert not looks_like_arabic("-5")
    assert not looks_like_arabic("+5")
    assert not looks_like_arabic("1,000")
    assert not looks_like_arabic("1.5")
    assert not looks_like_arabic("")
    assert not looks_like_arabic(12)


def test_is_valid_roman():
    assert is_valid_roman("I")
    assert is_valid_roman("IV")
    assert is_valid_roman("MCMXCIV")
    assert is_valid_roman("mcmxciv")
    assert is_valid_roman(" XIV ")
    assert is_valid_roman("I" + O + "V" + O)
    assert is_valid_roman("i" + O + "v" + O + "d")

    assert not is_valid_roman("")
    assert not is_valid_roman(None)
    assert not is_valid_roman("ABC")
    assert not is_valid_roman("IIII")
    assert not is_valid_roman("VX")
    assert not is_valid_roman("IC")
    assert not is_valid_roman("MMMM")       # 4000 is written with a vinculum
    assert not is_valid_roman("IV" + O)     # only the V is overlined
    assert not is_valid_roman(O + "X")

    # decode is lenient, is_valid_roman is not
    assert decode("IIII") == 4


def test_main():
    for val in range(1, 4000000, 997):
        assert is_valid_roman(encode_to_marked_string(val))
        assert looks_like_roman(encode_to_marked_string(val))
        assert looks_like_arabic(str(val))


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
