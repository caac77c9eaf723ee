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
Test vinculum.convert
"""

import pytest

### find vinculum
import sys
sys.path.insert(0, '.')

from vinculum.convert import *
from vinculum.symbols import OVERLINE

O = OVERLINE


def test_helpers():
    assert parse_int("12") == 12
    assert parse_int(" 12abc") == 12
    assert parse_int("-5") == -5
    assert parse_int("abc") is None
    assert parse_int("") is None

    assert format_arabic(12) == "12"
    assert format_arabic(1994) == "1,994"
    assert format_arabic(3999999) == "3,999,999"


def test_main():
    assert convert("1994") == Conversion('to_roman', 1994, "MCMXCIV")
    assert convert(" mcmxciv ") == Conversion('to_arabic', 1994, "MCMXCIV")
    assert convert("4000") == Conversion('to_roman', 4000, "I" + O + "V" + O)
    assert convert("1000000").roman == "M" + O
    assert convert("I" + O + "V" + O + "D").arabic == 4500

    # lenient reading of Roman numerals
    assert convert("IIII") == Conversion('to_arabic', 4, "IIII")

    assert convert("") is None
    assert convert("   ") is None


def test_errors():
    with pytest.raises(ConversionError) as e:
        convert("0")
    assert str(e.value) == "Number must be between 1 and 3,999,999"

    with pytest.raises(ConversionError):
        convert("4000000")

    with pytest.raises(ConversionError) as e:
        convert("12a3")
    assert str(e.value) == "Enter a number (1-3,999,999) or Roman numeral"

    with pytest.raises(ConversionError) as e:
        convert("abc", mode='arabic')
    assert str(e.value) == "Invalid number"

    with pytest.raises(ConversionError) as e:
        convert("ABC", mode='roman')
    assert str(e.value) == "Invalid Roman numeral"

    with pytest.raises(ConversionError):
        convert("-5", mode='arabic')

    with pytest.raises(ValueError):
        convert("12", mode='binary')


def test_forced_mode():
    # like parseInt, trailing garbage is ignored
    assert convert("12a3", mode='arabic') == Conversion('to_roman', 12, "XII")
    assert convert("xiv", mode='roman') == Conversion('to_arabic', 14, "XIV")


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
