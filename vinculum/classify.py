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
Functions to tell what kind of number a piece of text contains.

:func:`looks_like_roman` and :func:`looks_like_arabic` only look at the
characters, and are used to auto-detect the kind of input.
:func:`is_valid_roman` checks that a Roman numeral is written in its canonical
form, by decoding it and encoding the value again.

"""

import re

from .decode import decode
from .encode import encode_to_marked_string
from .symbols import CHAR_VALUE, OVERLINE, MIN_VALUE, MAX_VALUE


_arabic_re = re.compile(r'[0-9]+')


def _normalize(text):
    """Return the upper-cased, stripped text, or an empty string for non-str."""
    return text.upper().strip() if isinstance(text, str) else ""


def _roman_chars_only(text):
    return all(char == OVERLINE or char in CHAR_VALUE for char in text)


def looks_like_roman(text):
    """Return True if the text only contains Roman letters and overlines.

    Case and surrounding whitespace are ignored; an empty string yields False.

    """
    text = _normalize(text)
    return bool(text) and _roman_chars_only(text)


def looks_like_arabic(text):
    """Return True if the text, stripped, consists of decimal digits only."""
    return isinstance(text, str) and bool(_arabic_re.fullmatch(text.strip()))


def is_valid_roman(text):
    """Return True if the text is a canonical Roman numeral.

    The text is valid if it decodes to a value in the range 1 to 3999999 that,
    when written again, yields exactly the same text (ignoring case and
    surrounding whitespace). So "XIV" and "I̅V̅" are valid, while "IIII" and
    "VX" are not, although :func:`~vinculum.decode.decode` reads them.

    """
    text = _normalize(text)
    if not text or not _roman_chars_only(text):
        return False
    value = decode(text)
    if not MIN_VALUE <= value <= MAX_VALUE:
        return False
    return encode_to_marked_string(value).upper() == text
