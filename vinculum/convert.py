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
Convert free-form user input in either direction.

The :func:`convert` function decides (or is told) whether the input is an
Arabic number or a Roman numeral, and returns a :class:`Conversion`. When
the input can't be converted, a :class:`ConversionError` is raised with a
message that can be shown to the user. For example::

    >>> from vinculum.convert import convert
    >>> convert("1994")
    Conversion(direction='to_roman', arabic=1994, roman='MCMXCIV')
    >>> convert(" mcmxciv ")
    Conversion(direction='to_arabic', arabic=1994, roman='MCMXCIV')
    >>> convert("0")
    Traceback (most recent call last):
    ...
    vinculum.convert.ConversionError: Number must be between 1 and 3,999,999

"""

import collections
import logging
import re

from .classify import looks_like_arabic, looks_like_roman
from .decode import decode
from .encode import encode_to_marked_string
from .symbols import MIN_VALUE, MAX_VALUE


logger = logging.getLogger(__name__)


#: The modes :func:`convert` accepts.
MODES = ('auto', 'arabic', 'roman')

#: The result of a successful conversion.
#: ``direction`` is "to_roman" or "to_arabic".
Conversion = collections.namedtuple("Conversion", "direction arabic roman")


_leading_int_re = re.compile(r'[+-]?[0-9]+')


class ConversionError(ValueError):
    """Raised when user input can't be converted.

    The message is suitable to be shown to the user.

    """


def parse_int(text):
    """Return the integer value at the start of the text, or None.

    Like JavaScript's ``parseInt()``, leading whitespace and trailing garbage
    are ignored: " 12abc" -> 12, "abc" -> None.

    """
    m = _leading_int_re.match(text.lstrip())
    if m:
        return int(m.group())


def format_arabic(n):
    """Format an integer with commas separating the thousands.

    E.g. 3999999 -> "3,999,999".

    """
    return "{:,}".format(n)


def convert(text, mode='auto'):
    """Convert ``text`` to a Roman numeral or an Arabic number.

    ``mode`` is one of "auto", "arabic" or "roman". In auto mode the kind of
    input is detected from the characters it contains; the other modes force
    the input to be read as Arabic number or Roman numeral respectively.

    Returns None if the text is empty or only contains whitespace. Raises
    :class:`ConversionError` when the text can't be converted, and ValueError
    for an unknown mode.

    """
    if mode not in MODES:
        raise ValueError("unknown conversion mode: {}".format(repr(mode)))
    text = text.strip()
    if not text:
        return None

    if mode == 'auto':
        is_arabic = looks_like_arabic(text)
        is_roman = looks_like_roman(text)
    else:
        is_arabic = mode == 'arabic'
        is_roman = mode == 'roman'
    logger.debug("converting %r (arabic: %s, roman: %s)", text, is_arabic, is_roman)

    if is_arabic:
        num = parse_int(text)
        if num is None:
            raise ConversionError("Invalid number")
        if not MIN_VALUE <= num <= MAX_VALUE:
            raise ConversionError("Number must be between 1 and {}".format(format_arabic(MAX_VALUE)))
        return Conversion('to_roman', num, encode_to_marked_string(num))

    if is_roman:
        num = decode(text)
        if num == 0:
            raise ConversionError("Invalid Roman numeral")
        return Conversion('to_arabic', num, text.upper())

    raise ConversionError("Enter a number (1-{}) or Roman numeral".format(format_arabic(MAX_VALUE)))
