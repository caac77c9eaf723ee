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
The vinculum module.

Convert between integers and Roman numerals, including the vinculum (overline)
notation for the values 4000 up to 3999999.

The most used functions are available directly from this module::

    >>> import vinculum
    >>> vinculum.encode_to_marked_string(2024)
    'MMXXIV'
    >>> vinculum.decode('MMXXIV')
    2024

"""

from .pkginfo import version, version_string
from .encode import encode_plain, encode_segments, encode_to_marked_string
from .decode import decode
from .classify import is_valid_roman, looks_like_arabic, looks_like_roman
from .quiz import random_in_range


__all__ = (
    'version', 'version_string',
    'encode_plain', 'encode_segments', 'encode_to_marked_string', 'decode',
    'is_valid_roman', 'looks_like_arabic', 'looks_like_roman',
    'random_in_range',
)
