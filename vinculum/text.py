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
Find and convert numbers in running text.

For example::

    >>> from vinculum.text import find_numerals, replace_numerals
    >>> find_numerals("Chapter XIV, page 12")
    [Numeral(pos=8, text='XIV', value=14, roman=True), Numeral(pos=18, text='12', value=12, roman=False)]
    >>> replace_numerals("Chapter XIV, page 12")
    'Chapter 14, page 12'
    >>> replace_numerals("Chapter XIV, page 12", to="roman")
    'Chapter XIV, page XII'

Roman numerals are only recognized when written in their canonical form.
By default only upper case Roman numerals are recognized, because a lot of
words (like "mix" or "vi") would otherwise be mistaken for numerals. For the
same reason a lone "I" is not regarded as a numeral.

"""

import logging

from parce.transform import transform_text

from .encode import encode_to_marked_string
from .lang.numerals import Numerals


logger = logging.getLogger(__name__)


def find_numerals(text, ignore_case=False, keep_single_i=False):
    """Return a list of :class:`~vinculum.lang.numerals.Numeral` tuples.

    If ``ignore_case`` is True, lower case Roman numerals are also found.

    A lone "I" is skipped, because in English text it almost always is the
    pronoun. Set ``keep_single_i`` to True to find it as the number 1.

    """
    lexicon = Numerals.nocase if ignore_case else Numerals.root
    numerals = transform_text(lexicon, text) or []
    if not keep_single_i:
        numerals = [n for n in numerals if not (n.roman and n.text.upper() == "I")]
    return numerals


def replace_numerals(text, to="arabic", ignore_case=False, keep_single_i=False):
    """Return the text with numbers converted.

    If ``to`` is "arabic", Roman numerals are replaced with Arabic numbers; if
    it is "roman", Arabic numbers in the range 1 to 3999999 are replaced with
    Roman numerals (using overlines for values of 4000 and higher). Raises a
    ValueError for other values of ``to``.

    The ``ignore_case`` and ``keep_single_i`` arguments are passed to
    :func:`find_numerals`.

    """
    if to not in ("arabic", "roman"):
        raise ValueError("can only convert to 'arabic' or 'roman', not {}".format(repr(to)))
    from_roman = to == "arabic"
    result = []
    pos = 0
    count = 0
    for n in find_numerals(text, ignore_case, keep_single_i):
        if n.roman != from_roman:
            continue
        replacement = str(n.value) if n.roman else encode_to_marked_string(n.value)
        if replacement:
            result.append(text[pos:n.pos])
            result.append(replacement)
            pos = n.pos + len(n.text)
            count += 1
    result.append(text[pos:])
    logger.debug("replaced %d numbers to %s", count, to)
    return "".join(result)
