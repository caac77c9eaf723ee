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
A quiz to practice reading and writing Roman numerals.

A :class:`Quiz` asks for a random number, either to be written as a Roman
numeral (direction "arabic_to_roman") or to be read back from one (direction
"roman_to_arabic"), and keeps the score. The size of the numbers depends on
the difficulty, see :py:data:`DIFFICULTIES`.

"""

import collections
import logging
import math
import random

from .classify import looks_like_roman
from .convert import format_arabic, parse_int
from .decode import decode
from .display import strip_overlines
from .encode import encode_to_marked_string


logger = logging.getLogger(__name__)


#: A difficulty level: the range numbers are picked from, and a label.
Difficulty = collections.namedtuple("Difficulty", "min max label")

#: The difficulty levels, from easy to hard.
DIFFICULTIES = collections.OrderedDict((
    ('easy',   Difficulty(1, 10, "Easy (1-10)")),
    ('medium', Difficulty(1, 100, "Medium (1-100)")),
    ('hard',   Difficulty(1, 1000, "Hard (1-1000)")),
    ('expert', Difficulty(1, 3999, "Expert (1-3999)")),
    ('master', Difficulty(1, 3999999, "Master (1-3,999,999)")),
))

#: The directions a quiz can ask questions in.
DIRECTIONS = ('arabic_to_roman', 'roman_to_arabic')


def random_in_range(min_value, max_value, rng=None):
    """Return a random integer N such that ``min_value <= N <= max_value``.

    The number is picked uniformly using ``rng``, which should be a
    :class:`random.Random` instance; by default the :mod:`random` module is
    used. This is not suitable for cryptographic purposes.

    If ``min_value`` is greater than ``max_value``, the result is undefined.

    """
    if rng is None:
        rng = random
    return math.floor(rng.random() * (max_value - min_value + 1)) + min_value


class Score:
    """The number of correct answers and the total number of answers."""
    def __init__(self, correct=0, total=0):
        self.correct = correct
        self.total = total

    def __repr__(self):
        return "<{} {}/{}>".format(type(self).__name__, self.correct, self.total)

    def __eq__(self, other):
        if isinstance(other, Score):
            return (self.correct, self.total) == (other.correct, other.total)
        return NotImplemented

    def add(self, correct):
        """Count an answer, which was correct or not."""
        self.total += 1
        if correct:
            self.correct += 1

    @property
    def percentage(self):
        """The rounded percentage of correct answers, or None if there are none yet."""
        if self.total:
            return math.floor(self.correct * 100 / self.total + 0.5)


class Quiz:
    """A quiz session.

    The ``direction`` is one of :py:data:`DIRECTIONS`, and the ``difficulty``
    is a key of :py:data:`DIFFICULTIES`. The ``rng``, if given, is a
    :class:`random.Random` instance used to pick numbers.

    After creation, a number is picked already. Show the :meth:`question`,
    :meth:`check` the user's answer and then go to the :meth:`next` number.

    """
    def __init__(self, direction='arabic_to_roman', difficulty='medium', rng=None):
        self._check_direction(direction)
        self.direction = direction
        self.difficulty = DIFFICULTIES[difficulty]
        self.difficulty_name = difficulty
        self.rng = rng
        self.score = Score()
        self.next()

    @staticmethod
    def _check_direction(direction):
        if direction not in DIRECTIONS:
            raise ValueError("unknown quiz direction: {}".format(repr(direction)))

    def next(self):
        """Pick a new number; the score is kept."""
        self.number = random_in_range(self.difficulty.min, self.difficulty.max, self.rng)
        self.answered = False
        self.correct = False
        logger.debug("new question: %d", self.number)

    def reset(self):
        """Reset the score and pick a new number."""
        self.score = Score()
        self.next()

    def set_difficulty(self, difficulty):
        """Change the difficulty; resets the score."""
        self.difficulty = DIFFICULTIES[difficulty]
        self.difficulty_name = difficulty
        self.reset()

    def set_direction(self, direction):
        """Change the direction; resets the score."""
        self._check_direction(direction)
        self.direction = direction
        self.reset()

    def question(self):
        """Return the number to convert, formatted for display."""
        if self.direction == 'arabic_to_roman':
            return format_arabic(self.number)
        return encode_to_marked_string(self.number)

    def prompt(self):
        """Return the text asking the user what to do."""
        if self.direction == 'arabic_to_roman':
            return "Convert to Roman numerals:"
        return "Convert to Arabic number:"

    def correct_answer(self):
        """Return the expected answer, formatted for display."""
        if self.direction == 'arabic_to_roman':
            return encode_to_marked_string(self.number)
        return format_arabic(self.number)

    def is_correct(self, answer):
        """Return True if ``answer`` is a correct answer to the current question.

        A Roman numeral answer only needs to have the right value, so "IIII" is
        accepted for 4. Other answers are compared with the canonical numeral,
        ignoring overlines.

        """
        if self.direction == 'arabic_to_roman':
            answer = answer.strip().upper()
            if looks_like_roman(answer):
                return decode(answer) == self.number
            expected = strip_overlines(encode_to_marked_string(self.number))
            return strip_overlines(answer) == expected
        return parse_int(answer) == self.number

    def check(self, answer):
        """Check the answer and update the score.

        Returns True or False, or None if the current question already was
        answered or the answer is empty, in which case nothing is changed.

        """
        if self.answered or not answer.strip():
            return None
        self.correct = self.is_correct(answer)
        self.answered = True
        self.score.add(self.correct)
        logger.debug("answer %r for %d: %s", answer, self.number, self.correct)
        return self.correct
