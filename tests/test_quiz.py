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
Test vinculum.quiz
"""

import random

import pytest

### find vinculum
import sys
sys.path.insert(0, '.')

from vinculum.encode import encode_plain, encode_to_marked_string
from vinculum.quiz import DIFFICULTIES, Quiz, Score, random_in_range
from vinculum.symbols import OVERLINE

O = OVERLINE


class FixedRandom:
    """Stands in for random.Random, always returning the same value."""
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_random_in_range():
    rng = random.Random(1234)
    values = set()
    for i in range(1000):
        n = random_in_range(1, 10, rng)
        assert 1 <= n <= 10
        values.add(n)
    assert values == set(range(1, 11))

    for i in range(100):
        assert random_in_range(7, 7) == 7
        assert 1 <= random_in_range(1, 3999999) <= 3999999

    assert random_in_range(1, 10, FixedRandom(0.0)) == 1
    assert random_in_range(1, 10, FixedRandom(0.9999999)) == 10
    assert random_in_range(-5, 5, FixedRandom(0.5)) == 0


def test_difficulties():
    assert list(DIFFICULTIES) == ['easy', 'medium', 'hard', 'expert', 'master']
    assert DIFFICULTIES['easy'][:2] == (1, 10)
    assert DIFFICULTIES['master'].max == 3999999
    assert DIFFICULTIES['master'].label == "Master (1-3,999,999)"


def test_score():
    s = Score()
    assert s.percentage is None
    s.add(True)
    s.add(False)
    s.add(True)
    assert s == Score(2, 3)
    assert s.percentage == 67
    assert Score(1, 2).percentage == 50


def test_main():
    q = Quiz(rng=random.Random(42))
    assert q.direction == 'arabic_to_roman'
    assert 1 <= q.number <= 100
    assert q.prompt() == "Convert to Roman numerals:"
    assert q.question() == str(q.number)
    assert q.correct_answer() == encode_plain(q.number)

    assert q.check(encode_plain(q.number).lower()) is True
    assert q.answered and q.correct
    assert q.score == Score(1, 1)

    # answering twice is ignored
    assert q.check("nonsense") is None
    assert q.score == Score(1, 1)

    q.next()
    assert not q.answered
    assert q.check("   ") is None
    assert q.check("zzz") is False
    assert q.score == Score(1, 2)
    assert q.score.percentage == 50

    q.set_difficulty('easy')
    assert q.score == Score(0, 0)
    assert 1 <= q.number <= 10
    with pytest.raises(KeyError):
        q.set_difficulty('impossible')


def test_lenient_answers():
    q = Quiz(difficulty='easy', rng=FixedRandom(0.35))
    assert q.number == 4
    assert q.is_correct("IV")
    assert q.is_correct(" iv ")
    assert q.is_correct("IIII")
    assert not q.is_correct("VI")
    assert not q.is_correct("4")


def test_roman_to_arabic():
    q = Quiz('roman_to_arabic', 'master', rng=FixedRandom(0.5))
    assert q.number == 2000000
    assert q.prompt() == "Convert to Arabic number:"
    assert q.question() == "M" + O + "M" + O
    assert q.correct_answer() == "2,000,000"
    assert q.is_correct("2000000")
    assert q.is_correct(" 2000000 ")
    assert not q.is_correct("MM")
    assert q.check("2000000") is True

    q.set_direction('arabic_to_roman')
    assert q.score == Score(0, 0)
    assert q.question() == "2,000,000"
    assert q.correct_answer() == encode_to_marked_string(2000000)

    with pytest.raises(ValueError):
        q.set_direction('sideways')
    with pytest.raises(ValueError):
        Quiz('sideways')


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
