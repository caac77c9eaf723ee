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
Command line interface of vinculum.

Usage examples::

    $ vinculum convert 1994
    $ vinculum convert mmxxiv
    $ vinculum quiz --difficulty hard --rounds 5
    $ vinculum reference
    $ vinculum scan --to arabic chapter.txt

"""

import argparse
import logging
import sys

from . import reference
from .convert import MODES, ConversionError, convert, format_arabic
from .pkginfo import version_string
from .quiz import DIFFICULTIES, DIRECTIONS, Quiz
from .text import replace_numerals


logger = logging.getLogger(__name__)


def run_convert(args):
    """Print the conversion of the value; returns the exit code."""
    try:
        result = convert(args.value, args.mode)
    except ConversionError as e:
        print(e, file=sys.stderr)
        return 1
    if result is None:
        print("Enter a value to convert", file=sys.stderr)
        return 1
    print("{} = {}".format(format_arabic(result.arabic), result.roman))
    return 0


def run_quiz(args):
    """Ask questions on stdin until the rounds are done or input ends."""
    quiz = Quiz(args.direction, args.difficulty)
    print(DIFFICULTIES[args.difficulty].label)
    rounds = 0
    while not args.rounds or rounds < args.rounds:
        print("\n{} {}".format(quiz.prompt(), quiz.question()))
        try:
            answer = input("> ")
        except EOFError:
            break
        if quiz.check(answer) is None:
            continue
        if quiz.correct:
            print("Correct!")
        else:
            print("Wrong, the answer is {}".format(quiz.correct_answer()))
        score = quiz.score
        print("Score: {} / {} ({}%)".format(score.correct, score.total, score.percentage))
        rounds += 1
        quiz.next()
    return 0


def run_reference(args):
    """Print the reference sections."""
    print("\n\n".join(reference.format_section(s) for s in reference.sections()))
    return 0


def run_scan(args):
    """Convert the numbers in a file or stdin."""
    if args.file is sys.stdin:
        text = args.file.read()
    else:
        with args.file:
            text = args.file.read()
    sys.stdout.write(replace_numerals(text, args.to, args.ignore_case, args.keep_single_i))
    return 0


def get_parser():
    """Return the ArgumentParser."""
    parser = argparse.ArgumentParser(
        prog='vinculum', description='Convert between numbers and Roman numerals')
    parser.add_argument('--version', action='version', version='%(prog)s ' + version_string)
    parser.add_argument('-v', '--verbose', action='store_true', help='show debug messages')
    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    p = commands.add_parser('convert', help='convert a number or Roman numeral')
    p.add_argument('value', help='a number (1-3999999) or a Roman numeral')
    p.add_argument('-m', '--mode', choices=MODES, default='auto', help='how to read the value')
    p.set_defaults(func=run_convert)

    p = commands.add_parser('quiz', help='practice converting numbers')
    p.add_argument('-d', '--direction', choices=DIRECTIONS, default='arabic_to_roman')
    p.add_argument('-l', '--difficulty', choices=list(DIFFICULTIES), default='medium')
    p.add_argument('-n', '--rounds', type=int, default=0, help='number of questions (default: endless)')
    p.set_defaults(func=run_quiz)

    p = commands.add_parser('reference', help='show how Roman numerals are written')
    p.set_defaults(func=run_reference)

    p = commands.add_parser('scan', help='convert all numbers in a text')
    p.add_argument('file', nargs='?', type=argparse.FileType('r', encoding='utf-8'),
                   default=sys.stdin, help='the text file (default: stdin)')
    p.add_argument('-t', '--to', choices=('arabic', 'roman'), default='arabic')
    p.add_argument('-i', '--ignore-case', action='store_true',
                   help='also recognize lower case Roman numerals')
    p.add_argument('--keep-single-i', action='store_true',
                   help='also convert a lone "I" (skipped by default)')
    p.set_defaults(func=run_scan)
    return parser


def main(argv=None):
    """Run the command line interface; returns the exit code."""
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")
    logger.debug("running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
