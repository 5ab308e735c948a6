#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Command-line demonstrations of seqkit features."""
import argparse
import logging
import pickle
import sys
from array import array
from collections.abc import Iterable
from typing import Any, Optional

from . import __version__
from .exceptions import SeqkitError
from .mutators import fill_all, fill_range, generate
from .empty import shared_empty, typed_empty, is_immutable, sequence_equals, sequence_size
from .messages import Translation, get_locale, get_message

logger = logging.getLogger('seqkit')

MESSAGE_FOR_A_MUTABLE_SEQUENCE = "Sequence from the %s is mutable"
MESSAGE_FOR_IMMUTABLE_SEQUENCE = "Sequence from the %s is immutable"


def format_sequence(seq: Iterable[Any]) -> str:
    return f"[{', '.join(map(str, seq))}]"


def fill_demo() -> None:
    """Shows the differences between filling and generating sequence values."""
    numbers = array('i', [1, 2, 2, 3, 4, 5, 6, 7, 8, 9, 9, 1, 0])
    print("Original array:", format_sequence(numbers))
    fill_all(numbers, 12)
    print("Example 1 with fill method:", format_sequence(numbers))
    fill_range(numbers, 3, 8, 33)
    print("Example 2 with fill method:", format_sequence(numbers))

    chars = list('epam')
    print("Original char array:", format_sequence(chars))
    fill_range(chars, 1, 3, 'e')
    print("Example 3 with fill method:", format_sequence(chars))

    names = ["Kasia", "Monika", "Zuza", "Daniel", "Łukasz"]
    print("Original String array:", format_sequence(names))
    fill_range(names, 2, 4, "Miś")
    print("Example 4 with fill method:", format_sequence(names))

    numbers2 = array('i', [1, 2, 5, 10, 11, 12, 5, 4, 7, 8, 9, 10])
    print("Original array2:", format_sequence(numbers2))
    generate(numbers2, lambda index: (index + 1) * 10)
    print("Example 5 with generate method:", format_sequence(numbers2))

    squares = array('d', [0.0] * 10)
    generate(squares, lambda index: float(index * index))
    print("Example 6 with generate method:", format_sequence(squares))

    generate(names, lambda index: names[index].upper())
    print("Example 7 with generate method:", format_sequence(names))


def check_mutability(seq: Any, source_name: str) -> None:
    if is_immutable(seq, object()):
        print(MESSAGE_FOR_IMMUTABLE_SEQUENCE % source_name, file=sys.stderr)
    else:
        print(MESSAGE_FOR_A_MUTABLE_SEQUENCE % source_name)


def empty_demo() -> None:
    """Compares the shared empty sequence with the typed one and a new list."""
    shared = shared_empty()
    typed = typed_empty(int)

    print("Both sequences are equal"
          if sequence_equals(shared, typed) and shared == typed
          else "Both sequences are not equal")

    print("Both sequences are empty. Their size is equal to 0."
          if sequence_size(shared) == 0 and sequence_size(typed) == 0
          else "Both sequences are not empty. Their size is not equal to 0.")

    print("Both sequences are picklable"
          if pickle.loads(pickle.dumps(shared)) == pickle.loads(pickle.dumps(typed))
          else "Both sequences are not picklable")

    print("Both sequences are the same object"
          if shared is typed
          else "Both sequences are distinct objects")

    check_mutability(shared, "shared_empty()")
    check_mutability(typed, "typed_empty()")
    check_mutability([], "list()")

    print("A new empty list is equal to the shared empty sequence"
          if shared == [] else
          "A new empty list is not equal to the shared empty sequence")


def greet_demo(args: list[str]) -> None:
    """Prints the localized greeting and farewell for a locale."""
    locale_name = get_locale(args)
    logger.debug("Selected locale %r", locale_name)
    print(get_message(Translation.GREETING, locale_name))
    print(get_message(Translation.FAREWELL, locale_name))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='seqkit', description="Demonstrations of seqkit sequence utilities."
    )
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        help="print debug messages")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('fill', help="fill and generate sequence values")
    subparsers.add_parser('empty', help="compare shared and typed empty sequences")
    greet_parser = subparsers.add_parser('greet', help="print localized messages")
    greet_parser.add_argument('locale', nargs='*', metavar='language [country]',
                              help="the language and the optional country codes")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s',
    )

    try:
        if args.command == 'fill':
            fill_demo()
        elif args.command == 'empty':
            empty_demo()
        else:
            greet_demo(args.locale)
    except SeqkitError as err:
        logger.debug("Command %r failed", args.command, exc_info=True)
        print(f"seqkit: error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
