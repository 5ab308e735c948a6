#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Bulk assignment of values over mutable fixed-length sequences. All the
functions change the sequence in place, never resize it and return `None`.
"""
from collections.abc import Callable, Mapping, MutableSequence, Sequence
from typing import Any, TypeVar

from .exceptions import seqkit_error

__all__ = ['check_range', 'fill_all', 'fill_range', 'generate']

T = TypeVar('T')


def _check_mutable(seq: Any) -> None:
    if isinstance(seq, MutableSequence):
        return
    elif isinstance(seq, Sequence):
        msg = f"{type(seq).__name__!r} is an immutable sequence"
        raise seqkit_error('SKMU0002', msg)
    elif isinstance(seq, Mapping) or not hasattr(seq, '__setitem__') \
            or not hasattr(seq, '__len__'):
        msg = f"{type(seq).__name__!r} is not a sequence"
        raise seqkit_error('SKTY0001', msg)


def check_range(length: int, from_index: int, to_index: int) -> None:
    """
    Checks that the half-open range [from_index, to_index) fits into
    a sequence of the provided length.

    :param length: the length of the sequence.
    :param from_index: the first index of the range, inclusive.
    :param to_index: the last index of the range, exclusive.
    :raises RangeError: if the range bounds are not valid.
    """
    if from_index > to_index:
        msg = f"from_index({from_index}) > to_index({to_index})"
        raise seqkit_error('SKRG0003', msg)
    elif from_index < 0:
        msg = f"from_index({from_index}) is negative"
        raise seqkit_error('SKRG0001', msg)
    elif to_index > length:
        msg = f"to_index({to_index}) is greater than length({length})"
        raise seqkit_error('SKRG0002', msg)


def fill_all(seq: MutableSequence[T], value: T) -> None:
    """Assigns the value to every position of the sequence."""
    _check_mutable(seq)
    for index in range(len(seq)):
        seq[index] = value


def fill_range(seq: MutableSequence[T], from_index: int, to_index: int, value: T) -> None:
    """
    Assigns the value to the positions of the range [from_index, to_index) of the
    sequence. Positions outside the range are left untouched. The bounds are checked
    before any assignment, so a wrong range leaves the sequence unchanged.

    :param seq: the sequence to fill.
    :param from_index: the index of the first position to fill, inclusive.
    :param to_index: the index of the last position to fill, exclusive.
    :param value: the value to assign.
    """
    _check_mutable(seq)
    check_range(len(seq), from_index, to_index)
    for index in range(from_index, to_index):
        seq[index] = value


def generate(seq: MutableSequence[T], func: Callable[[int], T]) -> None:
    """
    Sets every position of the sequence to the value computed by the provided
    function from the position index. Indexes are processed in ascending order,
    so the function may read positions of the sequence already set. Errors
    raised by the function are propagated, positions already set are kept.

    :param seq: the sequence to set.
    :param func: a function that takes an index and returns the value for that index.
    """
    _check_mutable(seq)
    if not callable(func):
        msg = f"{func!r} is not callable"
        raise seqkit_error('SKTY0002', msg)

    for index in range(len(seq)):
        seq[index] = func(index)
