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
A shared immutable empty sequence and helpers for checking sequences.
"""
import copy
import threading
from collections.abc import Iterator, Sequence, Sized
from typing import Any, cast, ClassVar, final, NoReturn, Optional, overload, TypeVar

from .exceptions import UnsupportedMutationError, seqkit_error

__all__ = ['EmptySequenceType', 'EMPTY_SEQUENCE', 'shared_empty', 'typed_empty',
           'is_immutable', 'sequence_equals', 'sequence_size']

T = TypeVar('T')

_instance_lock = threading.Lock()


@final
class EmptySequenceType(Sequence[T]):
    """
    A singleton sequence with no items. The instance is shared by all the callers
    that need an empty sequence, whatever is the type of the items they expect,
    because an empty sequence has no item type dependent content.

    Every method that would change the sequence raises `UnsupportedMutationError`.
    """
    _instance: ClassVar[Optional['EmptySequenceType[Any]']] = None
    __slots__ = ()

    def __new__(cls) -> 'EmptySequenceType[T]':
        instance = cls._instance
        if instance is None:
            with _instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                instance = cls._instance
        return cast('EmptySequenceType[T]', instance)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()

    def __copy__(self) -> 'EmptySequenceType[T]':
        return self

    def __deepcopy__(self, memo: Any) -> 'EmptySequenceType[T]':
        return self

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def __str__(self) -> str:
        return '()'

    @overload
    def __getitem__(self, index: int) -> NoReturn: ...

    @overload
    def __getitem__(self, index: slice) -> 'EmptySequenceType[T]': ...

    def __getitem__(self, index: int | slice) -> 'EmptySequenceType[T]':
        if isinstance(index, slice):
            return self
        elif isinstance(index, int):
            raise IndexError('empty sequence index out of range')
        raise TypeError(f'sequence indices must be integers or slices, '
                        f'not {type(index).__name__}')

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __reversed__(self) -> Iterator[T]:
        return iter(())

    def __contains__(self, value: object) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (EmptySequenceType, list, tuple)):
            return not other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(())

    ###
    # Mutation methods of mutable sequences, always rejected.
    def _mutation_error(self, action: str) -> NoReturn:
        msg = f"cannot {action} an immutable empty sequence"
        raise seqkit_error('SKMU0001', msg)

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._mutation_error('assign items to')

    def __delitem__(self, index: Any) -> NoReturn:
        self._mutation_error('delete items from')

    def __iadd__(self, values: Any) -> NoReturn:
        self._mutation_error('extend')

    def append(self, value: Any) -> NoReturn:
        self._mutation_error('append to')

    def extend(self, values: Any) -> NoReturn:
        self._mutation_error('extend')

    def insert(self, index: int, value: Any) -> NoReturn:
        self._mutation_error('insert into')

    def remove(self, value: Any) -> NoReturn:
        self._mutation_error('remove from')

    def pop(self, index: int = -1) -> NoReturn:
        self._mutation_error('pop from')

    def clear(self) -> NoReturn:
        self._mutation_error('clear')

    def reverse(self) -> NoReturn:
        self._mutation_error('reverse')

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._mutation_error('sort')


EMPTY_SEQUENCE: EmptySequenceType[Any] = EmptySequenceType()  # The shared singleton


def shared_empty() -> EmptySequenceType[Any]:
    """Returns the shared empty sequence, the same instance at every call."""
    return EMPTY_SEQUENCE


@overload
def typed_empty() -> EmptySequenceType[Any]: ...


@overload
def typed_empty(item_type: type[T]) -> EmptySequenceType[T]: ...


def typed_empty(item_type: Optional[type[Any]] = None) -> EmptySequenceType[Any]:
    """
    Returns an empty sequence typed for the requested item type. The item type
    is only a hint for static type checkers: the returned object is the shared
    empty sequence, adapted at the interface boundary.

    :param item_type: the type of the items expected by the caller.
    """
    return EMPTY_SEQUENCE


_NOT_PROVIDED: Any = object()

# Trial items for an empty container when no item is provided, so that typed
# containers (e.g. `array.array` or `bytearray`) find a value they accept.
_TRIAL_ITEMS = (None, 0, ' ')


def is_immutable(container: Any, item: Any = _NOT_PROVIDED) -> bool:
    """
    Checks if a container is immutable by an attempt of appending an item to
    a shallow copy of it, so the checked container is never changed. If no item
    is provided the first item of the container is used, or, for an empty
    container, a few trial items of common types. Any exception raised by the
    rejection of the mutation counts as immutability, except the `TypeError`
    or `ValueError` of a typed container that doesn't accept the item type.

    :param container: the container to check.
    :param item: an optional item to append, must be of the right type for typed containers.
    :returns: `True` if the container rejects the mutation, `False` otherwise.
    :raises SeqkitTypeError: if the container cannot be copied.
    """
    try:
        trial = copy.copy(container)
    except Exception as err:
        msg = f"cannot check a copy of {type(container).__name__!r}: {err}"
        raise seqkit_error('SKTY0001', msg) from err

    if item is not _NOT_PROVIDED:
        items: Sequence[Any] = (item,)
    elif isinstance(trial, Sequence) and len(trial):
        items = (trial[0],)
    else:
        items = _TRIAL_ITEMS

    for value in items:
        try:
            trial.append(value)
        except UnsupportedMutationError:
            return True
        except (TypeError, ValueError):
            continue  # item of a wrong type or a rejection by a TypeError
        except Exception:
            return True
        else:
            return False
    return True


def _check_sequence(obj: Any) -> None:
    if not isinstance(obj, Sequence) or isinstance(obj, (str, bytes, bytearray)):
        msg = f"{type(obj).__name__!r} is not a sequence of items"
        raise seqkit_error('SKTY0001', msg)


def sequence_equals(seq1: Sequence[Any], seq2: Sequence[Any]) -> bool:
    """
    Structural equality of two sequences: they are equal if they have the same
    length and the same items in the same order, regardless of their types.
    """
    _check_sequence(seq1)
    _check_sequence(seq2)
    if len(seq1) != len(seq2):
        return False
    return all(x == y for x, y in zip(seq1, seq2))


def sequence_size(seq: Sized) -> int:
    """Returns the number of items of a sequence."""
    if not isinstance(seq, Sized):
        msg = f"{type(seq).__name__!r} has no size"
        raise seqkit_error('SKTY0001', msg)
    return len(seq)
