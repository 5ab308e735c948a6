#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import locale
from typing import Optional


class SeqkitError(Exception):
    """
    Base exception class for seqkit package.

    :param message: the message related to the error.
    :param code: an optional error code.
    """
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super(SeqkitError, self).__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if not self.code:
            return self.message
        return '[{}] {}'.format(self.code, self.message)


class RangeError(SeqkitError, IndexError):
    """Raised when the bounds of a sub-range don't fit the sequence."""


class UnsupportedMutationError(SeqkitError, TypeError):
    """Raised on any attempt of changing an immutable sequence."""


class MessageKeyError(SeqkitError, KeyError):
    pass


class SeqkitTypeError(SeqkitError, TypeError):
    pass


class SeqkitValueError(SeqkitError, ValueError):
    pass


class SeqkitLocaleError(SeqkitError, locale.Error):
    pass


SEQKIT_ERROR_CODES: dict[str, tuple[type[SeqkitError], str]] = {
    # Range errors
    'SKRG0001': (RangeError, 'Start index is negative'),
    'SKRG0002': (RangeError, 'End index is greater than sequence length'),
    'SKRG0003': (RangeError, 'Start index is greater than end index'),

    # Mutation errors
    'SKMU0001': (UnsupportedMutationError, 'Immutable sequence cannot be changed'),
    'SKMU0002': (UnsupportedMutationError, 'A mutable sequence is required'),

    # Argument errors
    'SKTY0001': (SeqkitTypeError, 'Invalid argument type'),
    'SKTY0002': (SeqkitTypeError, 'Argument is not callable'),
    'SKVA0001': (SeqkitValueError, 'Invalid argument value'),

    # Localization errors
    'SKLC0001': (MessageKeyError, 'Message key not found'),
    'SKLC0002': (SeqkitLocaleError, 'Invalid locale name'),
}


def seqkit_error(code: str, message: Optional[str] = None,
                 prefix: str = 'err') -> SeqkitError:
    """
    Returns a seqkit error instance related with a code. An error code is an
    alphanumeric token starting with four uppercase letters and ending with
    four digits, optionally prefixed by a namespace prefix.

    :param code: the error code.
    :param message: an optional custom additional message.
    :param prefix: the namespace prefix to apply to the error code, defaults to 'err'.
    """
    if ':' not in code:
        pcode = '%s:%s' % (prefix, code) if prefix else code
    elif not prefix or not code.startswith(prefix + ':'):
        message = '%r is not a seqkit error code' % code
        raise SeqkitValueError(message, 'err:SKVA0001')
    else:
        pcode = code
        code = code[len(prefix) + 1:]

    try:
        error_class, default_message = SEQKIT_ERROR_CODES[code]
    except KeyError:
        raise SeqkitValueError(
            message or 'unknown seqkit error code %r' % code, 'err:SKVA0001'
        )
    else:
        return error_class(message or default_message, pcode)
