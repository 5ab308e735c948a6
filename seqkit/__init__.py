#
# Copyright (c), 2024-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2024-2025, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

# Imports here are considered as stable API, other internal calls may change.

from .exceptions import SeqkitError, RangeError, UnsupportedMutationError, \
    MessageKeyError, SeqkitTypeError, SeqkitValueError, SeqkitLocaleError

from .mutators import check_range, fill_all, fill_range, generate
from .empty import EmptySequenceType, EMPTY_SEQUENCE, shared_empty, typed_empty, \
    is_immutable, sequence_equals, sequence_size
from .messages import Translation, get_locale, get_message

__all__ = ['SeqkitError', 'RangeError', 'UnsupportedMutationError', 'MessageKeyError',
           'SeqkitTypeError', 'SeqkitValueError', 'SeqkitLocaleError',
           'check_range', 'fill_all', 'fill_range', 'generate',
           'EmptySequenceType', 'EMPTY_SEQUENCE', 'shared_empty', 'typed_empty',
           'is_immutable', 'sequence_equals', 'sequence_size',
           'Translation', 'get_locale', 'get_message']
