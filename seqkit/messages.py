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
Locale selection from command-line arguments and lookup of localized messages.
"""
import locale
import logging
import re
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Optional, Union

from .exceptions import seqkit_error

__all__ = ['Translation', 'DEFAULT_LANGUAGE', 'MESSAGES', 'get_default_locale',
           'normalize_locale', 'get_locale', 'iter_locale_candidates', 'get_message']

logger = logging.getLogger('seqkit.messages')

DEFAULT_LANGUAGE = 'en'

LANGUAGE_PATTERN = re.compile(r'^[A-Za-z]{2,8}$')
COUNTRY_PATTERN = re.compile(r'^(?:[A-Za-z]{2}|\d{3})$')


class Translation(Enum):
    GREETING = 'GREETING'
    FAREWELL = 'FAREWELL'


# Base messages are mapped by an empty locale name, the last lookup fallback.
MESSAGES: dict[str, dict[str, str]] = {
    '': {
        'GREETING': 'Hello!',
        'FAREWELL': 'Goodbye!',
    },
    'pl': {
        'GREETING': 'Cześć!',
        'FAREWELL': 'Do widzenia!',
    },
    'it': {
        'GREETING': 'Ciao!',
        'FAREWELL': 'Arrivederci!',
    },
    'de': {
        'GREETING': 'Hallo!',
        'FAREWELL': 'Auf Wiedersehen!',
    },
    'de_AT': {
        'GREETING': 'Servus!',
    },
}


def get_default_locale() -> str:
    """
    Returns the locale name of the process, without the encoding. Defaults to
    the base language if the locale is not configured.
    """
    language_code = locale.getlocale()[0]
    if not language_code or language_code in ('C', 'POSIX'):
        return DEFAULT_LANGUAGE
    return language_code


def normalize_locale(language: str, country: Optional[str] = None) -> str:
    """
    Returns a locale name built from a language code and an optional country code,
    e.g. 'de_AT'. Language codes are lowercased, country codes uppercased.

    :raises SeqkitLocaleError: if a code is not well-formed.
    """
    if LANGUAGE_PATTERN.match(language) is None:
        raise seqkit_error('SKLC0002', f'invalid language code {language!r}')
    elif country is None:
        return language.lower()
    elif COUNTRY_PATTERN.match(country) is None:
        raise seqkit_error('SKLC0002', f'invalid country code {country!r}')
    return f'{language.lower()}_{country.upper()}'


def get_locale(args: Sequence[str], default: Optional[str] = None) -> str:
    """
    Selects a locale name from command-line arguments. With no arguments the
    default is returned, with one argument it's taken as the language, with two
    or more arguments the first two are the language and the country.

    :param args: the command-line arguments.
    :param default: the default locale name, if `None` the locale of the process.
    """
    if not args:
        return default if default is not None else get_default_locale()
    elif len(args) == 1:
        return normalize_locale(args[0])
    else:
        return normalize_locale(args[0], args[1])


def iter_locale_candidates(locale_name: str) -> Iterator[str]:
    """Yields the catalog names to look up for a locale, from specific to base."""
    name = locale_name.split('.')[0].split('@')[0]
    language, _, country = name.partition('_')
    if language and country:
        yield f'{language.lower()}_{country.upper()}'
    if language:
        yield language.lower()
    yield ''


def get_message(key: Union[Translation, str], locale_name: str) -> str:
    """
    Returns the localized message for a key, falling back from the specific
    locale to its language and then to the base messages.

    :param key: a `Translation` member or a message key string.
    :param locale_name: the locale name, e.g. 'pl' or 'de_AT'.
    :raises MessageKeyError: if the key is not found in any catalog.
    """
    name = key.value if isinstance(key, Translation) else key

    for candidate in iter_locale_candidates(locale_name):
        try:
            message = MESSAGES[candidate][name]
        except KeyError:
            continue
        else:
            if candidate != locale_name:
                logger.debug("Message %r for locale %r taken from catalog %r",
                             name, locale_name, candidate or '<base>')
            return message

    raise seqkit_error('SKLC0001', f'message key {name!r} not found')
