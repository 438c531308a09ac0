'''
Base62 encodings: an alphabet paired with a minimum output width.

Encodings are immutable. Options such as padding return a new `Encoding`
instead of changing the one they're applied to, so a single instance can be
shared freely, e.g. as a module-level constant.

The module-level functions (`encode_int64` and friends) use
`default_encoding()`, which honours the `BASE62_ALPHABET` and `BASE62_PADDING`
Django settings when settings are configured.
'''
from collections import namedtuple
from functools import lru_cache
import logging
import operator
import string
from types import MappingProxyType

from django.conf import settings

from base62.intpacker import (BASE, BIGINT, INT64, InvalidCharacterError,
                              Int64OverflowError, NegativeIntegerError, pack_int,
                              pad, unpack_int)


logger = logging.getLogger(__name__)

STANDARD_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase

__all__ = [
    'STANDARD_ALPHABET', 'STD_ENCODING', 'Alphabet', 'Encoding',
    'FatalDecodeError', 'InvalidAlphabetError', 'InvalidCharacterError',
    'Int64OverflowError', 'NegativeIntegerError', 'decode_to_bigint',
    'decode_to_int64', 'default_encoding', 'encode_bigint', 'encode_int64',
    'must_decode_to_bigint', 'must_decode_to_int64', 'new_encoding', 'padding',
]


class InvalidAlphabetError(ValueError):
    pass


class FatalDecodeError(RuntimeError):
    '''
    Raised by the `must_decode_*` functions. Input reaching them is expected
    to be valid already, so a failure is a bug rather than bad user input.
    The underlying decode error is available as `__cause__`.
    '''


class Alphabet:
    '''
    An ordered set of exactly 62 distinct characters. The character at index
    `i` is the glyph for digit value `i`; the first one doubles as the padding
    character.
    '''
    __slots__ = ('_chars', '_indexes')

    def __init__(self, chars):
        if isinstance(chars, Alphabet):
            chars = chars.chars
        if not isinstance(chars, str):
            raise TypeError('Alphabet must be a string, not {}'.format(
                type(chars).__name__))
        if len(chars) != BASE:
            raise InvalidAlphabetError(
                'Alphabet must contain exactly {} characters, got {}'.format(
                    BASE, len(chars)))
        indexes = {}
        for i, c in enumerate(chars):
            if c in indexes:
                raise InvalidAlphabetError(
                    'Duplicate character {!r} in alphabet at {}'.format(c, i))
            indexes[c] = i
        self._chars = chars
        self._indexes = MappingProxyType(indexes)

    @property
    def chars(self):
        return self._chars

    @property
    def indexes(self):
        return self._indexes

    @property
    def zero(self):
        return self._chars[0]

    def __len__(self):
        return len(self._chars)

    def __contains__(self, c):
        return c in self._indexes

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self):
        return hash(self._chars)

    def __repr__(self):
        return 'Alphabet({!r})'.format(self._chars)

    def __str__(self):
        return self._chars


def padding(n):
    '''
    Option setting the minimum length of encoded strings. Shorter results are
    left padded with the alphabet's zero digit.
    '''
    def option(encoding):
        return encoding.with_padding(n)
    return option


class Encoding(namedtuple('Encoding', ['alphabet', 'padding'])):
    __slots__ = ()

    def __new__(cls, alphabet=STANDARD_ALPHABET, padding=0):
        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)
        padding = operator.index(padding)
        if padding < 0:
            raise ValueError('Padding must not be negative.')
        return super().__new__(cls, alphabet, padding)

    @classmethod
    def _make(cls, iterable):
        # `_replace` builds through here too, so both get validated.
        return cls(*iterable)

    def with_padding(self, n):
        return type(self)(self.alphabet, n)

    def option(self, *opts):
        '''
        Returns a copy of this encoding with each of `opts` applied in turn.
        '''
        encoding = self
        for opt in opts:
            encoding = opt(encoding)
        return encoding

    def _encode(self, n, arithmetic):
        s = pack_int(n, self.alphabet.chars, arithmetic)
        return pad(s, self.padding, self.alphabet.zero)

    def _decode(self, s, arithmetic):
        try:
            return unpack_int(s, self.alphabet.indexes, arithmetic)
        except ValueError as e:
            logger.debug('failed to decode {!r} as {}: {}'.format(
                s, arithmetic.name, e))
            raise

    def encode_int64(self, n):
        '''
        Encodes `n`, which must be in the range of a non-negative signed
        64-bit integer.
        '''
        return self._encode(n, INT64)

    def encode_bigint(self, n):
        return self._encode(n, BIGINT)

    def decode_to_int64(self, s):
        '''
        Raises `InvalidCharacterError` for characters outside the alphabet,
        and `Int64OverflowError` when the value doesn't fit in 64 bits.
        '''
        return self._decode(s, INT64)

    def decode_to_bigint(self, s):
        return self._decode(s, BIGINT)

    def must_decode_to_int64(self, s):
        try:
            return self.decode_to_int64(s)
        except ValueError as e:
            raise FatalDecodeError(str(e)) from e

    def must_decode_to_bigint(self, s):
        try:
            return self.decode_to_bigint(s)
        except ValueError as e:
            raise FatalDecodeError(str(e)) from e


def new_encoding(alphabet, padding=0):
    return Encoding(alphabet, padding)


STD_ENCODING = Encoding(STANDARD_ALPHABET)


@lru_cache(maxsize=None)
def _encoding_from_settings(alphabet, padding):
    logger.debug('building base62 encoding from settings: {!r}, padding={}'.format(
        alphabet, padding))
    return Encoding(alphabet, padding)


def default_encoding():
    '''
    Returns the encoding described by the `BASE62_ALPHABET` and
    `BASE62_PADDING` settings, or `STD_ENCODING` if Django isn't configured.
    '''
    if not settings.configured:
        return STD_ENCODING
    alphabet = getattr(settings, 'BASE62_ALPHABET', STANDARD_ALPHABET)
    padding = getattr(settings, 'BASE62_PADDING', 0)
    if not isinstance(alphabet, (str, Alphabet)):
        raise TypeError('BASE62_ALPHABET must be a string, not {}'.format(
            type(alphabet).__name__))
    padding = operator.index(padding)
    if alphabet == STANDARD_ALPHABET and padding == 0:
        return STD_ENCODING
    return _encoding_from_settings(alphabet, padding)


def encode_int64(n):
    return default_encoding().encode_int64(n)


def encode_bigint(n):
    return default_encoding().encode_bigint(n)


def decode_to_int64(s):
    return default_encoding().decode_to_int64(s)


def decode_to_bigint(s):
    return default_encoding().decode_to_bigint(s)


def must_decode_to_int64(s):
    return default_encoding().must_decode_to_int64(s)


def must_decode_to_bigint(s):
    return default_encoding().must_decode_to_bigint(s)
