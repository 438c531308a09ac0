'''
Functions for packing non-negative ints into strings of alphabet digits, and
unpacking them again.

The radix conversion is written once, in `pack_int` and `unpack_int`, and is
parameterised by an arithmetic domain. Two domains are provided: `INT64`, for
values that must fit a signed 64-bit integer, and `BIGINT`, for values of any
size.
'''
import operator


BASE = 62

INT64_MAX = 2 ** 63 - 1


class InvalidCharacterError(ValueError):
    '''
    Raised when decoding a string containing a character that isn't in the
    alphabet. `char` is the offending character and `position` its 0-based
    index in the input.
    '''
    def __init__(self, char, position):
        super().__init__('Invalid character {!r} at {}'.format(char, position))
        self.char = char
        self.position = position


class NegativeIntegerError(ValueError):
    def __init__(self, n):
        super().__init__('Cannot encode negative integer {}'.format(n))
        self.value = n


class Int64OverflowError(OverflowError, ValueError):
    pass


class Arithmetic:
    '''
    Arbitrary-precision arithmetic over non-negative ints.

    Subclasses narrow the domain by overriding `check` (applied to values
    about to be encoded) and `accumulate` (applied at each decoding step).
    '''
    name = 'bigint'

    def check(self, n):
        n = operator.index(n)
        if n < 0:
            raise NegativeIntegerError(n)
        return n

    def divmod(self, n, base):
        return divmod(n, base)

    def is_zero(self, n):
        return n == 0

    def accumulate(self, n, base, digit):
        return n * base + digit


class Int64Arithmetic(Arithmetic):
    '''
    Arithmetic confined to the non-negative half of a signed 64-bit int.
    Overflow raises `Int64OverflowError` rather than wrapping around.
    '''
    name = 'int64'

    def check(self, n):
        n = super().check(n)
        if n > INT64_MAX:
            raise Int64OverflowError(
                '{} does not fit in a signed 64-bit integer'.format(n))
        return n

    def accumulate(self, n, base, digit):
        n = super().accumulate(n, base, digit)
        if n > INT64_MAX:
            raise Int64OverflowError(
                'Decoded value exceeds the signed 64-bit integer range')
        return n


BIGINT = Arithmetic()
INT64 = Int64Arithmetic()


def pack_int(n, chars, arithmetic=BIGINT):
    '''
    Returns `n` written in base `len(chars)`, most significant digit first.
    Zero packs to a single zero digit, never to an empty string.
    '''
    n = arithmetic.check(n)
    base = len(chars)
    s = []
    while True:
        n, r = arithmetic.divmod(n, base)
        s.append(chars[r])
        if arithmetic.is_zero(n):
            break
    return ''.join(reversed(s))


def unpack_int(s, indexes, arithmetic=BIGINT):
    '''
    Inverse of `pack_int`. `indexes` maps each alphabet character to its
    digit value. The empty string unpacks to 0.
    '''
    base = len(indexes)
    n = 0
    for position, c in enumerate(s):
        try:
            digit = indexes[c]
        except KeyError:
            raise InvalidCharacterError(c, position) from None
        n = arithmetic.accumulate(n, base, digit)
    return n


def pad(s, minlen, zero):
    '''
    Left-pads `s` with the `zero` character up to `minlen`. Strings already
    at least that long come back unchanged.
    '''
    if len(s) >= minlen:
        return s
    return zero * (minlen - len(s)) + s
