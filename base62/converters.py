'''
URL path converters for base62 ids.

Register them in your URLconf::

    from django.urls import path, register_converter
    from base62.converters import Base62Converter

    register_converter(Base62Converter, 'b62')

    urlpatterns = [
        path('p/<b62:pk>/', views.post),
    ]
'''
import re

from base62.encoding import STD_ENCODING


def _alphabet_regex(encoding):
    return '[{}]+'.format(re.escape(encoding.alphabet.chars))


class Base62Converter:
    '''
    Matches a base62 path segment and hands the view a 64-bit int. Segments
    which overflow or contain characters outside the alphabet raise
    `ValueError`, which Django treats as a non-match.
    '''
    encoding = STD_ENCODING
    regex = _alphabet_regex(STD_ENCODING)

    def to_python(self, value):
        return self.encoding.decode_to_int64(value)

    def to_url(self, value):
        return self.encoding.encode_int64(value)


class BigBase62Converter(Base62Converter):
    def to_python(self, value):
        return self.encoding.decode_to_bigint(value)

    def to_url(self, value):
        return self.encoding.encode_bigint(value)


def converter_for(encoding, big=False):
    '''
    Returns a converter class bound to `encoding`, e.g. one with a custom
    alphabet or padding.
    '''
    base = BigBase62Converter if big else Base62Converter
    return type('Base62Converter', (base,), {
        'encoding': encoding,
        'regex': _alphabet_regex(encoding),
    })
