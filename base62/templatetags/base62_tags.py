import logging

from django import template

from base62.encoding import default_encoding


logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def base62encode(value):
    '''
    Renders an int as base62 using the default encoding, or an empty string
    if it can't be encoded. A misconfigured default encoding still raises.
    '''
    encoding = default_encoding()
    try:
        return encoding.encode_bigint(value)
    except (TypeError, ValueError) as e:
        logger.debug('base62encode failed for {!r}: {}'.format(value, e))
        return ''


@register.filter
def base62decode(value):
    encoding = default_encoding()
    if not isinstance(value, str):
        logger.debug('base62decode got non-string {!r}'.format(value))
        return ''
    try:
        return encoding.decode_to_bigint(value)
    except ValueError as e:
        logger.debug('base62decode failed for {!r}: {}'.format(value, e))
        return ''
