'''Base62 encoding of integer ids, for Django.

Encodes non-negative integers, either 64-bit or arbitrarily large, as compact
URL-safe strings over a 62 character alphabet, and decodes them again. Ships a
URL path converter and template filters for using base62 ids in Django URLs
and templates.

'''
