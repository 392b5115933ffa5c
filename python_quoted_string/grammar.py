'''
Character classes of the RFC 5322 quoted-string grammar, as reused by MIME
and HTTP:

    quoted-string = DQUOTE *( *WSP qcontent ) *WSP DQUOTE
    qcontent      = qtext / quoted-pair
    qtext         = %d33 / %d35-91 / %d93-126
    quoted-pair   = ("\\" (VCHAR / WSP))

Under the RFC 6532 extension any non-ASCII code point is also valid qtext.
Quoted-pairs stay US-ASCII only.
'''
from enum import Enum

DQUOTE = '"'
BACKSLASH = '\\'
WSP = (' ', chr(9))

VCHAR = frozenset(chr(n) for n in range(33, 127))
QTEXT = VCHAR - frozenset([DQUOTE, BACKSLASH])

# RFC 7230 tchar
HTTP_TOKEN_CHARACTERS = frozenset(
    [chr(n) for n in range(ord('0'), ord('9') + 1)] +
    [chr(n) for n in range(ord('A'), ord('Z') + 1)] +
    [chr(n) for n in range(ord('a'), ord('z') + 1)] +
    list("!#$%&'*+-.^_`|~"))

# RFC 2045 token: any VCHAR except tspecials
MIME_TOKEN_CHARACTERS = VCHAR - frozenset('()<>@,;:\\"/[]?=')


class Mode(Enum):
    ASCII = 'ascii'
    UTF8 = 'utf8'


class CharClass(Enum):
    PLAIN_ALLOWED = 'plain'
    ESCAPABLE_ONLY = 'escapable'
    FORBIDDEN = 'forbidden'


def is_qtext(c, mode=Mode.ASCII):
    if c in QTEXT:
        return True
    return mode is Mode.UTF8 and ord(c) > 127


def is_wsp(c):
    return c in WSP


def is_quotable(c):
    '''
    True if `c` may follow a backslash in a quoted-pair.
    '''
    return c in VCHAR or c in WSP


def classify(c, mode=Mode.ASCII):
    '''
    Classify a content character for quoting.

    Whitespace is reported as ESCAPABLE_ONLY: it can always be written as a
    quoted-pair, and whether it may also appear bare depends on where it
    sits, which callers decide with `is_wsp`.
    '''
    if is_qtext(c, mode):
        return CharClass.PLAIN_ALLOWED
    elif is_quotable(c):
        return CharClass.ESCAPABLE_ONLY
    else:
        return CharClass.FORBIDDEN
