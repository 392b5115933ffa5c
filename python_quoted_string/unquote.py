import logging
from collections import namedtuple

from python_quoted_string.content import ContentCursor, check_delimiters
from python_quoted_string.errors import (
    BareForbiddenCharacter, InvalidEscapePayload, MissingClosingDelimiter,
    MissingOpeningDelimiter, QuotedStringError)
from python_quoted_string.grammar import Mode, is_qtext, is_quotable, is_wsp
from python_quoted_string.result import Borrowed, Owned

l = logging.getLogger(__name__)

Parsed = namedtuple('Parsed', ['quoted_string', 'tail'])


def unquote(token, mode=Mode.ASCII):
    '''
    Return the content of the quoted-string `token`.

    The result borrows from `token` unless a quoted-pair had to be
    resolved. Raises a QuotedStringError subclass if `token` is not exactly
    one valid quoted-string.
    '''
    check_delimiters(token)
    cursor = ContentCursor(token, mode)
    pieces = []
    run_start = 1
    while True:
        index = cursor.index
        c = cursor.next_char()
        if c is None:
            break
        if cursor.escaped:
            pieces.append(token[run_start:index])
            pieces.append(c)
            run_start = cursor.index
    if not pieces:
        return Borrowed(token, 1, cursor.stop)
    pieces.append(token[run_start:cursor.stop])
    return Owned(''.join(pieces))


def parse(text, mode=Mode.ASCII):
    '''
    Read one quoted-string from the start of `text`.

    Returns Parsed(quoted_string, tail) where tail is the unread rest of
    `text`. Unlike `unquote`, a backslash before the final '"' escapes it,
    so '"ab\\"' is missing its closing quote.
    '''
    if not text.startswith('"'):
        raise MissingOpeningDelimiter(text, 0, text[0:1] or None)
    index = 1
    while index < len(text):
        c = text[index]
        if c == '\\':
            if index + 1 >= len(text):
                break
            payload = text[index + 1]
            if not is_quotable(payload):
                raise InvalidEscapePayload(text, index + 1, payload)
            index += 2
        elif c == '"':
            return Parsed(text[0:index+1], text[index+1:])
        elif is_qtext(c, mode) or is_wsp(c):
            index += 1
        else:
            raise BareForbiddenCharacter(text, index, c)
    raise MissingClosingDelimiter(text, len(text))


def validate(text, mode=Mode.ASCII):
    '''
    True if `text` is exactly one quoted-string.
    '''
    try:
        return parse(text, mode).tail == ''
    except QuotedStringError as e:
        l.debug("Invalid quoted-string: %s", e)
        return False
