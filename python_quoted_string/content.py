'''
Lazy access to the content of a quoted-string.

ContentChars yields the logical characters of a quoted-string, resolving
quoted-pairs as it goes, without building the unquoted string. Two
quoted-strings are equal in meaning when their ContentChars are equal, so
'"\\a\\b\\c"' and '"abc"' compare equal.
'''
from itertools import zip_longest

from python_quoted_string.errors import (
    BareForbiddenCharacter, DanglingEscape, InvalidEscapePayload,
    MissingClosingDelimiter, MissingOpeningDelimiter)
from python_quoted_string.grammar import Mode, is_qtext, is_quotable, is_wsp
from python_quoted_string.result import _Result


def check_delimiters(token):
    if not token.startswith('"'):
        raise MissingOpeningDelimiter(token, 0, token[0:1] or None)
    if len(token) < 2 or not token.endswith('"'):
        raise MissingClosingDelimiter(token, len(token))


class ContentCursor(object):
    '''
    Cursor over the content of a quoted-string whose delimiters have been
    checked already.

    `next_char` returns the next logical character, or None once the
    closing quote is reached. `escaped` tells whether the last character
    came from a quoted-pair. A malformed region raises the matching
    QuotedStringError and leaves the cursor on it.
    '''
    def __init__(self, token, mode=Mode.ASCII):
        self.token = token
        self.mode = mode
        self.index = 1
        self.stop = len(token) - 1
        self.escaped = False

    def next_char(self):
        if self.index >= self.stop:
            return None
        c = self.token[self.index]
        if c == '\\':
            if self.index + 1 >= self.stop:
                raise DanglingEscape(self.token, self.index, c)
            payload = self.token[self.index + 1]
            if not is_quotable(payload):
                raise InvalidEscapePayload(self.token, self.index + 1, payload)
            self.index += 2
            self.escaped = True
            return payload
        elif is_qtext(c, self.mode) or is_wsp(c):
            self.index += 1
            self.escaped = False
            return c
        else:
            raise BareForbiddenCharacter(self.token, self.index, c)

    def __iter__(self):
        return self

    def __next__(self):
        c = self.next_char()
        if c is None:
            raise StopIteration
        return c


def _ascii_lower(c):
    if 'A' <= c <= 'Z':
        return chr(ord(c) + 32)
    return c


def _iter_eq(left, right, same):
    for a, b in zip_longest(left, right):
        if a is None or b is None or not same(a, b):
            return False
    return True


class ContentChars(object):
    '''
    The logical characters of `token`.

    The delimiters are checked here; faults inside the content are raised
    while iterating, when the cursor reaches them. Every iteration starts
    over from the beginning of the token.
    '''
    def __init__(self, token, mode=Mode.ASCII):
        check_delimiters(token)
        self.token = token
        self.mode = mode

    def cursor(self):
        return ContentCursor(self.token, self.mode)

    def __iter__(self):
        return self.cursor()

    def _other_chars(self, other):
        if isinstance(other, (ContentChars, str, _Result)):
            return iter(other)
        return None

    def __eq__(self, other):
        right = self._other_chars(other)
        if right is None:
            return NotImplemented
        return _iter_eq(self, right, lambda a, b: a == b)

    def __hash__(self):
        return hash(''.join(self))

    def eq_ignore_ascii_case(self, other):
        right = self._other_chars(other)
        if right is None:
            raise TypeError('can not compare ContentChars with %r' % type(other))
        return _iter_eq(self, right, lambda a, b: _ascii_lower(a) == _ascii_lower(b))

    def __repr__(self):
        return 'ContentChars(%r)' % self.token
