from python_quoted_string.utils import annotate


class QuotedStringError(ValueError):
    '''
    Base class of all quoting and unquoting failures.

    `index` is the position in the input string where the fault was found,
    `offset` the same position counted in UTF-8 bytes, and `char` the
    offending character (None when the input ended early).
    '''
    description = 'invalid quoted-string'

    def __init__(self, text, index, char=None):
        self.text = text
        self.index = index
        self.offset = len(text[0:index].encode('utf-8', 'surrogatepass'))
        self.char = char
        super(QuotedStringError, self).__init__(
            '%s at offset %d (offending character is in []): %r'
            % (self.description, self.offset, annotate(text, index)))


class MissingOpeningDelimiter(QuotedStringError):
    description = 'quoted-string does not start with "'


class MissingClosingDelimiter(QuotedStringError):
    description = 'quoted-string does not end with "'


class DanglingEscape(QuotedStringError):
    description = 'escape character has nothing to escape'


class InvalidEscapePayload(QuotedStringError):
    description = 'character can not be represented with a quoted-pair'


class BareForbiddenCharacter(QuotedStringError):
    description = 'character must not appear unescaped'


class ForbiddenContentCharacter(QuotedStringError):
    description = 'character can not be represented in a quoted-string'
