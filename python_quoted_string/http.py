import logging

from python_quoted_string.errors import QuotedStringError
from python_quoted_string.grammar import HTTP_TOKEN_CHARACTERS
from python_quoted_string.policy import HTTP_TOKEN
from python_quoted_string.quote import quote_if_needed
from python_quoted_string.unquote import unquote

l = logging.getLogger(__name__)


def parse_quoted_string(quoted_string):
    '''
    Parse a quoted string as defined by RFC 7230 (HTTP/1.1)
    '''
    try:
        return str(unquote(quoted_string))
    except QuotedStringError as e:
        l.debug("Rejected quoted-string: %s", e)
        return False


def parse_token(token):
    '''
    Parse a token as defined by RFC 7230 (HTTP/1.1)
    '''
    if not token:
        return False
    for c in token:
        if c not in HTTP_TOKEN_CHARACTERS:
            return False
    return token


def format_value(value):
    '''
    Format a header parameter value, as a token when possible and as a
    quoted-string otherwise.
    '''
    return str(quote_if_needed(value, HTTP_TOKEN))
