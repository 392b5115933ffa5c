from python_quoted_string.content import ContentChars, ContentCursor
from python_quoted_string.errors import (
    BareForbiddenCharacter, DanglingEscape, ForbiddenContentCharacter,
    InvalidEscapePayload, MissingClosingDelimiter, MissingOpeningDelimiter,
    QuotedStringError)
from python_quoted_string.grammar import CharClass, Mode, classify, is_qtext, is_quotable, is_wsp
from python_quoted_string.policy import (
    HTTP_TOKEN, MIME_TOKEN, NEVER_FORCE, QUOTE_EMPTY,
    NeverForce, QuoteEmpty, QuotingPolicy, TokenPolicy)
from python_quoted_string.quote import quote, quote_if_needed
from python_quoted_string.result import Borrowed, Owned
from python_quoted_string.unquote import Parsed, parse, unquote, validate
from python_quoted_string.utils import strip_quotes

__all__ = [
    'Borrowed', 'Owned',
    'CharClass', 'Mode', 'classify', 'is_qtext', 'is_quotable', 'is_wsp',
    'ContentChars', 'ContentCursor',
    'QuotingPolicy', 'NeverForce', 'QuoteEmpty', 'TokenPolicy',
    'NEVER_FORCE', 'QUOTE_EMPTY', 'HTTP_TOKEN', 'MIME_TOKEN',
    'quote', 'quote_if_needed',
    'Parsed', 'parse', 'unquote', 'validate', 'strip_quotes',
    'QuotedStringError', 'MissingOpeningDelimiter', 'MissingClosingDelimiter',
    'DanglingEscape', 'InvalidEscapePayload', 'BareForbiddenCharacter',
    'ForbiddenContentCharacter',
]
