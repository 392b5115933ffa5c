'''
Quoting policies decide whether content must be quoted in a given context
even though every character of it could appear bare.
'''
from python_quoted_string.grammar import HTTP_TOKEN_CHARACTERS, MIME_TOKEN_CHARACTERS


class QuotingPolicy(object):
    def needs_quoting(self, content):
        raise NotImplementedError('Unimplemented')


class NeverForce(QuotingPolicy):
    def needs_quoting(self, content):
        return False


class QuoteEmpty(QuotingPolicy):
    def needs_quoting(self, content):
        return content == ''


class TokenPolicy(QuotingPolicy):
    '''
    Content may stay bare only if it is a non-empty token made of `allowed`
    characters, e.g. a media-type parameter value.
    '''
    def __init__(self, allowed):
        super(TokenPolicy, self).__init__()
        self.allowed = frozenset(allowed)

    def needs_quoting(self, content):
        if not content:
            return True
        for c in content:
            if c not in self.allowed:
                return True
        return False


NEVER_FORCE = NeverForce()
QUOTE_EMPTY = QuoteEmpty()
HTTP_TOKEN = TokenPolicy(HTTP_TOKEN_CHARACTERS)
MIME_TOKEN = TokenPolicy(MIME_TOKEN_CHARACTERS)
