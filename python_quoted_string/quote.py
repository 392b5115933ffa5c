from python_quoted_string.errors import ForbiddenContentCharacter
from python_quoted_string.grammar import CharClass, Mode, classify, is_wsp
from python_quoted_string.policy import QUOTE_EMPTY
from python_quoted_string.result import Borrowed, Owned


def _quote_into(content, out, start, mode):
    for index in range(start, len(content)):
        c = content[index]
        char_class = classify(c, mode)
        if char_class is CharClass.PLAIN_ALLOWED or is_wsp(c):
            out.append(c)
        elif char_class is CharClass.ESCAPABLE_ONLY:
            out.append('\\')
            out.append(c)
        else:
            raise ForbiddenContentCharacter(content, index, c)


def quote(content, mode=Mode.ASCII):
    '''
    Quote `content`, escaping '"' and '\\' with quoted-pairs.

    Whitespace is left bare inside the quotes. Raises
    ForbiddenContentCharacter for characters a quoted-string can not hold
    (control characters, and non-ASCII ones unless `mode` is Mode.UTF8).
    '''
    out = ['"']
    _quote_into(content, out, 0, mode)
    out.append('"')
    return ''.join(out)


def _bare_prefix_length(content, mode):
    '''
    Length of the leading part of `content` that could appear unquoted:
    plain characters, with whitespace only between them.
    '''
    last = len(content) - 1
    for index, c in enumerate(content):
        if classify(c, mode) is CharClass.PLAIN_ALLOWED:
            continue
        if is_wsp(c) and 0 < index < last:
            continue
        return index
    return len(content)


def quote_if_needed(content, policy=QUOTE_EMPTY, mode=Mode.ASCII):
    '''
    Return `content` unchanged as a Borrowed result if it can appear
    without quotes and `policy` does not ask for them, otherwise an Owned
    quoted-string.
    '''
    split = _bare_prefix_length(content, mode)
    if split == len(content) and not policy.needs_quoting(content):
        return Borrowed(content)
    out = ['"', content[0:split]]
    _quote_into(content, out, split, mode)
    out.append('"')
    return Owned(''.join(out))
