import unittest

from python_quoted_string import *
from python_quoted_string.http import *
from python_quoted_string.utils import annotate


class HttpTests(unittest.TestCase):
    def test_parse_quoted_string(self):
        test_cases = [
            ('""', ''), # OK
            ('"hello"', 'hello'), # OK
            ('', False), # no quotes
            ('"', False), # no end-quote
            ('a"', False), # no start-quote
            ('"a', False), # no end-quote
            ('a', False), # no quotes
            ('"\\""', '"'), # escaping quote
            ('"\\\\"', '\\'), # escaping backslash
            ('"hello\\"', False), # dangling escape
            ('"a"b"', False), # bare quote
            ('"tab\x01"', False) # control character
            ]

        for test_case in test_cases:
            self.assertEqual(test_case[1], parse_quoted_string(test_case[0]))

    def test_parse_token(self):
        legal_tokens = [
            "hello_world!",
            "hmm.",
            "123-47"]

        illegal_tokens = [
            "",
            "tabit\t",
            "a/b",
            "what's up, doc?"]

        for token in legal_tokens:
            self.assertEqual(token, parse_token(token))

        for token in illegal_tokens:
            self.assertFalse(parse_token(token))

    def test_format_value(self):
        self.assertEqual('utf-8', format_value('utf-8'))
        self.assertEqual('"text/plain"', format_value('text/plain'))
        self.assertEqual('""', format_value(''))
        self.assertEqual('"a \\"b\\""', format_value('a "b"'))


class GrammarTests(unittest.TestCase):
    def test_qtext(self):
        for n in [33] + list(range(35, 92)) + list(range(93, 127)):
            self.assertTrue(is_qtext(chr(n)), n)
        for c in ['"', '\\', ' ', '\t', '\r', '\n', '\x00', '\x7f']:
            self.assertFalse(is_qtext(c), repr(c))

    def test_qtext_utf8(self):
        self.assertFalse(is_qtext('\xe9'))
        self.assertTrue(is_qtext('\xe9', Mode.UTF8))
        self.assertTrue(is_qtext('→', Mode.UTF8))
        self.assertFalse(is_qtext('\x7f', Mode.UTF8))

    def test_is_quotable(self):
        for c in ' \t"\\a~!':
            self.assertTrue(is_quotable(c), repr(c))
        for c in ['\n', '\r', '\x00', '\x7f', '\xe9']:
            self.assertFalse(is_quotable(c), repr(c))

    def test_is_wsp(self):
        self.assertTrue(is_wsp(' '))
        self.assertTrue(is_wsp('\t'))
        self.assertFalse(is_wsp('\n'))
        self.assertFalse(is_wsp('a'))

    def test_classify(self):
        self.assertEqual(CharClass.PLAIN_ALLOWED, classify('a'))
        self.assertEqual(CharClass.ESCAPABLE_ONLY, classify('"'))
        self.assertEqual(CharClass.ESCAPABLE_ONLY, classify('\\'))
        self.assertEqual(CharClass.ESCAPABLE_ONLY, classify(' '))
        self.assertEqual(CharClass.FORBIDDEN, classify('\x01'))
        self.assertEqual(CharClass.FORBIDDEN, classify('\xe9'))
        self.assertEqual(CharClass.PLAIN_ALLOWED, classify('\xe9', Mode.UTF8))
        self.assertEqual(CharClass.FORBIDDEN, classify('\x01', Mode.UTF8))


class ResultTests(unittest.TestCase):
    def test_borrowed(self):
        source = '"bcd"'
        result = Borrowed(source, 1, 4)
        self.assertTrue(result.is_borrowed)
        self.assertEqual('bcd', result)
        self.assertEqual('bcd', str(result))
        self.assertEqual(3, len(result))
        self.assertEqual(['b', 'c', 'd'], list(result))
        self.assertTrue('c' in result)

    def test_borrowed_whole_source(self):
        source = 'whole'
        self.assertIs(source, Borrowed(source).value)

    def test_owned(self):
        result = Owned('a"b')
        self.assertFalse(result.is_borrowed)
        self.assertEqual('a"b', result)
        self.assertEqual(3, len(result))

    def test_borrowed_equals_owned(self):
        self.assertEqual(Borrowed('"ab"', 1, 3), Owned('ab'))
        self.assertEqual(hash(Borrowed('"ab"', 1, 3)), hash(Owned('ab')))
        self.assertNotEqual(Borrowed('ab'), Owned('abc'))


class QuoteTests(unittest.TestCase):
    def test_quote(self):
        test_cases = [
            ('this is simple', '"this is simple"'),
            ('with quotes"  ', '"with quotes\\"  "'),
            ('with slash\\  ', '"with slash\\\\  "'),
            ('', '""'),
            ('\t', '"\t"'),
            ]

        for unquoted, quoted in test_cases:
            self.assertEqual(quoted, quote(unquoted))

    def test_quote_leaves_whitespace_bare(self):
        # whitespace is allowed between qcontent, so it is never escaped
        self.assertEqual('" a\tb "', quote(' a\tb '))
        self.assertFalse('\\' in quote(' a\tb '))

    def test_quote_forbidden(self):
        try:
            quote('a\x07b')
            self.fail('expected ForbiddenContentCharacter')
        except ForbiddenContentCharacter as e:
            self.assertEqual(1, e.offset)
            self.assertEqual('\x07', e.char)

    def test_quote_utf8(self):
        self.assertRaises(ForbiddenContentCharacter, quote, 'caf\xe9')
        self.assertEqual('"caf\xe9"', quote('caf\xe9', Mode.UTF8))
        self.assertEqual('"caf\xe9 \\"x\\""', quote('caf\xe9 "x"', Mode.UTF8))

    def test_quote_if_needed_unneeded(self):
        content = 'abcdef'
        result = quote_if_needed(content)
        self.assertTrue(result.is_borrowed)
        self.assertEqual('abcdef', result)
        self.assertIs(content, result.value)

    def test_quote_if_needed_interior_whitespace(self):
        result = quote_if_needed('a b\tc')
        self.assertTrue(result.is_borrowed)
        self.assertEqual('a b\tc', result)

    def test_quote_if_needed_edge_whitespace(self):
        for content, quoted in [(' ab', '" ab"'), ('ab ', '"ab "'), (' ', '" "'),
                                ('a  b ', '"a  b "')]:
            result = quote_if_needed(content)
            self.assertFalse(result.is_borrowed)
            self.assertEqual(quoted, result)

    def test_quote_if_needed_escapes(self):
        result = quote_if_needed('say "hi"')
        self.assertFalse(result.is_borrowed)
        self.assertEqual('"say \\"hi\\""', result)

    def test_quote_if_needed_escapes_only_non_qtext(self):
        result = quote_if_needed('a\\b!#~')
        self.assertEqual('"a\\\\b!#~"', result)
        self.assertEqual(2, str(result).count('\\'))

    def test_quote_if_needed_empty(self):
        result = quote_if_needed('', QUOTE_EMPTY)
        self.assertFalse(result.is_borrowed)
        self.assertEqual('""', result)
        self.assertEqual(2, len(result))

        result = quote_if_needed('', NEVER_FORCE)
        self.assertTrue(result.is_borrowed)
        self.assertEqual('', result)

    def test_quote_if_needed_token_policy(self):
        self.assertTrue(quote_if_needed('abc', HTTP_TOKEN).is_borrowed)
        self.assertEqual('"a b"', quote_if_needed('a b', HTTP_TOKEN))
        self.assertEqual('"text/html"', quote_if_needed('text/html', HTTP_TOKEN))
        self.assertEqual('""', quote_if_needed('', HTTP_TOKEN))
        self.assertTrue(quote_if_needed("a.b{x}", MIME_TOKEN).is_borrowed)
        self.assertEqual('"a@b"', quote_if_needed('a@b', MIME_TOKEN))

    def test_quote_if_needed_custom_policy(self):
        class DotPolicy(QuotingPolicy):
            def needs_quoting(self, content):
                return '..' in content

        self.assertTrue(quote_if_needed('a.b', DotPolicy()).is_borrowed)
        self.assertEqual('"a..b"', quote_if_needed('a..b', DotPolicy()))

    def test_quote_if_needed_utf8(self):
        result = quote_if_needed('caf\xe9', QUOTE_EMPTY, Mode.UTF8)
        self.assertTrue(result.is_borrowed)
        self.assertEqual('caf\xe9', result)

        try:
            quote_if_needed('caf\xe9', QUOTE_EMPTY)
            self.fail('expected ForbiddenContentCharacter')
        except ForbiddenContentCharacter as e:
            self.assertEqual(3, e.offset)
            self.assertEqual('\xe9', e.char)

    def test_quote_if_needed_forbidden(self):
        for content, offset in [('ab\x00', 2), ('a "b\x1b', 4), ('\x7f', 0)]:
            try:
                quote_if_needed(content, NEVER_FORCE)
                self.fail('expected ForbiddenContentCharacter for %r' % content)
            except ForbiddenContentCharacter as e:
                self.assertEqual(offset, e.offset)

    def test_round_trip(self):
        for content in ['', 'plain', 'with "quotes"', 'back\\slash', ' lead',
                        'trail\t', '\\"\\"', 'a\tb c']:
            self.assertEqual(content, unquote(quote(content)))
            self.assertEqual(content, unquote(quote(content, Mode.UTF8), Mode.UTF8))


class UnquoteTests(unittest.TestCase):
    def test_unnecessary_quoted(self):
        result = unquote('"simple"')
        self.assertTrue(result.is_borrowed)
        self.assertEqual('simple', result)

    def test_quoted_but_no_quoted_pair(self):
        result = unquote('"abc def"')
        self.assertTrue(result.is_borrowed)
        self.assertEqual('abc def', result)

    def test_with_quoted_pair(self):
        result = unquote(r'"a\"b"')
        self.assertFalse(result.is_borrowed)
        self.assertEqual('a"b', result)

    def test_with_multiple_quoted_pairs(self):
        result = unquote(r'"a\"\bc\ d"')
        self.assertFalse(result.is_borrowed)
        self.assertEqual('a"bc d', result)

    def test_quoted_pair_at_edges(self):
        self.assertEqual('\\x\\', unquote(r'"\\x\\"'))
        self.assertEqual('"', unquote(r'"\""'))

    def test_empty(self):
        result = unquote('""')
        self.assertTrue(result.is_borrowed)
        self.assertEqual('', result)

    def test_bare_whitespace(self):
        result = unquote('" a\tb "')
        self.assertTrue(result.is_borrowed)
        self.assertEqual(' a\tb ', result)

    def test_escaped_whitespace(self):
        result = unquote('"\\ a\\\tb\\ "')
        self.assertFalse(result.is_borrowed)
        self.assertEqual(' a\tb ', result)
        self.assertEqual(unquote('" a\tb "'), result)

    def test_utf8(self):
        self.assertEqual('caf\xe9', unquote('"caf\xe9"', Mode.UTF8))
        self.assertTrue(unquote('"caf\xe9"', Mode.UTF8).is_borrowed)
        self.assertRaises(BareForbiddenCharacter, unquote, '"caf\xe9"')

    def assertFault(self, error_class, offset, token, mode=Mode.ASCII):
        try:
            unquote(token, mode)
        except error_class as e:
            self.assertEqual(offset, e.offset, token)
            self.assertEqual(token, e.text)
            return e
        self.fail('expected %s for %r' % (error_class.__name__, token))

    def test_faults(self):
        self.assertFault(MissingOpeningDelimiter, 0, 'ab')
        self.assertFault(MissingOpeningDelimiter, 0, '')
        self.assertFault(MissingOpeningDelimiter, 0, 'a"')
        self.assertFault(MissingClosingDelimiter, 3, '"ab')
        self.assertFault(MissingClosingDelimiter, 1, '"')
        self.assertFault(DanglingEscape, 3, '"ab\\"')
        self.assertFault(DanglingEscape, 1, '"\\"')
        self.assertFault(BareForbiddenCharacter, 2, '"a"b"')
        self.assertFault(BareForbiddenCharacter, 2, '"a\x07"')
        self.assertFault(BareForbiddenCharacter, 2, '"a\r\n b"')
        self.assertFault(InvalidEscapePayload, 3, '"a\\\x07"')
        self.assertFault(InvalidEscapePayload, 5, '"caf\\\xe9"', Mode.UTF8)

    def test_fault_after_multibyte_character(self):
        try:
            unquote('"\xe9\xe9\x01"', Mode.UTF8)
            self.fail('expected BareForbiddenCharacter')
        except BareForbiddenCharacter as e:
            self.assertEqual(3, e.index)
            self.assertEqual(5, e.offset)
            self.assertEqual('\x01', e.char)

        try:
            quote('\xe9 \x01', Mode.UTF8)
            self.fail('expected ForbiddenContentCharacter')
        except ForbiddenContentCharacter as e:
            self.assertEqual(2, e.index)
            self.assertEqual(3, e.offset)

        try:
            parse('"→\\\x00"', Mode.UTF8)
            self.fail('expected InvalidEscapePayload')
        except InvalidEscapePayload as e:
            self.assertEqual(3, e.index)
            self.assertEqual(5, e.offset)

    def test_fault_details(self):
        e = self.assertFault(BareForbiddenCharacter, 2, '"a"b"')
        self.assertEqual('"', e.char)
        self.assertTrue(isinstance(e, QuotedStringError))
        self.assertTrue(isinstance(e, ValueError))

        e = self.assertFault(MissingOpeningDelimiter, 0, '')
        self.assertEqual(None, e.char)

    def test_annotate(self):
        self.assertEqual('a[b]c', annotate('abc', 1))
        self.assertEqual('"ab[]', annotate('"ab', 3))
        self.assertEqual('[a]', annotate('a', 0))


class ParseTests(unittest.TestCase):
    def test_parse_simple(self):
        self.assertEqual(Parsed('"simple"', ''), parse('"simple"'))

    def test_parse_with_tail(self):
        parsed = parse('"simple"; abc')
        self.assertEqual('"simple"', parsed.quoted_string)
        self.assertEqual('; abc', parsed.tail)

    def test_parse_with_quoted_pairs(self):
        self.assertEqual(Parsed(r'"si\"m\\ple"', ''), parse(r'"si\"m\\ple"'))
        self.assertEqual(Parsed(r'"sim\p\le"', ''), parse(r'"sim\p\le"'))

    def test_parse_list(self):
        parsed = parse('"list of"; "quoted strings"')
        self.assertEqual('"list of"', parsed.quoted_string)
        self.assertEqual('; "quoted strings"', parsed.tail)

    def test_parse_faults(self):
        test_cases = [
            ('simple', MissingOpeningDelimiter, 0),
            ('', MissingOpeningDelimiter, 0),
            ('"simple\\"', MissingClosingDelimiter, 9),
            ('"simple', MissingClosingDelimiter, 7),
            ('"simp\x00le"', BareForbiddenCharacter, 5),
            ('"a\\\x00"', InvalidEscapePayload, 3),
            ]

        for text, error_class, offset in test_cases:
            try:
                parse(text)
                self.fail('expected %s for %r' % (error_class.__name__, text))
            except error_class as e:
                self.assertEqual(offset, e.offset, text)

    def test_validate(self):
        self.assertTrue(validate('"that\\"s strange"'))
        self.assertTrue(validate('""'))
        self.assertFalse(validate('ups'))
        self.assertFalse(validate('"nice!"ups whats here?"'))
        self.assertFalse(validate('"caf\xe9"'))
        self.assertTrue(validate('"caf\xe9"', Mode.UTF8))

    def test_strip_quotes(self):
        self.assertEqual(None, strip_quotes(''))
        self.assertEqual(None, strip_quotes('"'))
        self.assertEqual('', strip_quotes('""'))
        self.assertEqual(None, strip_quotes('"abc'))
        self.assertEqual(None, strip_quotes('abc"'))
        self.assertEqual('simple', strip_quotes('"simple"'))


class ContentCharsTests(unittest.TestCase):
    def test_missing_double_quotes(self):
        self.assertRaises(MissingOpeningDelimiter, ContentChars, 'abcdef')
        self.assertRaises(MissingClosingDelimiter, ContentChars, '"abcdef')
        self.assertRaises(MissingClosingDelimiter, ContentChars, '"')

    def test_unnecessary_quoted(self):
        self.assertEqual(list('abcdef'), list(ContentChars('"abcdef"')))

    def test_quoted(self):
        self.assertEqual(list('abc def'), list(ContentChars('"abc def"')))

    def test_with_quoted_pair(self):
        self.assertEqual(['a', 'b', 'c', '"', ' ', 'd', 'e', 'f'],
                         list(ContentChars(r'"abc\" \def"')))

    def test_empty(self):
        self.assertEqual([], list(ContentChars('""')))
        self.assertEqual(ContentChars('""'), '')

    def test_semantic_equality(self):
        escaped = ContentChars(r'"\a\b\c"')
        plain = ContentChars('"abc"')
        self.assertEqual(['a', 'b', 'c'], list(escaped))
        self.assertEqual(['a', 'b', 'c'], list(plain))
        self.assertEqual(escaped, plain)
        self.assertEqual(plain, escaped)
        self.assertEqual(escaped, escaped)

    def test_equality_with_str(self):
        self.assertTrue(ContentChars(r'"a\"b"') == 'a"b')
        self.assertTrue('a"b' == ContentChars(r'"a\"b"'))
        self.assertFalse(ContentChars('"ab"') == 'abc')
        self.assertFalse(ContentChars('"abc"') == 'ab')
        self.assertFalse(ContentChars('"abc"') == 'abd')
        self.assertFalse(ContentChars('"abc"') == 5)

    def test_escaped_and_bare_whitespace(self):
        self.assertEqual(ContentChars('"a b"'), ContentChars(r'"a\ b"'))
        self.assertEqual(ContentChars('"a\tb"'), ContentChars('"a\\\tb"'))
        self.assertNotEqual(ContentChars('"a b"'), ContentChars('"a\tb"'))

    def test_equality_with_unquoted_content(self):
        for token in ['""', '"abc"', r'"a\"b"', r'"a\ b"']:
            self.assertTrue(ContentChars(token) == unquote(token), token)
            self.assertTrue(unquote(token) == ContentChars(token), token)
            self.assertTrue(ContentChars(token).eq_ignore_ascii_case(unquote(token)), token)
        self.assertTrue(ContentChars(r'"\a\b"') == unquote('"ab"'))
        self.assertFalse(ContentChars('"ab"') == unquote('"abc"'))
        self.assertTrue(ContentChars('"AB"').eq_ignore_ascii_case(unquote(r'"a\b"')))

    def test_consistent_with_unquote(self):
        tokens = ['""', '"abc"', r'"\a\b\c"', r'"a\"b"', '"a b"', r'"a\ b"', '"ab"']
        for left in tokens:
            for right in tokens:
                self.assertEqual(unquote(left) == unquote(right),
                                 ContentChars(left) == ContentChars(right),
                                 (left, right))

    def test_restartable(self):
        content_chars = ContentChars(r'"a\"b"')
        self.assertEqual(list(content_chars), list(content_chars))
        self.assertEqual(['a', '"', 'b'], list(content_chars))

    def test_cursor(self):
        cursor = ContentChars(r'"a\"b"').cursor()
        self.assertEqual('a', cursor.next_char())
        self.assertFalse(cursor.escaped)
        self.assertEqual('"', cursor.next_char())
        self.assertTrue(cursor.escaped)
        self.assertEqual('b', cursor.next_char())
        self.assertEqual(None, cursor.next_char())
        self.assertEqual(None, cursor.next_char())

    def test_dangling_escape(self):
        content_chars = ContentChars('"ab\\"')
        cursor = content_chars.cursor()
        self.assertEqual('a', cursor.next_char())
        self.assertEqual('b', cursor.next_char())
        try:
            cursor.next_char()
            self.fail('expected DanglingEscape')
        except DanglingEscape as e:
            self.assertEqual(3, e.offset)
        self.assertRaises(DanglingEscape, list, content_chars)

    def test_bare_quote(self):
        self.assertRaises(BareForbiddenCharacter, list, ContentChars('"a"b"'))

    def test_invalid_escape_payload(self):
        self.assertRaises(InvalidEscapePayload, list, ContentChars('"a\\\x01"'))

    def test_equality_surfaces_faults(self):
        self.assertRaises(DanglingEscape, lambda: ContentChars('"ab\\"') == 'abc')

    def test_utf8(self):
        self.assertEqual('caf\xe9', ContentChars('"caf\xe9"', Mode.UTF8))
        self.assertRaises(BareForbiddenCharacter, list, ContentChars('"caf\xe9"'))

    def test_eq_ignore_ascii_case(self):
        left = ContentChars('"abc"')
        self.assertTrue(left.eq_ignore_ascii_case(ContentChars('"aBc"')))
        self.assertTrue(left.eq_ignore_ascii_case(ContentChars(r'"A\B\c"')))
        self.assertTrue(left.eq_ignore_ascii_case('ABC'))
        self.assertFalse(left.eq_ignore_ascii_case('ABD'))
        self.assertFalse(left.eq_ignore_ascii_case('AB'))
        self.assertFalse(ContentChars('"\xe9"', Mode.UTF8).eq_ignore_ascii_case('\xc9'))
        self.assertRaises(TypeError, left.eq_ignore_ascii_case, 5)

    def test_hash(self):
        self.assertEqual(hash(ContentChars(r'"\a\b"')), hash(ContentChars('"ab"')))
        self.assertEqual(1, len(set([ContentChars(r'"\a\b"'), ContentChars('"ab"')])))
