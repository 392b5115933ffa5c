import logging

# Make sure the package logger never falls back to the last-resort handler
logging.getLogger('python_quoted_string').addHandler(logging.NullHandler())


def annotate(text, index):
    '''
    Mark the character at `index` with brackets, e.g. annotate('"ab', 3)
    gives '"ab[]'.
    '''
    return "%s[%s]%s" % (text[0:index],
                         index < len(text) and text[index] or '',
                         index + 1 < len(text) and text[index+1:] or '')


def strip_quotes(text):
    '''
    Return the text between the surrounding double quotes, or None if
    `text` does not both start and end with one.
    '''
    if len(text) < 2 or not text.startswith('"') or not text.endswith('"'):
        return None
    return text[1:-1]
