'''
Results of quoting and unquoting.

Both operations avoid building a new string when the input can be used as
is. They return a `Borrowed` view of the input in that case and an `Owned`
string when escaping or unescaping actually rewrote the content. The two
classes share the same read-only interface.
'''


class _Result(object):
    is_borrowed = False

    @property
    def value(self):
        raise NotImplementedError

    def __str__(self):
        return self.value

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def __contains__(self, item):
        return item in self.value

    def __eq__(self, other):
        if isinstance(other, _Result):
            return self.value == other.value
        elif isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)


class Borrowed(_Result):
    '''
    A view of source[start:stop]. The slice is only taken on access.
    '''
    is_borrowed = True

    def __init__(self, source, start=0, stop=None):
        if stop is None:
            stop = len(source)
        self.source = source
        self.start = start
        self.stop = stop

    @property
    def value(self):
        if self.start == 0 and self.stop == len(self.source):
            return self.source
        return self.source[self.start:self.stop]

    def __len__(self):
        return self.stop - self.start

    def __repr__(self):
        return 'Borrowed(%r)' % self.value


class Owned(_Result):

    def __init__(self, value):
        self._value = value

    @property
    def value(self):
        return self._value

    def __repr__(self):
        return 'Owned(%r)' % self._value
