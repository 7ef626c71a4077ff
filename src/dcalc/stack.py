from .util import EmptyStack, InsufficientDepth, format_value


class Stack:
    '''
    LIFO of values, indexed from the top: 0 is the top, 1 just below it, etc.
    '''

    def __init__(self, values=()):
        '''
        :param values: Initial contents, leftmost at the bottom.
        '''
        self._values = list(values)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        '''
        Iterate bottom to top.
        '''
        return iter(self._values)

    def __eq__(self, other):
        if isinstance(other, Stack):
            return self._values == other._values
        return NotImplemented

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._values)

    def __str__(self):
        '''
        One "index: value" line per element, bottom first.
        '''
        depth = len(self._values)
        return ''.join('{}: {}\n'.format(depth - position - 1,
                                         format_value(value))
                       for position, value
                       in enumerate(self._values))

    def push(self, value):
        self._values.append(value)

    def pop(self):
        if not self._values:
            raise EmptyStack()
        return self._values.pop()

    def top(self):
        if not self._values:
            raise EmptyStack()
        return self._values[-1]

    def settop(self, value):
        '''
        Replace the top in place.
        '''
        self.top()
        self._values[-1] = value

    def _position(self, n):
        if not 0 <= n < len(self._values):
            raise InsufficientDepth(n)
        return len(self._values) - n - 1

    def nth(self, n):
        return self._values[self._position(n)]

    def setnth(self, n, value):
        self._values[self._position(n)] = value

    def clear(self):
        self._values.clear()

    def rotate(self, amount):
        '''
        Rotate the topmost |amount| elements as a block.

        Positive amounts raise the bottom of the block to the top, negative
        amounts sink the top to the bottom of the block.
        '''
        count = abs(amount)
        if count == 0:
            return
        if count > len(self._values):
            raise InsufficientDepth(count)
        block = self._values[-count:]
        if amount > 0:
            block = block[1:] + block[:1]
        else:
            block = block[-1:] + block[:-1]
        self._values[-count:] = block
