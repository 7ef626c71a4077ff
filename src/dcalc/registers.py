from .stack import Stack
from .util import EmptyStack, RegisterNotSet, RegisterUnderflow


class Registers:
    '''
    Bank of registers, keyed by a single character, each its own stack.

    Registers spring into existence, empty, the first time they're written to
    or popped from, and are never removed afterwards.
    '''

    def __init__(self):
        self._stacks = dict()

    def __contains__(self, register):
        return register in self._stacks

    def __iter__(self):
        return iter(self._stacks)

    def stack(self, register):
        '''
        Return the register's stack, creating it if need be.
        '''
        return self._stacks.setdefault(register, Stack())

    def push(self, register, value):
        self.stack(register).push(value)

    def pop(self, register):
        try:
            return self.stack(register).pop()
        except EmptyStack as e:
            raise RegisterUnderflow(register) from e

    def top(self, register):
        '''
        Peek at the register's top. Unlike pop, never creates the register.
        '''
        if register not in self._stacks:
            raise RegisterNotSet(register)
        try:
            return self._stacks[register].top()
        except EmptyStack as e:
            raise RegisterUnderflow(register) from e
