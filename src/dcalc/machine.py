from itertools import chain
from sys import maxsize
import operator
import math

from .lexer import Lexer
from .util import (BadRadix, RadixTooLarge, RadixTooSmall, UnknownCommand,
                   wrap_user_errors)


def _isodd(exponent):
    return exponent.is_integer() and math.fmod(exponent, 2.0) != 0


def divide(dividend, divisor):
    '''
    IEEE 754 division: dividing by zero gives a signed infinity, or NaN.
    '''
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def remainder(dividend, divisor):
    '''
    C-style remainder, sign of the dividend. NaN for a zero divisor or an
    infinite dividend.
    '''
    try:
        return math.fmod(dividend, divisor)
    except ValueError:
        return math.nan


def power(base, exponent):
    '''
    IEEE 754 pow: NaN off the real line, infinity on overflow or a zero base
    raised to a negative power.
    '''
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            if _isodd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _isodd(exponent):
            return -math.inf
        return math.inf


def saturate(value):
    '''
    Convert to int, clamping infinities to the machine word, NaN to 0.
    '''
    if math.isnan(value):
        return 0
    return int(max(-maxsize - 1, min(maxsize, value)))


class InputRadix:
    '''
    Radix number literals are read in. Shared, by reference, by every stack.
    '''

    MIN = 2
    MAX = len(Lexer.DIGITS)
    DEFAULT = 10

    def __init__(self, value=DEFAULT):
        self.value = value

    def __int__(self):
        return self.value

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.value)

    def check(self, value):
        '''
        Return value as a radix, or raise BadRadix if it isn't usable.
        '''
        if math.isnan(value) or value < type(self).MIN:
            raise RadixTooSmall(type(self).MIN)
        # Truncated, so 16.5 is still 16
        if value >= type(self).MAX + 1:
            raise RadixTooLarge(type(self).MAX)
        return int(value)


class Machine:
    '''
    Stack machine running single character commands against one stack.

    Only a view: the stack (the main one or a register's), the input radix and
    the console all belong to the calculator. The same command table thus
    serves both the main stack and the registers.
    '''

    # Command table. Binary operators pop their right operand first, and
    # replace the top with the result. All IEEE 754, never raising.
    ARITHMETIC = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': divide,
        '%': remainder,
        '^': power,
    }
    WHITESPACE = frozenset(' \t\r\v\f\0')
    NEWLINE = '\n'

    def __init__(self, stack, radix, console, lexer=None):
        self.stack = stack
        self.radix = radix
        self.console = console
        self.lexer = Lexer() if lexer is None else lexer

    def literal(self, command, chars):
        '''
        Push the number literal command starts, if it does.

        Return the command left to run: the character that ended the literal
        (None at end of input), or command itself if it isn't a literal.
        '''
        if not self.lexer.isleading(int(self.radix), command):
            return command
        command, value = self.lexer.lex(int(self.radix),
                                        chain([command], chars))
        self.stack.push(value)
        return command

    def handle(self, command, chars):
        '''
        Run command, reading any number literal it starts off chars.

        A literal is pushed, then the character that ended it, if any, is run
        as a command in its own right.
        '''
        command = self.literal(command, chars)
        if command is not None:
            self.run(command)

    @wrap_user_errors('Evaluating {1!r}')
    def run(self, command):
        '''
        Run a single command that isn't part of a number literal.
        '''
        if command in type(self).ARITHMETIC:
            operand = self.stack.pop()
            self.stack.settop(type(self).ARITHMETIC[command](
                float(self.stack.top()), float(operand)))
        elif command in type(self).WHITESPACE:
            pass
        elif command == type(self).NEWLINE:
            self.console.show_prompt()
        else:
            try:
                f = type(self).COMMANDS[command]
            except KeyError:
                raise UnknownCommand(command) from None
            f(self)

    def printtop(self):
        '''
        Print the top of the stack, leaving it there.
        '''
        self.console.print(self.stack.top())

    def printstack(self):
        '''
        Print the whole stack with indices, top last.
        '''
        self.console.write(str(self.stack))

    def popstack(self):
        '''
        Pop and print the top of the stack.
        '''
        self.console.print(self.stack.pop())

    def quotrem(self):
        '''
        Replace dividend (top) and divisor (below) by quotient and remainder.
        '''
        dividend = self.stack.nth(0)
        divisor = self.stack.nth(1)
        self.stack.setnth(1, divide(dividend, divisor))
        self.stack.setnth(0, remainder(dividend, divisor))

    def negate(self):
        self.stack.settop(-self.stack.top())

    def clrstack(self):
        self.stack.clear()

    def dupstack(self):
        self.stack.push(self.stack.top())

    def revstack(self):
        '''
        Swap two elements at top of stack.
        '''
        top, below = self.stack.nth(0), self.stack.nth(1)
        self.stack.setnth(0, below)
        self.stack.setnth(1, top)

    def rotstack(self):
        '''
        Pop an amount and rotate that many elements at the top by it.

        Fractions are truncated; NaN rotates nothing.
        '''
        self.stack.rotate(saturate(self.stack.pop()))

    def storeiradix(self):
        '''
        Set input radix from the top of stack.

        A bad radix is only warned about, and left on the stack.
        '''
        try:
            radix = self.radix.check(self.stack.top())
        except BadRadix as e:
            self.console.warn(e)
            return
        self.stack.pop()
        self.radix.value = radix

    def loadiradix(self):
        self.stack.push(float(self.radix.value))

    def loaddepth(self):
        '''
        Push the stack's depth, not counting what's being pushed.
        '''
        self.stack.push(float(len(self.stack)))

    COMMANDS = {
        'v': printtop,
        'V': printstack,
        'p': popstack,
        '"': quotrem,
        '~': negate,
        'c': clrstack,
        'd': dupstack,
        'r': revstack,
        'R': rotstack,
        'i': storeiradix,
        'I': loadiradix,
        'z': loaddepth,
    }
