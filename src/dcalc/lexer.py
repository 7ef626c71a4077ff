from functools import lru_cache, reduce
import operator

import regex

from .util import MultipleDecimalPoints


class Lexer:
    '''
    Lexer for radix-sensitive number literals.

    Works one character at a time off a (possibly endless) iterator, so it
    never reads further ahead than the first character that isn't part of the
    literal, and hands that one back.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Digit glyphs, in order of value. Also the upper bound on radix.
    DIGITS = '0123456789abcdef'
    # Characters that may start a literal, in any radix. Literals with
    # letter digits need a leading 0, or they'd shadow commands like c and d.
    LEADING = r'[0-9]'
    POINT = '.'
    # Default regex flags for matching characters
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1},
                   0)

    @staticmethod
    @lru_cache(maxsize=None)
    def _digit(radix):
        '''
        Compile a pattern matching exactly one digit valid in radix.
        '''
        glyphs = Lexer.DIGITS[:radix]
        return regex.compile('[' + regex.escape(glyphs + glyphs[10:].upper())
                             + ']',
                             flags=Lexer.FLAGS)

    def isdigit(self, radix, char):
        '''
        Return True if char is a digit in radix.
        '''
        return self._digit(radix).fullmatch(char) is not None

    def isleading(self, radix, char):
        '''
        Return True if char starts a number literal in radix.
        '''
        return (regex.fullmatch(type(self).LEADING, char,
                                flags=type(self).FLAGS) is not None and
                self.isdigit(radix, char))

    def isnumber(self, radix, char):
        '''
        Return True if char may appear anywhere in a number literal.
        '''
        return char == type(self).POINT or self.isdigit(radix, char)

    def lex(self, radix, chars):
        '''
        Accumulate a number literal off chars.

        Return the first character that wasn't part of it (or None at end of
        input), and the value. Errors raised by chars itself pass through.
        '''
        value = 0.0
        # None while still in the integral part
        fractional = None
        for char in chars:
            if not self.isnumber(radix, char):
                return char, value
            if fractional is not None:
                if char == type(self).POINT:
                    raise MultipleDecimalPoints(fractional)
                fractional += 1
                digit = float(int(char, radix))
                reciprocal = 1.0 / radix
                for _ in range(fractional):
                    digit *= reciprocal
                value += digit
            elif char == type(self).POINT:
                fractional = 0
            else:
                value = value * radix + int(char, radix)
        return None, value
