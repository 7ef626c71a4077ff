'''
dc-style RPN calculator.

Reads a stream of characters, each either part of a number literal or a
single character command acting on a stack of floating point numbers. Every
register is a stack of its own, and any stack command can be run inside one.

Not a superset of dc's featureset: no strings, macros, or arbitrary
precision.
'''

from .calculator import Calculator
from .cli import CLI
from .lexer import Lexer
from .machine import InputRadix, Machine
from .registers import Registers
from .stack import Stack


__all__ = ('Calculator', 'Machine', 'InputRadix', 'Lexer', 'Stack',
           'Registers', 'CLI')
