'''
Command table tests, against a lone stack
'''

import math
import sys

from dcalc.machine import InputRadix, Machine, saturate
from dcalc.stack import Stack
from dcalc.util import (EmptyStack, InsufficientDepth, RadixTooLarge,
                        RadixTooSmall, UnknownCommand)

from pytest import fixture, raises, mark, approx


@fixture
def machine(console):
    return Machine(Stack(), InputRadix(), console)


def feed(machine, text):
    '''
    Run every command in text, the way the calculator does.
    '''
    chars = iter(text)
    for command in chars:
        machine.handle(command, chars)


def values(machine):
    return list(machine.stack)


def test_addition(machine):
    feed(machine, '3 4+')
    assert values(machine) == [7.0]


def test_literal_then_command(machine):
    # 4 ends on +, which still runs
    feed(machine, '3 4+2*')
    assert values(machine) == [14.0]


@mark.parametrize('text, expected', [
    ('10 4-', 6.0),
    ('10 4*', 40.0),
    ('10 4/', 2.5),
    ('10 4%', 2.0),
    ('2 10^', 1024.0),
    ('4 0.5^', 2.0),
    ('3~', -3.0),
])
def test_arithmetic(machine, text, expected):
    feed(machine, text)
    assert values(machine) == [expected]


def test_modulo_keeps_dividend_sign(machine):
    feed(machine, '7~ 3%')
    assert values(machine) == [-1.0]


def test_quotient_remainder(machine):
    # dividend on top, divisor below it
    feed(machine, '4 10"')
    assert values(machine) == [2.5, 2.0]


def test_quotient_remainder_too_shallow(machine):
    feed(machine, '4')
    with raises(InsufficientDepth):
        feed(machine, '"')
    assert values(machine) == [4.0]


def test_binary_empty(machine):
    with raises(EmptyStack):
        feed(machine, '+')


def test_binary_partial_effect(machine):
    feed(machine, '5')
    with raises(EmptyStack):
        feed(machine, '%')
    # 5 was popped before the second operand was found missing
    assert values(machine) == []


def test_division_by_zero(machine):
    feed(machine, '1 0/')
    assert values(machine) == [math.inf]
    feed(machine, 'c 1~ 0/')
    assert values(machine) == [-math.inf]
    feed(machine, 'c 0 0/')
    assert math.isnan(machine.stack.pop())


def test_remainder_by_zero(machine):
    feed(machine, '1 0%')
    assert len(machine.stack) == 1
    assert math.isnan(machine.stack.top())


def test_quotient_remainder_by_zero(machine):
    # divisor 0 below dividend 1
    feed(machine, '0 1"')
    remainder, quotient = machine.stack.pop(), machine.stack.pop()
    assert quotient == math.inf
    assert math.isnan(remainder)


def test_power_off_real_line(machine):
    feed(machine, '2~ 0.5^')
    assert len(machine.stack) == 1
    assert math.isnan(machine.stack.top())


@mark.parametrize('text, expected', [
    ('0 1~^', math.inf),
    ('10 400^', math.inf),
    ('10~ 401^', -math.inf),
    ('10~ 400^', math.inf),
    ('10 400~^', 0.0),
    ('10 300^ 10 300^*', math.inf),
])
def test_overflow(machine, text, expected):
    feed(machine, text)
    assert values(machine) == [expected]


def test_rotate_nan(machine):
    feed(machine, '1 2 3')
    machine.stack.push(math.nan)
    feed(machine, 'R')
    assert values(machine) == [1.0, 2.0, 3.0]


def test_rotate_infinite(machine):
    feed(machine, '1 2 3')
    machine.stack.push(math.inf)
    with raises(InsufficientDepth):
        feed(machine, 'R')
    assert values(machine) == [1.0, 2.0, 3.0]


def test_saturate():
    assert saturate(2.9) == 2
    assert saturate(-2.9) == -2
    assert saturate(math.nan) == 0
    assert saturate(math.inf) == sys.maxsize
    assert saturate(-math.inf) == -sys.maxsize - 1


def test_stack_commands(machine):
    feed(machine, '1 2d')
    assert values(machine) == [1.0, 2.0, 2.0]
    feed(machine, 'c 1 2r')
    assert values(machine) == [2.0, 1.0]
    feed(machine, 'c')
    assert values(machine) == []


def test_swap_too_shallow(machine):
    feed(machine, '1')
    with raises(InsufficientDepth):
        feed(machine, 'r')


def test_dup_empty(machine):
    with raises(EmptyStack):
        feed(machine, 'd')


def test_rotate(machine):
    feed(machine, '1 2 3 4 3R')
    assert values(machine) == [1.0, 3.0, 4.0, 2.0]
    feed(machine, '3~R')
    assert values(machine) == [1.0, 2.0, 3.0, 4.0]


def test_depth(machine):
    feed(machine, 'z')
    assert values(machine) == [0.0]
    feed(machine, '5z')
    assert values(machine) == [0.0, 5.0, 2.0]


def test_radix(machine):
    feed(machine, 'I')
    assert values(machine) == [10.0]
    feed(machine, 'c16i 10 0ff')
    assert int(machine.radix) == 16
    assert values(machine) == [16.0, 255.0]
    feed(machine, 'I')
    assert values(machine)[-1] == 16.0


def test_radix_affects_only_new_literals(machine):
    feed(machine, '10 2i 10')
    assert values(machine) == [10.0, 2.0]


def test_radix_too_large(machine):
    feed(machine, '17i')
    assert int(machine.radix) == 10
    assert values(machine) == [17.0]
    assert machine.console.diagnostics.getvalue() == 'Maximum radix is 16\n'


def test_radix_too_small(machine):
    feed(machine, '1i')
    assert int(machine.radix) == 10
    assert values(machine) == [1.0]
    assert machine.console.diagnostics.getvalue() == 'Minimum radix is 2\n'


def test_radix_truncated(machine):
    feed(machine, '16.5i')
    assert int(machine.radix) == 16
    assert values(machine) == []


def test_check_radix():
    radix = InputRadix()
    assert radix.check(2.0) == 2
    assert radix.check(16.0) == 16
    with raises(RadixTooLarge):
        radix.check(17.0)
    with raises(RadixTooLarge):
        radix.check(math.inf)
    with raises(RadixTooSmall):
        radix.check(math.nan)
    with raises(RadixTooSmall):
        radix.check(-2.0)


def test_letters_stay_commands_in_hex(machine):
    feed(machine, '16i 1 2 c')
    assert values(machine) == []


def test_printing(machine):
    feed(machine, '1 2.5 v')
    assert machine.console.output.getvalue() == '2.5\n'
    feed(machine, 'V')
    assert machine.console.output.getvalue() == '2.5\n1: 1\n0: 2.5\n'
    feed(machine, 'p')
    assert machine.console.output.getvalue().endswith('0: 2.5\n2.5\n')
    assert values(machine) == [1.0]


def test_print_empty(machine):
    with raises(EmptyStack):
        feed(machine, 'v')
    with raises(EmptyStack):
        feed(machine, 'p')
    feed(machine, 'V')
    assert machine.console.output.getvalue() == ''


def test_whitespace(machine):
    feed(machine, ' \t\0\r')
    assert values(machine) == []
    assert machine.console.diagnostics.getvalue() == ''


def test_newline_prompts(machine):
    feed(machine, '1\n')
    assert values(machine) == [1.0]
    assert machine.console.diagnostics.getvalue() == '> '


@mark.parametrize('command', ['x', '&', 's', '.', '#'])
def test_unknown_command(machine, command):
    with raises(UnknownCommand) as info:
        feed(machine, command)
    assert info.value.command == command


def test_shared_radix(console):
    radix = InputRadix()
    first = Machine(Stack(), radix, console)
    second = Machine(Stack(), radix, console)
    feed(first, '8i')
    feed(second, '10')
    assert list(second.stack) == [8.0]


def test_literal_value_precision(machine):
    feed(machine, '0.1 0.2+')
    assert values(machine) == [approx(0.3)]


def test_literal(machine):
    chars = iter('5sa')
    assert machine.literal('1', chars) == 's'
    assert list(chars) == ['a']
    assert values(machine) == [15.0]
    assert machine.literal('+', iter('')) == '+'
    assert machine.literal('7', iter('')) is None
    assert values(machine) == [15.0, 7.0]
