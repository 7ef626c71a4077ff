from decimal import Decimal
from functools import wraps
from sys import stdout, stderr
import math


class RPNError(Exception):
    '''
    Any error a single command can run into.

    Reported by the calculator, which then carries on with the next command.
    '''


class EmptyStack(RPNError):
    def __init__(self):
        super().__init__('Stack is empty')


class InsufficientDepth(RPNError):
    def __init__(self, needed):
        super().__init__('Stack does not have {} elements'.format(needed))
        self.needed = needed


class RegisterNotSet(RPNError):
    def __init__(self, register):
        super().__init__('Register {!r} has not been set'.format(register))
        self.register = register


class RegisterUnderflow(RPNError):
    '''
    A register's own stack ran out. Raise from the underlying EmptyStack.
    '''
    def __init__(self, register):
        super().__init__('Evaluating register {!r}'.format(register))
        self.register = register

    def __str__(self):
        if self.__cause__ is None:
            return self.args[0]
        return '{}: {}'.format(self.args[0], self.__cause__)


class MultipleDecimalPoints(RPNError):
    def __init__(self, after):
        super().__init__('Number literal has multiple decimal points '
                         '(second decimal was found {} chars after first)'
                         .format(after))


class BadRadix(RPNError):
    '''
    Rejected input radix. Warned about, never fails a command.
    '''


class RadixTooLarge(BadRadix):
    def __init__(self, maximum):
        super().__init__('Maximum radix is {}'.format(maximum))


class RadixTooSmall(BadRadix):
    def __init__(self, minimum):
        super().__init__('Minimum radix is {}'.format(minimum))


class MissingOperand(RPNError):
    pass


class UnknownCommand(RPNError):
    def __init__(self, command):
        super().__init__('Invalid command {!r}'.format(command))
        self.command = command


class InputDecodeFailure(RPNError):
    '''
    Input couldn't be decoded into characters. Fatal, unlike its siblings.
    '''


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to RPNErrors.

    Passes through RPNErrors. The original exception is kept as the cause.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise RPNError('{}: {}'.format(fmt.format(*args, **kwargs),
                                               e)) from e
        return wrapper
    return decorator


def format_value(value):
    '''
    Render a value as its shortest round-trip decimal, never in exponent form.

    Integral values lose their trailing .0, so 2.0 is shown as 2.
    '''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


class Console:
    '''
    Where a calculator writes.

    Values (v, p, V) go to output, everything else (prompts, errors, help,
    warnings) to diagnostics, so output can be piped elsewhere.
    '''

    DEFAULT_PROMPT = '> '

    def __init__(self, output=None, diagnostics=None, prompt=DEFAULT_PROMPT):
        '''
        :param prompt: Prompt marker shown on each new line, None for none.
        '''
        self.output = stdout if output is None else output
        self.diagnostics = stderr if diagnostics is None else diagnostics
        self.prompt = prompt

    def print(self, *values, end='\n'):
        print(*map(format_value, values), file=self.output, end=end,
              flush=True)

    def write(self, text):
        print(text, file=self.output, end='', flush=True)

    def warn(self, *args, end='\n'):
        print(*args, file=self.diagnostics, end=end, flush=True)

    def show_prompt(self):
        if self.prompt is not None:
            self.warn(self.prompt, end='')
