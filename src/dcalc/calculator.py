import traceback

from . import helptext
from .machine import InputRadix, Machine
from .registers import Registers
from .stack import Stack
from .util import Console, InputDecodeFailure, MissingOperand, RPNError


class Calculator:
    '''
    dc-style RPN calculator.

    Owns the main stack, the registers and the input radix, and routes each
    command either to the main stack, or, for register commands, to a
    register.
    '''

    REGISTER_COMMANDS = frozenset('sSlL&')

    def __init__(self, console=None, verbose=None):
        '''
        Create calculator with empty stack and registers.

        :param console: Where values and diagnostics go. Defaults to
                        stdout/stderr.
        :param verbose: Show stack traces on bad user commands.
        '''
        self.console = Console() if console is None else console
        self.verbose = verbose
        self.stack = Stack()
        self.registers = Registers()
        self.radix = InputRadix()

    def machine(self, stack=None):
        '''
        Return a machine running commands against stack, the main by default.
        '''
        return Machine(self.stack if stack is None else stack,
                       self.radix,
                       self.console)

    def evaluate(self, chars):
        '''
        Run every command in chars.

        Command errors are reported and skipped over. Input errors aren't:
        they end evaluation, raised as InputDecodeFailure.
        '''
        chars = iter(chars)
        self.console.show_prompt()
        try:
            for command in chars:
                try:
                    self.handle(command, chars)
                except InputDecodeFailure:
                    raise
                except RPNError as e:
                    self.report(e)
        except UnicodeDecodeError as e:
            raise InputDecodeFailure(str(e)) from e

    def report(self, error):
        if self.verbose:
            traceback.print_exception(type(error), error, error.__traceback__,
                                      file=self.console.diagnostics)
        self.console.warn('Error:', error)

    def _operand(self, chars, what, command):
        operand = next(chars, None)
        if operand is None:
            raise MissingOperand('Expected {} for {!r} command'
                                 .format(what, command))
        return operand

    def handle(self, command, chars):
        '''
        Run one command, reading any operands it takes off chars.
        '''
        if command == '?':
            subject = next(chars, None)
            if subject is None:
                raise MissingOperand(
                    'Expected the command you want to know about for {!r} '
                    'command, e.g., `?&` to learn about the {!r} command'
                    .format('?', '&'))
            self.printhelp(subject)
        elif command in type(self).REGISTER_COMMANDS:
            register = self._operand(chars, 'register', command)
            if command == 's':
                self.registers.push(register, self.stack.pop())
            elif command == 'S':
                self.registers.push(register, self.stack.top())
            elif command == 'l':
                self.stack.push(self.registers.pop(register))
            elif command == 'L':
                self.stack.push(self.registers.top(register))
            else:
                operation = self._operand(chars, 'operation', command)
                # Any nested & is just an unknown command to the machine.
                self.machine(self.registers.stack(register)).handle(operation,
                                                                    chars)
        else:
            # Whatever ends a literal runs on the machine too, so 5sa is two
            # invalid commands rather than a store.
            self.machine().handle(command, chars)

    def printhelp(self, command):
        '''
        Print help on command.
        '''
        if command == Machine.NEWLINE or command in Machine.WHITESPACE:
            self.console.warn('{!r} requires a command that you would like '
                              'help for'.format('?'))
            if command == Machine.NEWLINE:
                self.console.show_prompt()
            return
        self.console.warn('{!r}: {}'.format(command,
                                            helptext.describe(command)))
