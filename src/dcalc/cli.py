from os import isatty
from sys import stdin, stdout, stderr, exit
from functools import partial
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import codecs

from prompt_toolkit import PromptSession

from . import helptext
from .calculator import Calculator
from .util import Console, InputDecodeFailure


class InteractiveInput:
    '''
    Characters typed at a prompt_toolkit prompt, line by line.

    Newlines are put back on the end of each line, since the calculator
    treats them as commands too.
    '''

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield from session.prompt()
                yield '\n'
        except EOFError:
            return


class StreamInput:
    '''
    Characters decoded, as they come, from a binary stream.

    Raises InputDecodeFailure on bytes that aren't valid in encoding.
    '''

    CHUNK_SIZE = 4096

    def __init__(self, stream, encoding='utf-8'):
        self.stream = stream
        self.encoding = encoding

    def _read(self):
        # read1 hands over whatever is available, so piped input isn't held up
        read = getattr(self.stream, 'read1', self.stream.read)
        return iter(partial(read, type(self).CHUNK_SIZE), b'')

    def __iter__(self):
        decoder = codecs.getincrementaldecoder(self.encoding)()
        try:
            for chunk in self._read():
                # A byte at a time, so whatever precedes bad input still runs
                for i in range(len(chunk)):
                    yield from decoder.decode(chunk[i:i + 1])
            yield from decoder.decode(b'', final=True)
        except UnicodeDecodeError as e:
            raise InputDecodeFailure('Invalid {} input: {}'
                                     .format(self.encoding, e)) from e


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = Console.DEFAULT_PROMPT

    def executor(self):
        '''
        Run calculator over the chosen input.
        '''
        calculator = Calculator(console=Console(output=self.output,
                                                diagnostics=self.diagnostics,
                                                prompt=self.args.prompt),
                                verbose=self.args.verbose)
        calculator.evaluate(self.args.expressions)

    def commands(self):
        '''
        Print help for every command.
        '''
        for command in helptext.commands():
            print('{!r}: {}'.format(command, helptext.describe(command)),
                  file=self.output)

    def _input(self):
        '''
        Choose input, and whether the calculator prompts itself.

        Interactive (prompt_toolkit) input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.expressions is not None:
            self.args.prompt = None
            self.args.expressions = '\n'.join(self.args.expressions) + '\n'
        elif self.args.prompt or \
                isatty(stdin.fileno()) and isatty(stdout.fileno()):
            self.args.expressions = InteractiveInput(
                prompt=self.args.prompt or self.DEFAULT_PROMPT)
            # prompt_toolkit draws its own
            self.args.prompt = None
        else:
            self.args.expressions = StreamInput(stdin.buffer)
            self.args.prompt = self.DEFAULT_PROMPT

    def __init__(self, output=None, diagnostics=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.output = stdout if output is None else output
        self.diagnostics = stderr if diagnostics is None else diagnostics
        self.argument_parser = ArgumentParser(description='dc-style RPN '
                                                          'calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='evaluate these instead of stdin')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT,
                                       help='prompt interactively with this')
        self.argument_parser.add_argument('-H', '--help-commands',
                                          action='store_const',
                                          const=self.commands,
                                          dest='action',
                                          help='describe every command')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            if self.args.action == self.executor:
                self._input()
            self.args.action()
        except InputDecodeFailure as e:
            print('Error:', e, file=self.diagnostics)
            return 1
        except KeyboardInterrupt:
            return 1
        return 0


def main():
    exit(CLI().run())
