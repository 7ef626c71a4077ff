from io import StringIO

from pytest import Item, fixture

from dcalc.calculator import Calculator
from dcalc.util import Console


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def console():
    '''
    Console writing to in-memory buffers, prompting with '> '.
    '''
    return Console(output=StringIO(), diagnostics=StringIO())


@fixture
def calculator(console):
    return Calculator(console=console)


@fixture
def run(calculator):
    '''
    Evaluate text, return (values output, diagnostics output) so far.
    '''
    def run(text):
        calculator.evaluate(text)
        return (calculator.console.output.getvalue(),
                calculator.console.diagnostics.getvalue())
    return run
