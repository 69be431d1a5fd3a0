from pytest import fixture

from rpnstack.machine import Machine
from rpnstack.stack import Stack


@fixture
def machine() -> Machine:
    '''
    Machine running the built-in commands.
    '''
    return Machine()


@fixture
def run(machine):
    '''
    Evaluate a line, returning the stack as a top first list of tokens.
    '''
    def run(line: str) -> list:
        stack = machine.evaluate(line)
        assert isinstance(stack, Stack)
        return list(stack)
    return run
