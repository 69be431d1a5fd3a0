from functools import reduce

from .lexer import Lexer
from .operations import BUILTINS
from .stack import Stack


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Folds tokens through a command registry, one stack at a time. Holds no
    state besides the registry, so one machine can serve any number of
    evaluations.
    '''

    def __init__(self, registry=BUILTINS):
        '''
        Create machine running the commands in registry.
        '''
        self.registry = registry
        self.lexer = Lexer()

    def iscommand(self, token):
        '''
        Return true if token names a command, rather than a literal.
        '''
        return token in self.registry

    def dispatch(self, stack, token):
        '''
        Run command named token on stack, or push token as a literal.
        '''
        command = self.registry.lookup(token)
        if command is None:
            return stack.push(token)
        return command.transform(stack)

    def evaluate(self, line):
        '''
        Evaluate line of RPN from an empty stack, returning the final stack.

        Tokens are run strictly left to right; the first error aborts.
        '''
        return reduce(self.dispatch, self.lexer.lex(line), Stack())


_machine = Machine()

dispatch = _machine.dispatch
evaluate = _machine.evaluate
