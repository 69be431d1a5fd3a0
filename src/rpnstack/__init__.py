'''
RPN calculator core.

Evaluates whitespace separated Reverse Polish Notation: numbers and other
unknown tokens are stacked as text, commands pop what they need and push
their results. Not intended to be Turing-complete!

>>> list(evaluate('3 4 -'))
['-1']
'''

from .cli import CLI
from .codec import decode, encode
from .lexer import Lexer
from .machine import Machine, dispatch, evaluate
from .operations import BUILTINS
from .registry import Command, Registry
from .stack import Stack
from .util import (RPNError, InvalidNumber, StackUnderflow, DomainError,
                   DuplicateCommand)


__all__ = ('evaluate', 'dispatch', 'Machine', 'Lexer', 'CLI', 'Stack',
           'Command', 'Registry', 'BUILTINS', 'decode', 'encode',
           'RPNError', 'InvalidNumber', 'StackUnderflow', 'DomainError',
           'DuplicateCommand')
