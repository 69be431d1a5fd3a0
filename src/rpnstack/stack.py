from collections.abc import Sequence
from itertools import islice

from .util import StackUnderflow


class Stack(Sequence):
    '''
    Persistent stack of tokens, top first.

    Pushing and popping never mutate; they return a new stack sharing its
    tail with this one, so a stack can be threaded through a fold.
    '''

    __slots__ = ('_head', '_tail', '_size')

    def __init__(self, tokens=()):
        '''
        Create stack holding tokens, given top first.
        '''
        self._head = None
        self._tail = None
        self._size = 0
        if tokens:
            rest = type(self)().push(*reversed(tuple(tokens)))
            self._head = rest._head
            self._tail = rest._tail
            self._size = rest._size

    @classmethod
    def _cons(cls, head, tail):
        stack = cls.__new__(cls)
        stack._head = head
        stack._tail = tail
        stack._size = tail._size + 1
        return stack

    def push(self, *tokens):
        '''
        Push all tokens onto stack, leftmost at the bottom.
        '''
        stack = self
        for token in tokens:
            stack = self._cons(token, stack)
        return stack

    def pop(self, n=1):
        '''
        Pop n tokens, returning them topmost first, with the remaining stack.

        Raise StackUnderflow if not enough tokens.
        '''
        if self._size < n:
            raise StackUnderflow('Less than {} element(s) on stack'.format(n))
        popped = []
        stack = self
        for _ in range(n):
            popped.append(stack._head)
            stack = stack._tail
        return popped, stack

    @property
    def top(self):
        '''
        Token on top of the stack.
        '''
        return self.pop()[0][0]

    def __iter__(self):
        stack = self
        while stack._size:
            yield stack._head
            stack = stack._tail

    def __reversed__(self):
        return reversed(list(self))

    def __len__(self):
        return self._size

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self)[index]
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError('Stack index out of range')
        return next(islice(self, index, None))

    def __eq__(self, other):
        if isinstance(other, Stack):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self))
