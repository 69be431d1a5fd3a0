from collections import namedtuple
from collections.abc import Mapping
from types import MappingProxyType

from .util import DuplicateCommand


Command = namedtuple('Command', ['name', 'transform'])
Command.__doc__ = '''
Named stack transform: takes a Stack, returns a new Stack.
'''


class Registry(Mapping):
    '''
    Immutable table of commands, looked up by exact name.

    Built once; extending it makes a new registry.
    '''

    def __init__(self, commands=()):
        '''
        Create registry of commands.

        :param commands: Command pairs. Names must be unique.
        '''
        table = dict()
        for name, transform in commands:
            if name in table:
                raise DuplicateCommand('Command {!r} already registered'
                                       .format(name))
            table[name] = Command(name, transform)
        self._table = MappingProxyType(table)

    def extend(self, commands):
        '''
        Return new registry with these commands added.

        Names already registered are rejected, not shadowed.
        '''
        return type(self)([*self._table.values(), *commands])

    def lookup(self, name):
        '''
        Return command named name, or None.
        '''
        return self._table.get(name)

    def __getitem__(self, name):
        return self._table[name]

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, sorted(self._table))
