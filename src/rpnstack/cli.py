from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .codec import NUMBER
from .machine import Machine
from .stack import Stack
from .util import RPNError, SELECTIONS, store_selection


class InteractiveInput:
    '''
    Lines typed at a prompt_toolkit prompt, until end of input.

    :param status: Called before each prompt; its text is shown on the right.
    '''

    def __init__(self, prompt, status=None):
        self.prompt = prompt
        self.status = status

    def session(self):
        return PromptSession(message=self.prompt,
                             rprompt=self.status,
                             vi_mode=True,
                             enable_suspend=True,
                             history=InMemoryHistory(),
                             prompt_continuation=' ' * len(self.prompt))

    def __iter__(self):
        session = self.session()
        while True:
            try:
                yield session.prompt()
            except EOFError:
                return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_SELECTION = '+'

    def dumper(self):
        '''
        Dump every token, and whether it runs or stacks.
        '''
        machine = Machine()
        print('<kind>\t<repr(token)>')
        for line in self.args.expressions:
            for token in machine.lexer.lex(line):
                kind = 'command' if machine.iscommand(token) else 'literal'
                print(kind, repr(token), sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator), printing the stack after every line.
        '''
        machine = Machine()
        for line in self.args.expressions:
            try:
                self.stack = machine.evaluate(line)
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)
                print(e.args[0], file=sys.stderr)
                continue
            self.printstack(self.stack)
            if self.args.copy and self.stack:
                store_selection(self.stack.top, self.args.copy)

    def printstack(self, stack):
        '''
        Print all elements on the stack, bottom of the stack first.
        '''
        print(*reversed(stack), sep='\n')

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print('commands:', *sorted(Machine().registry), file=sys.stderr)

    def raw_grammar(self):
        '''
        Print the grammar of number literals.
        '''
        print(NUMBER)

    def status(self):
        '''
        Depth and top of the last stack, for the interactive prompt.
        '''
        if not self.stack:
            return '[0]'
        return '[{}] {}'.format(len(self.stack), self.stack.top)

    def _input(self):
        '''
        Lines to evaluate when no expressions were given on the command line.

        Prompt if asked to, or if talking to a terminal; else read stdin.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(self.args.prompt or self.DEFAULT_PROMPT,
                                    status=self.status)
        return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.stack = Stack()
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-c', '--copy',
                                          nargs=OPTIONAL,
                                          const=self.DEFAULT_SELECTION,
                                          choices=sorted(SELECTIONS),
                                          help='copy top of stack to X '
                                               'selection')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-l', '--list', self.printhelp)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's arguments.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
