'''
Stack machine tests
'''

import operator

from pytest import raises

import rpnstack
from rpnstack.builders import unary
from rpnstack.machine import Machine, dispatch, evaluate
from rpnstack.operations import BUILTINS
from rpnstack.stack import Stack
from rpnstack.util import InvalidNumber, StackUnderflow


def test_empty():
    assert evaluate('') == Stack()
    assert len(evaluate(' \t\n ')) == 0


def test_unknown_tokens_are_literals(run):
    assert run('abc') == ['abc']
    assert run('1 abc 2') == ['2', 'abc', '1']


def test_literals_kept_verbatim(run):
    # Only consumed tokens get normalised.
    assert run('1_000 2.50') == ['2.50', '1_000']
    assert run('1_000 0 +') == ['1000']


def test_unknown_token_then_operator():
    with raises(StackUnderflow):
        evaluate('abc +')
    with raises(InvalidNumber):
        evaluate('1 abc +')


def test_left_to_right(run):
    assert run('3 4 - 2 *') == ['-2']
    assert run('1 2 3 + +') == ['6']


def test_whitespace(run):
    assert run('  1\t2\n+  ') == ['3']


def test_dispatch_command():
    # 4 on top: 3 - 4.
    assert list(dispatch(Stack(['4', '3']), '-')) == ['-1']


def test_dispatch_literal():
    s = Stack(['1'])
    assert list(dispatch(s, '2')) == ['2', '1']
    assert list(s) == ['1']


def test_deterministic():
    line = '5 iota pi swap sum 2 / dup *'
    assert evaluate(line) == evaluate(line)


def test_error_aborts(machine):
    with raises(StackUnderflow):
        machine.evaluate('1 2 + swap 3 4 +')


def test_custom_registry():
    m = Machine(BUILTINS.extend([('neg', unary(operator.neg))]))
    assert list(m.evaluate('3 neg 1 +')) == ['-2']
    # The default machine doesn't know about it.
    assert list(evaluate('3 neg')) == ['neg', '3']


def test_iscommand(machine):
    assert machine.iscommand('iota')
    assert not machine.iscommand('3')


def test_package_entry_point():
    assert list(rpnstack.evaluate('3 4 -')) == ['-1']
    assert rpnstack.decode(rpnstack.evaluate('2 3 ^').top) == 8
