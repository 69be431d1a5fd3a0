'''
The built-in commands.
'''

import operator
import math

from .builders import nullary, unary, binary
from .codec import decode, decode_integer, encode
from .registry import Registry
from .util import DomainError, wrap_user_errors


def inv(a):
    '''
    Reciprocal, infinite at zero.
    '''
    return divide(1.0, a)


def divide(a, b):
    '''
    IEEE division: a/0 is infinite, 0/0 is not a number.
    '''
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(a, b):
    '''
    a to the b. Results too large are infinite, as with * and /; so is zero
    to a negative power.
    '''
    odd = b.is_integer() and b % 2 == 1
    if a == 0 and b < 0:
        return math.copysign(math.inf, a) if odd else math.inf
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and odd else math.inf


def mod(a, b):
    '''
    Floored modulus; the result takes the sign of b.
    '''
    if b == 0:
        raise DomainError('mod undefined for divisor 0')
    return a % b


@wrap_user_errors('gcd undefined for {} and {}', DomainError)
def gcd(a, b):
    '''
    Euclid's algorithm on the truncated magnitudes of a and b.
    '''
    a, b = abs(int(a)), abs(int(b))
    while b:
        a, b = b, a % b
    return a


def dup(stack):
    '''
    Duplicate element at top of stack.
    '''
    (top,), _ = stack.pop()
    return stack.push(top)


def swap(stack):
    '''
    Swap two elements at top of stack.
    '''
    popped, stack = stack.pop(2)
    return stack.push(*popped)


def iota(stack):
    '''
    Replace n on top of stack with 1 through n, n on top.
    '''
    (n,), stack = stack.pop()
    n = decode_integer(n)
    if n < 0:
        raise DomainError('iota undefined for {}'.format(n))
    return stack.push(*map(encode, range(1, n + 1)))


def _reduction(f, initial):
    def transform(stack):
        return type(stack)().push(encode(
            f((decode(token) for token in stack), initial)))
    return transform


def _sum(numbers, initial):
    return sum(numbers, initial)


def _prod(numbers, initial):
    return math.prod(numbers, start=initial)


# Language mapping to stack operations.
COMMANDS = [
    # Arithmetic
    ('abs', unary(abs)),
    ('inv', unary(inv)),
    ('sqrt', unary(math.sqrt)),
    ('+', binary(operator.__add__)),
    ('-', binary(operator.__sub__)),
    ('*', binary(operator.__mul__)),
    ('x', binary(operator.__mul__)),
    ('/', binary(divide)),
    ('^', binary(power)),
    ('mod', binary(mod)),
    ('%', binary(mod)),
    ('gcd', binary(gcd)),

    # Constants
    ('pi', nullary(math.pi)),

    # Stack
    ('dup', dup),
    ('swap', swap),
    ('iota', iota),
    ('io', iota),

    # Whole stack
    ('sum', _reduction(_sum, 0.0)),
    ('prod', _reduction(_prod, 1.0)),
]

BUILTINS = Registry(COMMANDS)
