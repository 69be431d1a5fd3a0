'''
Lift plain numeric functions into stack transforms.
'''

from functools import wraps

from .codec import decode, encode
from .util import DomainError, wrap_user_errors


def _domain(f, arity):
    '''
    Report f's math failures as DomainErrors naming f and its operands.
    '''
    name = getattr(f, '__name__', repr(f))
    fmt = name + ' undefined for ' + ' and '.join(['{}'] * arity)
    return wrap_user_errors(fmt, DomainError)(f)


def nullary(value):
    '''
    Transform pushing the constant value.
    '''
    token = encode(value)

    def transform(stack):
        return stack.push(token)
    return transform


def unary(f):
    '''
    Transform popping one number, pushing f of it.
    '''
    f = _domain(f, 1)

    @wraps(f)
    def transform(stack):
        (only,), stack = stack.pop(1)
        return stack.push(encode(f(decode(only))))
    return transform


def binary(f):
    '''
    Transform popping two numbers, pushing f of them.

    The deeper operand goes on the left: 3 4 - is 3 - 4.
    '''
    f = _domain(f, 2)

    @wraps(f)
    def transform(stack):
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        (right, left), stack = stack.pop(2)
        return stack.push(encode(f(decode(left), decode(right))))
    return transform
