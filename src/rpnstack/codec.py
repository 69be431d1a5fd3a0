'''
Conversion between tokens and the floats the operations compute on.
'''

from functools import reduce
import operator
import math

import regex

from .util import InvalidNumber, DomainError


# Integral part of a number
INTEGRAL = r'''
            (?:
                # 1, 12, or the 1 in 1_200.
                \d{1,3}
                (?:
                    # The 4, 45, etc. in 1234, 12345, etc.
                    \d
                    |
                    # Thousands separators
                    _\d{3}
                )*
            )
            '''
# Fractional part of a number
FRACTIONAL = r'''
              (?:
                  \d+
              )
              '''
EXPONENT = r'''
            (?:
                [eE]
                [+-]?
                \d+
            )
            '''
# String formatting and regex is a tricky business, because of the braces.
NUMBER = r'''
          (?:
              [+-]?
              (?:
                  # 1, 1_200, 1_200. (notice trailing dot), 1.3
                  {INTEGRAL}
                  (?:
                      \.
                      {FRACTIONAL}?
                  )?
              |
                  # .2
                  \.
                  {FRACTIONAL}
              )
              {EXPONENT}?
          )|(?:
              # What encode() produces for IEEE specials.
              [+-]?inf
              |
              nan
          )
          '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL,
                     EXPONENT=EXPONENT)
FLAGS = reduce(operator.__or__,
               {regex.VERSION1,
                regex.VERBOSE},
               0)

_NUMBER = regex.compile(NUMBER, flags=FLAGS)

# Beyond this, floats no longer hold every integer.
_EXACT = 2 ** 53


def decode(token):
    '''
    Parse token as a float.

    Raise InvalidNumber if it isn't a number literal.
    '''
    if _NUMBER.fullmatch(token) is None:
        raise InvalidNumber('Cannot convert {!r}'.format(token))
    return float(token.replace('_', ''))


def decode_integer(token):
    '''
    Parse token as a finite, integral number.
    '''
    number = decode(token)
    if not math.isfinite(number) or not number.is_integer():
        raise DomainError('Not an integer: {!r}'.format(token))
    return int(number)


def encode(number):
    '''
    Format number as the shortest token that decodes back to it.
    '''
    number = float(number)
    # -0 must stay -0.0, or 1 over it changes sign.
    if number == 0 and math.copysign(1.0, number) < 0:
        return repr(number)
    if number.is_integer() and abs(number) < _EXACT:
        return str(int(number))
    return repr(number)
