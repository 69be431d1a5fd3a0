from functools import wraps
import subprocess


SELECTIONS = {
    '+': 'clipboard',
    '*': 'primary',
}


def store_selection(data, selection):
    '''
    Copy data into an X selection with xclip.
    '''
    with subprocess.Popen(['xclip',
                           '-selection', SELECTIONS.get(selection, selection)],
                          stdin=subprocess.PIPE) as xclip:
        xclip.stdin.write(str(data).encode())


class RPNError(Exception):
    pass


class InvalidNumber(RPNError):
    pass


class StackUnderflow(RPNError):
    pass


class DomainError(RPNError):
    pass


class DuplicateCommand(RPNError):
    pass


def wrap_user_errors(fmt, error=RPNError):
    '''
    Decorator that converts host exceptions to RPNErrors of kind error.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
