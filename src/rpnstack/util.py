from functools import wraps


class RPNError(Exception):
    pass


class StackError(RPNError):
    '''
    Stack operation could not be carried out.

    Also the catch-all for stack failures with no more specific class.
    '''


class NotEnoughOperands(StackError):
    '''
    Operation needs more occupied positions than the stack currently has.
    '''

    def __init__(self, required, available):
        super().__init__('Not enough operands: {} required, {} available'
                         .format(required, available))
        self.required = required
        self.available = available

    def __eq__(self, other):
        if not isinstance(other, NotEnoughOperands):
            return NotImplemented
        return (self.required, self.available) == \
               (other.required, other.available)

    def __hash__(self):
        return hash((type(self), self.required, self.available))

    def __repr__(self):
        return '{}(required={}, available={})'.format(type(self).__name__,
                                                     self.required,
                                                     self.available)

    def __reduce__(self):
        return type(self), (self.required, self.available)


def wrap_user_errors(fmt):
    '''
    Decorator turning any exception into an RPNError, message from fmt.

    fmt is formatted with the wrapped function's arguments. RPNErrors pass
    through untouched; the original exception is kept as the second arg.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
