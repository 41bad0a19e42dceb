'''
Classic four register stack: X, Y, Z, T.

Like the HP calculators it imitates, the stack is always full. Consuming
operands never empties it: whatever sits in T is copied down into Z, so a
constant loaded into T can be used over and over.

None of the operations here can run out of operands.
'''

from .contracts import StackCore, ElementApplier
from .derived import DerivedOperations


class FixedRegisterStack(StackCore, ElementApplier, DerivedOperations):
    '''
    Four register stack, X being the top.
    '''

    NAMES = 'X', 'Y', 'Z', 'T'

    def __init__(self, x, y, z, t):
        self._x = x
        self._y = y
        self._z = z
        self._t = t

    @classmethod
    def new(cls, x, y, z, t):
        return cls(x, y, z, t)

    @classmethod
    def new_zero(cls, zero=0):
        '''
        Create a stack with every register set to zero.

        :param zero: The zero of the number type to hold, e.g. 0.0.
        '''
        return cls(zero, zero, zero, zero)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def z(self):
        return self._z

    @property
    def t(self):
        return self._t

    def __len__(self):
        return len(type(self).NAMES)

    def __iter__(self):
        '''
        Iterate over the registers, top (X) first.
        '''
        return iter((self._x, self._y, self._z, self._t))

    def to_list(self):
        return list(self)

    def __eq__(self, other):
        if not isinstance(other, FixedRegisterStack):
            return NotImplemented
        return self.to_list() == other.to_list()

    __hash__ = None

    def __repr__(self):
        return '{}({!r}, {!r}, {!r}, {!r})'.format(type(self).__name__,
                                                   *self)

    def __str__(self):
        return ''.join('{}: {}\n'.format(name, value)
                       for name, value
                       in reversed(list(zip(type(self).NAMES, self))))

    # StackCore

    def push(self, value):
        '''
        Push into X, shifting X to Y, Y to Z, Z to T. T is lost.
        '''
        self._x, self._y, self._z, self._t = \
            value, self._x, self._y, self._z

    def pop(self):
        '''
        Pop X, shifting Y to X and Z to Y. T is copied into Z.
        '''
        top = self._x
        self._x, self._y, self._z = self._y, self._z, self._t
        return top

    def swap(self):
        self._x, self._y = self._y, self._x

    def rotate_up(self):
        '''
        T to X, X to Y, Y to Z, Z to T.
        '''
        self._x, self._y, self._z, self._t = \
            self._t, self._x, self._y, self._z

    def rotate_down(self):
        '''
        X to T, Y to X, Z to Y, T to Z.
        '''
        self._x, self._y, self._z, self._t = \
            self._y, self._z, self._t, self._x

    def clear(self):
        '''
        Set every register to zero, keeping each register's number type.
        '''
        self._x, self._y, self._z, self._t = (type(value)()
                                              for value
                                              in self)

    # ElementApplier

    def apply_unary(self, f):
        self._x = f(self._x)

    def apply_binary_keep_first(self, f):
        '''
        Leave f(X, Y) in X. Z moves to Y, T is copied into Z.
        '''
        result = f(self._x, self._y)
        self._x, self._y, self._z = result, self._z, self._t

    def apply_binary_keep_second(self, f):
        '''
        Compute f(X, Y) into Y and drop X. Z moves to Y, T is copied into Z.
        '''
        result = f(self._x, self._y)
        self._x, self._y, self._z = result, self._z, self._t


__all__ = 'FixedRegisterStack',
