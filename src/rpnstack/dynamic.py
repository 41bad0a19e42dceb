'''
Stack of any depth, as in dc.

Unlike the classic four register stack, this one can run dry, so every
operation that consumes operands first checks there are enough of them.
'''

from collections import deque
import logging

from .contracts import StackCore, ElementApplier
from .derived import DerivedOperations
from .util import NotEnoughOperands


logger = logging.getLogger(__name__)


class DynamicStack(StackCore, ElementApplier, DerivedOperations):
    '''
    Unbounded stack. Stored bottom first, so the top is the rightmost item.
    '''

    def __init__(self):
        '''
        Create empty stack.
        '''
        self.stack = deque()

    @classmethod
    def new(cls):
        return cls()

    @classmethod
    def from_slice(cls, values):
        '''
        Create stack holding values, leftmost at the bottom.

        The last value is the top: from_slice([3, 2, 1]).get(0) is 1.
        '''
        new = cls()
        new.stack.extend(values)
        return new

    def __len__(self):
        return len(self.stack)

    def is_empty(self):
        return not self.stack

    def get(self, index):
        '''
        Return the element index positions below the top, or None.
        '''
        if 0 <= index < len(self.stack):
            return self.stack[-1 - index]
        return None

    def __iter__(self):
        '''
        Iterate over the elements, top first.
        '''
        return reversed(self.stack)

    def to_list(self):
        return list(self)

    def __eq__(self, other):
        if not isinstance(other, DynamicStack):
            return NotImplemented
        return self.stack == other.stack

    __hash__ = None

    def __repr__(self):
        return '{}.from_slice({!r})'.format(type(self).__name__,
                                            list(self.stack))

    def __str__(self):
        return ''.join('{}: {}\n'.format(len(self.stack) - (i + 1), value)
                       for i, value
                       in enumerate(self.stack))

    def _require(self, n):
        '''
        Raise NotEnoughOperands unless at least n elements are on the stack.
        '''
        if len(self.stack) < n:
            logger.debug('Refusing operation needing %d operand(s) on a '
                         'stack of %d', n, len(self.stack))
            raise NotEnoughOperands(required=n, available=len(self.stack))

    # StackCore

    def push(self, value):
        self.stack.append(value)

    def pop(self):
        self._require(1)
        return self.stack.pop()

    def swap(self):
        self._require(2)
        self.stack[-1], self.stack[-2] = self.stack[-2], self.stack[-1]

    def rotate_up(self):
        '''
        Bottom element to the top. No-op on fewer than two elements.
        '''
        self.stack.rotate(-1)

    def rotate_down(self):
        '''
        Top element to the bottom. No-op on fewer than two elements.
        '''
        self.stack.rotate(1)

    def clear(self):
        self.stack.clear()

    # ElementApplier

    def apply_unary(self, f):
        self._require(1)
        self.stack[-1] = f(self.stack[-1])

    def apply_binary_keep_first(self, f):
        '''
        Replace top and second with f(top, second).
        '''
        self._require(2)
        result = f(self.stack[-1], self.stack[-2])
        self.stack.pop()
        self.stack[-1] = result

    def apply_binary_keep_second(self, f):
        '''
        Store f(top, second) where second was, dropping top.
        '''
        self._require(2)
        result = f(self.stack[-1], self.stack[-2])
        self.stack.pop()
        self.stack[-1] = result


__all__ = 'DynamicStack',
