'''
The two contracts every stack representation implements.

StackCore is shape manipulation: pushing, popping, shuffling. ElementApplier
is what arithmetic is built on: run a function over the top one or two
elements and leave the result where the caller expects it.

Positions are counted from the top: the most recently pushed element is
position 0 (the X register of a classic calculator), the one below it is
position 1 (Y), and so on.
'''

from abc import ABC, abstractmethod


class StackCore(ABC):
    '''
    Primitive stack-shape operations.

    Every operand-consuming operation raises NotEnoughOperands when the
    stack holds fewer elements than it needs, and leaves the stack as it
    was.
    '''

    @abstractmethod
    def push(self, value):
        '''
        Put value on top of the stack.
        '''

    @abstractmethod
    def pop(self):
        '''
        Remove and return the top of the stack.
        '''

    @abstractmethod
    def swap(self):
        '''
        Exchange the two topmost elements.
        '''

    @abstractmethod
    def rotate_up(self):
        '''
        Move the bottommost element to the top, shifting the rest down.

        Doing this as many times as there are elements is a no-op.
        '''

    @abstractmethod
    def rotate_down(self):
        '''
        Move the top element to the bottom, shifting the rest up.

        Exact inverse of rotate_up.
        '''

    @abstractmethod
    def clear(self):
        '''
        Forget every element.
        '''

    def drop(self):
        '''
        Pop and discard the top of the stack.
        '''
        self.pop()


class ElementApplier(ABC):
    '''
    Apply functions to the elements at the top of the stack.

    Numbers are immutable, so instead of mutating an element in place the
    function returns its replacement. The function is always called before
    the stack is touched: if it raises, the stack is left as it was and the
    exception propagates unchanged.
    '''

    @abstractmethod
    def apply_unary(self, f):
        '''
        Replace the top element with f(top).
        '''

    @abstractmethod
    def apply_binary_keep_first(self, f):
        '''
        Consume the top two elements, leaving f(top, second) on top.

        Elements below the second one move up one position.
        '''

    @abstractmethod
    def apply_binary_keep_second(self, f):
        '''
        Consume the top two elements, storing f(top, second) in the second
        element's slot and discarding the former top.

        The stack then collapses by one position exactly as with
        apply_binary_keep_first, so the result ends up on top.
        '''
