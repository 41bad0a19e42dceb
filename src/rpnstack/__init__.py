'''
RPN calculator register stacks.

Two stacks: the classic four register X/Y/Z/T stack of scientific
calculators, whose top register T is duplicated downwards as operands are
consumed, and an unbounded stack that complains when it runs dry.

Both implement the same shape operations (push, pop, drop, swap, rotate,
clear), and the same three "apply a function to the top of the stack"
primitives. Arithmetic, logarithms and trigonometry are built once on those
primitives, so every stack gets them for free.

This is just the data structure. No parsing, no command language.
'''

from .util import RPNError, StackError, NotEnoughOperands
from .contracts import StackCore, ElementApplier
from .derived import (BasicMathOperations,
                      FloatMathOperations,
                      DerivedOperations)
from .classic import FixedRegisterStack
from .dynamic import DynamicStack


__all__ = ('FixedRegisterStack', 'DynamicStack',
           'StackCore', 'ElementApplier',
           'BasicMathOperations', 'FloatMathOperations', 'DerivedOperations',
           'RPNError', 'StackError', 'NotEnoughOperands')
