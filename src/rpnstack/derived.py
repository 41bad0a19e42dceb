'''
Arithmetic and transcendental operations, written once for every stack.

Nothing in here knows how a stack is laid out. Each operation is one of the
three ElementApplier primitives plus the function to run, so any class
implementing the primitives gets all of them by mixing these in.

Operand order follows the usual RPN convention of the classic calculators:
the most recently pushed value (top, X) is the divisor and the exponent.
With 20 on the stack followed by 4, divide leaves 5.0 and power leaves
160000.0.
'''

import math
import operator


def _unary(name, f, doc=None):
    '''
    Make stack method name, replacing the top element with f(top).
    '''
    def method(self):
        self.apply_unary(f)
    method.__name__ = method.__qualname__ = name
    method.__doc__ = doc or 'Replace top with {}(top).'.format(name)
    return method


def _keep_first(name, f, doc):
    '''
    Make stack method name, consuming top and second, leaving f(top, second).
    '''
    def method(self):
        self.apply_binary_keep_first(f)
    method.__name__ = method.__qualname__ = name
    method.__doc__ = doc
    return method


def _keep_second(name, f, doc):
    '''
    Make stack method name, consuming top and second, leaving f(top, second)
    where second was.
    '''
    def method(self):
        self.apply_binary_keep_second(f)
    method.__name__ = method.__qualname__ = name
    method.__doc__ = doc
    return method


def _add(top, second):
    return top + second


def _subtract(top, second):
    # Top accumulates: 3 then 10 pushed gives 7.
    return top - second


def _multiply(top, second):
    return top * second


def _divide(top, second):
    return second / top


def _power(top, second):
    return math.pow(second, top)


def _atan2(top, second):
    return math.atan2(second, top)


def _exp2(x):
    return math.pow(2.0, x)


class BasicMathOperations:
    '''
    Arithmetic for any signed number type: int, float, Decimal, Fraction.

    divide is true division: on int elements it leaves a float, 7 then 2
    gives 3.5, not 3. Decimal and Fraction keep their type.
    '''

    add = _keep_first('add', _add,
                      'Replace top and second with top + second.')
    subtract = _keep_first('subtract', _subtract,
                           'Replace top and second with top - second.')
    multiply = _keep_first('multiply', _multiply,
                           'Replace top and second with top * second.')
    divide = _keep_second('divide', _divide,
                          'Replace top and second with second / top.')

    change_sign = _unary('change_sign', operator.neg,
                         'Replace top with -top.')
    negate = change_sign

    absolute_value = _unary('absolute_value', abs,
                            'Replace top with abs(top).')


class FloatMathOperations:
    '''
    Power, logarithms, exponentials and trigonometry.

    Backed by the math module, so arguments must be convertible to float.
    Domain errors are not intercepted: math.asin(2) raises ValueError,
    math.exp(1000) raises OverflowError, and either reaches the caller
    untouched with the stack unchanged. NaN in gives NaN out.
    '''

    # Exponent is the top, base is the second.
    power = _keep_first('power', _power,
                        'Replace top and second with second ** top.')
    pow = power

    ln = _unary('ln', math.log, 'Replace top with its natural logarithm.')
    log2 = _unary('log2', math.log2)
    log10 = _unary('log10', math.log10)
    exp = _unary('exp', math.exp)
    exp2 = _unary('exp2', _exp2, 'Replace top with 2 ** top.')

    sin = _unary('sin', math.sin)
    cos = _unary('cos', math.cos)
    tan = _unary('tan', math.tan)
    asin = _unary('asin', math.asin)
    acos = _unary('acos', math.acos)
    atan = _unary('atan', math.atan)

    atan2 = _keep_first('atan2', _atan2,
                        'Replace top and second with atan2(second, top).')


class DerivedOperations(BasicMathOperations, FloatMathOperations):
    '''
    Everything a stack can compute from its ElementApplier primitives.
    '''


__all__ = 'BasicMathOperations', 'FloatMathOperations', 'DerivedOperations'
