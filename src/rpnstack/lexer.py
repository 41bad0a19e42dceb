from decimal import Decimal
from fractions import Fraction

import regex

from .util import RPNError


class NumberLexer:
    '''
    Reader for number literals used to seed a stack.

    Only numbers; there are no operators or commands to lex.
    '''
    # Digits before the point. Groups of three may be split with _, the
    # leading group having one to three digits: 7, 1200, 1_200, 12_345_678.
    INTEGRAL = r'''
                \d{1,3}
                (?: \d | _\d{3} )*
                '''
    # Digits after the point, same separator rule: 5, 0125, 200_200.
    FRACTIONAL = r'''
                  \d+
                  (?: _\d{3} )*
                  '''
    # Optionally signed literal. Either side of the point may be empty,
    # not both: 3, 3., .5, -2.25. No exponents.
    NUMBER = r'''
              (?<sign> [-+] )?
              (?<magnitude>
                  (?: {INTEGRAL} (?: \. (?: {FRACTIONAL} )? )? )
                  |
                  (?: (?: {INTEGRAL} )? \. {FRACTIONAL} )
              )
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)
    SPACE = r'\s+'
    # Whole-literal, longest alternative wins.
    FLAGS = regex.VERSION1 | regex.VERBOSE | regex.POSIX

    # Number types a stack can be seeded with.
    FMTS = {
        'i': int,
        'f': float,
        'D': Decimal,
        'F': Fraction,
    }
    DEFAULT_FMT = 'f'

    def __init__(self, fmt=None):
        '''
        :param fmt: Key into FMTS, the type numbers are converted to.
        '''
        fmt = type(self).DEFAULT_FMT if fmt is None else fmt
        try:
            self.convert = type(self).FMTS[fmt]
        except KeyError:
            raise RPNError('No such format {}'.format(repr(fmt))) from None

    def parse(self, text):
        '''
        Convert a single number literal.
        '''
        match = regex.fullmatch(type(self).NUMBER, text.strip(),
                                flags=type(self).FLAGS)
        if match is None:
            raise RPNError("Couldn't lex {}".format(text.strip()))
        literal = match.group('sign') or ''
        literal += match.group('magnitude').replace('_', '')
        try:
            return self.convert(literal)
        except ValueError as e:
            # int('1.5')
            raise RPNError('Cannot convert {} to {}'
                           .format(literal, self.convert.__name__)) from e

    def lex(self, line):
        '''
        Yield every number in a whitespace separated line.
        '''
        for word in regex.split(type(self).SPACE, line.strip()):
            if word:
                yield self.parse(word)
