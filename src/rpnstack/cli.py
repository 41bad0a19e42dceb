import sys
from argparse import ArgumentParser
import logging

from prompt_toolkit import print_formatted_text, HTML

from .util import RPNError, wrap_user_errors
from .lexer import NumberLexer
from .classic import FixedRegisterStack
from .dynamic import DynamicStack


logger = logging.getLogger(__name__)


class CLI:
    '''
    Command line walkthrough of the stack operations.

    Seeds a stack, runs a fixed sequence of operations on it, and prints
    the stack after each. Reads no commands.
    '''

    KINDS = 'classic', 'dynamic'
    DEFAULT_KIND = 'classic'
    # Pushed in order, so the classic stack starts as X=1, Y=2, Z=3, T=4.
    DEFAULT_VALUES = '4', '3', '2', '1'

    def __init__(self, file=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.

        :param file: Where to print stacks; stdout by default.
        '''
        self.file = file
        self.argument_parser = ArgumentParser(
            description='RPN register stack walkthrough')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--kind',
                                          choices=self.KINDS,
                                          default=self.DEFAULT_KIND)
        self.argument_parser.add_argument('-t', '--type',
                                          choices=sorted(NumberLexer.FMTS),
                                          default=NumberLexer.DEFAULT_FMT,
                                          dest='fmt')
        self.argument_parser.add_argument('values',
                                          nargs='*',
                                          metavar='VALUE',
                                          help='numbers to push first, '
                                               'last one on top')

    def _stack(self):
        '''
        Build and seed the stack asked for on the command line.
        '''
        values = self.args.values or self.DEFAULT_VALUES
        seeds = list(self.lexer.lex(' '.join(values)))
        if self.args.kind == 'dynamic':
            return DynamicStack.from_slice(seeds)
        stack = FixedRegisterStack.new_zero(self.lexer.convert('0'))
        for seed in seeds:
            stack.push(seed)
        return stack

    def show(self, title, stack):
        '''
        Print title and stack, the top in bold.
        '''
        print_formatted_text(HTML('<u>{}</u>').format(title), file=self.file)
        lines = str(stack).splitlines() or ['(empty)']
        for line in lines[:-1]:
            print_formatted_text(HTML('{}').format(line), file=self.file)
        print_formatted_text(HTML('<b>{}</b>').format(lines[-1]),
                             file=self.file)

    @wrap_user_errors('{1} failed')
    def _run(self, title, f, *args):
        return f(*args)

    def step(self, stack, title, f, *args):
        '''
        Run one operation and show the result. Errors are reported, not
        fatal.
        '''
        try:
            result = self._run(title, f, *args)
        except RPNError as e:
            # wrap_user_errors keeps the cause as the second arg.
            print(': '.join(str(arg) for arg in e.args), file=sys.stderr)
            logger.debug('%s failed', title, exc_info=True)
            return
        if result is not None:
            print_formatted_text(HTML('{} returned <b>{}</b>')
                                 .format(title, result), file=self.file)
        self.show('After {}:'.format(title), stack)

    def walkthrough(self):
        '''
        Exercise the stack operations, then a little arithmetic.
        '''
        stack = self._stack()
        number = self.lexer.convert
        self.show('Initial stack:', stack)
        for title, f, *args in [
                ('rotation (up)', stack.rotate_up),
                ('rotation (down)', stack.rotate_down),
                ('swap', stack.swap),
                ('swap', stack.swap),
                ('drop', stack.drop),
                ('pop', stack.pop),
                ('pushing 7', stack.push, number('7')),
                ('clearing', stack.clear),
                ('pushing 1', stack.push, number('1')),
                ('pushing 2', stack.push, number('2')),
                ('pushing 3', stack.push, number('3')),
                ('pushing 4', stack.push, number('4')),
                ('pushing 10', stack.push, number('10')),
                ('computing ln', stack.ln),
                # ln always gives a float; keep the chosen type.
                ('converting back to ' + number.__name__,
                 stack.apply_unary, number),
                ('pushing 10', stack.push, number('10')),
                ('multiplying', stack.multiply),
                ('dividing', stack.divide),
                ('raising to a power', stack.power)]:
            self.step(stack, title, f, *args)
        return stack

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        try:
            self.lexer = NumberLexer(self.args.fmt)
            return self.walkthrough()
        except RPNError as e:
            print(e.args[0], file=sys.stderr)
            sys.exit(2)
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
