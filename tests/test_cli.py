'''
Walkthrough driver tests
'''

from decimal import Decimal
from io import StringIO
import math

from rpnstack import FixedRegisterStack, DynamicStack
from rpnstack.cli import CLI
from rpnstack.lexer import NumberLexer

from pytest import approx, mark, raises


def run(*args):
    out = StringIO()
    stack = CLI(file=out).run(args=list(args))
    return stack, out.getvalue()


def test_classic_walkthrough():
    stack, out = run()
    assert isinstance(stack, FixedRegisterStack)
    assert 'Initial stack:' in out
    assert 'X: 1.0' in out
    assert 'pop returned 2.0' in out
    # 3 4 (10 * ln 10) / then ** leaves 3 ** (4 / (10 * ln 10))
    assert stack.x == approx(3.0 ** (4 / (10 * math.log(10))))
    assert (stack.y, stack.z, stack.t) == (3.0, 3.0, 3.0)


def test_dynamic_walkthrough():
    stack, out = run('--kind', 'dynamic', '-t', 'i', '5', '6')
    assert isinstance(stack, DynamicStack)
    assert '0: 6' in out
    # int(ln 10) is 2, so 4 / (10 * 2) ** leaves 3 ** 0.2
    assert stack.to_list() == [approx(3.0 ** 0.2), 2, 1]


def test_errors_reported_not_fatal(capsys):
    # Dynamic stack with a single seed: swaps fail, the rest carries on.
    stack, out = run('-k', 'dynamic', '1')
    err = capsys.readouterr().err
    assert 'swap failed' not in err
    assert 'Not enough operands: 2 required, 1 available' in err
    assert isinstance(stack, DynamicStack)


def test_bad_seed_exits(capsys):
    with raises(SystemExit) as excinfo:
        run('1', 'x')
    assert excinfo.value.code == 2
    assert "Couldn't lex x" in capsys.readouterr().err


@mark.parametrize('kind', CLI.KINDS)
@mark.parametrize('fmt', sorted(NumberLexer.FMTS))
def test_walkthrough_every_type(capsys, kind, fmt):
    stack, out = run('-k', kind, '-t', fmt)
    assert capsys.readouterr().err == ''
    assert 'After raising to a power:' in out
    assert len(stack) == (4 if kind == 'classic' else 3)


def test_decimal_walkthrough_keeps_decimal():
    stack, out = run('-t', 'D')
    assert 'After converting back to Decimal:' in out
    assert stack.y == Decimal('3')


def test_step_reports_cause(capsys):
    cli = CLI(file=StringIO())

    def boom():
        raise TypeError('no mixing')
    cli.step(DynamicStack(), 'mixing', boom)
    assert capsys.readouterr().err == 'mixing failed: no mixing\n'


def test_step_passes_stack_errors(capsys):
    cli = CLI(file=StringIO())
    cli.step(DynamicStack(), 'pop', DynamicStack().pop)
    assert capsys.readouterr().err == \
        'Not enough operands: 1 required, 0 available\n'
