from pytest import Item, fixture

from rpnstack import FixedRegisterStack, DynamicStack


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, so a stack walkthrough can be audited afterwards.

    Use with pytest -rP and enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def classic():
    '''
    X=1, Y=2, Z=3, T=4.
    '''
    return FixedRegisterStack(1, 2, 3, 4)


@fixture
def dynamic():
    '''
    Top is 1, bottom is 6.
    '''
    return DynamicStack.from_slice([6, 5, 4, 3, 2, 1])
