import csv
import io

import pytest

from puffin.ast import Scalar, Array, Literal, Var
from puffin.errors import NameKindConflict
from puffin.evaluator import Evaluator
from puffin.lexer import INT64_MAX
from puffin.values import Environment, Integer, apply_operator, SCALAR, ARRAY, INT64_MIN


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def evaluator():
    return Evaluator()


def element(name, index):
    return Array(name, Literal(index))


def test_unbound_reads_are_zero(env, evaluator):
    assert env.read(Scalar('x'), evaluator) == 0
    assert env.read(element('a', 3), evaluator) == 0
    # Reading does not bind a name
    assert env.kind_of('x') is None
    assert env.kind_of('a') is None


def test_write_then_read(env, evaluator):
    env.write(Scalar('x'), 5, evaluator)
    env.write(element('a', 2), Integer(9), evaluator)
    assert env.read(Scalar('x'), evaluator) == 5
    assert env.read(element('a', 2), evaluator) == 9
    assert env.read(element('a', 3), evaluator) == 0
    assert env.kind_of('x') == SCALAR
    assert env.kind_of('a') == ARRAY
    assert env.scalars() == {'x': 5}
    assert env.arrays() == {'a': {2: 9}}


def test_index_is_evaluated(env, evaluator):
    env.write(Scalar('i'), 4, evaluator)
    env.write(Array('a', Var(Scalar('i'))), 1, evaluator)
    assert env.arrays() == {'a': {4: 1}}


def test_scalar_used_as_array(env, evaluator):
    env.write(Scalar('a'), 1, evaluator)
    with pytest.raises(NameKindConflict) as exc_info:
        env.read(Array('a', Literal(0), 3, 7), evaluator)
    error = exc_info.value
    assert (error.name, error.bound_kind, error.used_kind) == ('a', SCALAR, ARRAY)
    assert (error.line, error.column) == (3, 7)
    with pytest.raises(NameKindConflict):
        env.write(element('a', 0), 1, evaluator)


def test_array_used_as_scalar(env, evaluator):
    env.write(element('a', 0), 1, evaluator)
    with pytest.raises(NameKindConflict):
        env.read(Scalar('a'), evaluator)
    with pytest.raises(NameKindConflict):
        env.write(Scalar('a'), 2, evaluator)


def test_conflict_without_position(env, evaluator):
    env.write(Scalar('a'), 1, evaluator)
    with pytest.raises(NameKindConflict) as exc_info:
        env.read(element('a', 0), evaluator)
    assert exc_info.value.line is None
    assert str(exc_info.value) == "NameKindConflict: 'a' is bound as scalar but used as array"


@pytest.mark.parametrize('op, left, right, expected', [
    ('+', 2, 3, 5),
    ('-', 3, 10, -7),
    ('*', 6, 7, 42),
    ('/', 7, 2, 3),
    ('/', -7, 2, -3),
    ('>', 3, 2, 1),
    ('>', 2, 3, 0),
    ('>=', 2, 2, 1),
    ('<', 1, 2, 1),
    ('<=', 3, 2, 0),
    ('==', 4, 4, 1),
    ('!=', 4, 4, 0),
])
def test_apply_operator(op, left, right, expected):
    assert apply_operator(op, Integer(left), Integer(right)) == Integer(expected)


def test_arithmetic_wraps_at_64_bits():
    assert apply_operator('+', Integer(INT64_MAX), Integer(1)).value == -2 ** 63
    assert apply_operator('*', Integer(2 ** 62), Integer(4)).value == 0


def test_min_divided_by_minus_one_wraps():
    assert apply_operator('/', Integer(INT64_MIN), Integer(-1)) == Integer(INT64_MIN)
    assert apply_operator('/', Integer(INT64_MIN), Integer(1)) == Integer(INT64_MIN)


def test_integer_truthiness():
    assert Integer(3).is_truthy()
    assert not Integer(0).is_truthy()
    assert Integer(0).is_zero()


def test_to_table(env, evaluator):
    env.write(Scalar('x'), 5, evaluator)
    env.write(element('b', 10), 1, evaluator)
    env.write(element('b', 2), 7, evaluator)
    table = env.to_table()
    assert table.column_names == ['name', 'kind', 'index', 'value']
    assert table.to_pydict() == {
        'name': ['b', 'b', 'x'],
        'kind': ['array', 'array', 'scalar'],
        'index': [2, 10, None],
        'value': [7, 1, 5],
    }


def test_to_csv(env, evaluator):
    env.write(Scalar('x'), 5, evaluator)
    env.write(element('b', 2), 7, evaluator)
    rows = list(csv.reader(io.StringIO(env.to_csv())))
    assert rows == [
        ['name', 'kind', 'index', 'value'],
        ['b', 'array', '2', '7'],
        ['x', 'scalar', '', '5'],
    ]

