"""Runtime values and variable storage.

All Puffin numbers are signed 64-bit integers held as ``pyarrow.int64``
scalars while an operator is applied, so overflow wraps the same way on
every platform. ``Value`` is the tagged variant; ``Integer`` is its only
kind today.
"""
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.csv as pacsv

from .ast import Array
from .errors import NameKindConflict

INT64_MIN = -2 ** 63

SCALAR = 'scalar'
ARRAY = 'array'

# Binary operators and the pyarrow compute kernels implementing them.
# The unchecked arithmetic kernels wrap on overflow; integer divide truncates toward zero.
OPERATIONS = {
    '+': pc.add,
    '-': pc.subtract,
    '*': pc.multiply,
    '/': pc.divide,
    '>': pc.greater,
    '>=': pc.greater_equal,
    '<': pc.less,
    '<=': pc.less_equal,
    '==': pc.equal,
    '!=': pc.not_equal,
}


class Value:
    def is_truthy(self):
        raise NotImplementedError


class Integer(Value):
    def __init__(self, value):
        self.value = int(value)

    def __eq__(self, other):
        return isinstance(other, Integer) and other.value == self.value

    def __repr__(self):
        return f"Integer({self.value})"

    def __str__(self):
        return str(self.value)

    def is_truthy(self):
        return self.value != 0

    def is_zero(self):
        return self.value == 0

    def to_arrow(self):
        return pa.scalar(self.value, type=pa.int64())


def apply_operator(op, left, right):
    """Applies binary operator ``op`` to two Values and returns an Integer.

    Comparisons yield 1 for true and 0 for false.
    """
    # Arrow's unchecked divide returns 0 here; two's complement wraps back to INT64_MIN
    if op == '/' and left.value == INT64_MIN and right.value == -1:
        return Integer(INT64_MIN)
    result = OPERATIONS[op](left.to_arrow(), right.to_arrow()).as_py()
    if isinstance(result, bool):
        return Integer(1 if result else 0)
    return Integer(result)


# Environment holds every scalar and array binding for one run
class Environment:
    def __init__(self):
        self._scalars = {}  # name -> Integer
        self._arrays = {}   # name -> {index -> Integer}

    def kind_of(self, name):
        """Returns SCALAR, ARRAY, or None when the name is still unbound."""
        if name in self._scalars:
            return SCALAR
        if name in self._arrays:
            return ARRAY
        return None

    def _check_kind(self, identifier, kind):
        bound = self.kind_of(identifier.name)
        if bound is not None and bound != kind:
            raise NameKindConflict(
                identifier.name, bound, kind, identifier.line or None, identifier.column or None)

    def read(self, identifier, evaluator):
        """Returns the integer stored at ``identifier``; unbound names and unset indices read as 0."""
        if isinstance(identifier, Array):
            self._check_kind(identifier, ARRAY)
            index = evaluator.evaluate(identifier.index, self)
            value = self._arrays.get(identifier.name, {}).get(index)
        else:
            self._check_kind(identifier, SCALAR)
            value = self._scalars.get(identifier.name)
        return value.value if value is not None else 0

    def write(self, identifier, value, evaluator):
        """Stores ``value`` at ``identifier``, fixing the name's kind on first use."""
        if not isinstance(value, Value):
            value = Integer(value)
        if isinstance(identifier, Array):
            self._check_kind(identifier, ARRAY)
            index = evaluator.evaluate(identifier.index, self)
            self._arrays.setdefault(identifier.name, {})[index] = value
        else:
            self._check_kind(identifier, SCALAR)
            self._scalars[identifier.name] = value

    def scalars(self):
        return {name: value.value for name, value in self._scalars.items()}

    def arrays(self):
        return {
            name: {index: value.value for index, value in elements.items()}
            for name, elements in self._arrays.items()
        }

    def to_table(self):
        """Returns every binding as a pyarrow Table sorted by name, then index.

        Columns are name, kind, index (null for scalars) and value.
        """
        rows = [(name, SCALAR, None, value.value) for name, value in self._scalars.items()]
        for name, elements in self._arrays.items():
            rows.extend((name, ARRAY, index, value.value) for index, value in elements.items())
        rows.sort(key=lambda row: (row[0], row[2] if row[2] is not None else 0))

        return pa.table({
            'name': pa.array([row[0] for row in rows], type=pa.string()),
            'kind': pa.array([row[1] for row in rows], type=pa.string()),
            'index': pa.array([row[2] for row in rows], type=pa.int64()),
            'value': pa.array([row[3] for row in rows], type=pa.int64()),
        })

    def to_csv(self):
        """Returns the environment state in CSV format."""
        sink = pa.BufferOutputStream()
        pacsv.write_csv(self.to_table(), sink)
        return sink.getvalue().to_pybytes().decode('utf-8')
