# Abstract Syntax Tree (AST) Node classes
# These classes represent the structure of the program after parsing.
# Nodes are frozen and child sequences are tuples, so a parsed Program never changes.
from dataclasses import dataclass
from typing import Optional, Tuple


class Node:
    pass


# Expressions

# Represents a non-negative integer literal (e.g., 5, 10, 15)
@dataclass(frozen=True)
class Literal(Node):
    value: int


# Represents a scalar variable reference (e.g., x)
@dataclass(frozen=True)
class Scalar(Node):
    name: str
    line: int = 0
    column: int = 0


# Represents an array element reference (e.g., a[i + 1])
@dataclass(frozen=True)
class Array(Node):
    name: str
    index: Node
    line: int = 0
    column: int = 0


# Represents reading an identifier inside an expression
@dataclass(frozen=True)
class Var(Node):
    target: Node  # Scalar or Array


# Represents a binary operation (e.g., x + 1, a[0] > 3)
@dataclass(frozen=True)
class BinOp(Node):
    op: str
    left: Node
    right: Node
    line: int = 0
    column: int = 0


# Statements

# Represents a print statement; one output line per execution
@dataclass(frozen=True)
class Print(Node):
    values: Tuple[Node, ...]


# Represents an assignment (e.g., x = 5 or a[1] = x * 2)
@dataclass(frozen=True)
class Assign(Node):
    target: Node  # Scalar or Array
    value: Node


# Routines

# Represents a brace-delimited list of statements
@dataclass(frozen=True)
class Action(Node):
    statements: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Begin(Node):
    action: Action


@dataclass(frozen=True)
class End(Node):
    action: Action


# Represents a pattern-action routine; either part may be missing
@dataclass(frozen=True)
class Conditional(Node):
    condition: Optional[Node] = None
    action: Optional[Action] = None


@dataclass(frozen=True)
class Program(Node):
    routines: Tuple[Node, ...] = ()
