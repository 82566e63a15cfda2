"""
Puffin Language Interpreter

A minimal pattern-action scripting language: begin routines, conditional
routines and end routines acting on integer scalars and sparse arrays.
"""

from .main import run_puffin
from .errors import (
    PuffinError, LexicalError, ParseError, PuffinRuntimeError,
    DivisionByZero, NameKindConflict
)

__version__ = "0.1.0"
__all__ = [
    "run_puffin",
    "PuffinError",
    "LexicalError",
    "ParseError",
    "PuffinRuntimeError",
    "DivisionByZero",
    "NameKindConflict",
]
