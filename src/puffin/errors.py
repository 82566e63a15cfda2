# Error classes raised by the Puffin pipeline
# Every error is fatal: the lexer, parser and interpreter raise, only the CLI catches
class PuffinError(Exception):
    kind = 'PuffinError'

    def __init__(self, message, line=None, column=None):
        self.message = message  # Human-readable description
        self.line = line        # 1-based line, None when no position is known
        self.column = column    # 1-based column, None when no position is known
        super().__init__(str(self))

    def __str__(self):
        if self.line is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} at line {self.line}, column {self.column}"


# Raised by the lexer for characters or literals it cannot turn into a token
class LexicalError(PuffinError):
    kind = 'LexicalError'


# Raised by the parser when the token stream does not match the grammar
class ParseError(PuffinError):
    kind = 'SyntaxError'

    def __init__(self, expected, found, line=None, column=None):
        self.expected = expected  # Construct the parser was looking for
        self.found = found        # Text of the token actually found
        super().__init__(f"Expected {expected}, found {found}", line, column)


class PuffinRuntimeError(PuffinError):
    kind = 'RuntimeError'


class DivisionByZero(PuffinRuntimeError, ZeroDivisionError):
    kind = 'DivisionByZero'


# Raised when a name bound as a scalar is used as an array, or the reverse
class NameKindConflict(PuffinRuntimeError):
    kind = 'NameKindConflict'

    def __init__(self, name, bound_kind, used_kind, line=None, column=None):
        self.name = name
        self.bound_kind = bound_kind
        self.used_kind = used_kind
        super().__init__(
            f"'{name}' is bound as {bound_kind} but used as {used_kind}", line, column)
