from .errors import ParseError
from .lexer import Token
from .ast import (
    Program, Begin, End, Conditional, Action, Print, Assign,
    Scalar, Array, Var, Literal, BinOp
)

# Binding power of each binary operator; higher binds tighter.
# All operators are left-associative.
PRECEDENCE = {
    '>': 1, '>=': 1, '<': 1, '<=': 1, '==': 1, '!=': 1,
    '+': 2, '-': 2,
    '*': 3, '/': 3,
}

# Tokens that can start an expression
EXPRESSION_START = ('NUMBER', 'IDENTIFIER', 'LPAREN')


# Parser class converts tokens into an Abstract Syntax Tree (AST)
class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        # Token lists from Lexer end in EOF; close hand-built lists the same way
        if not self.tokens or self.tokens[-1].type != 'EOF':
            last = self.tokens[-1] if self.tokens else Token('EOF', None)
            self.tokens.append(Token('EOF', None, last.line, last.column))

    # Main parsing method that processes all tokens
    def parse(self):
        routines = []
        try:
            while not self._match('EOF'):
                routines.append(self._routine())
        except RecursionError:
            raise self._error("a less deeply nested expression") from None
        return Program(tuple(routines))

    # Parses a begin, end or conditional routine
    def _routine(self):
        if self._match('BEGIN'):
            self.pos += 1
            return Begin(self._action())
        if self._match('END'):
            self.pos += 1
            return End(self._action())

        condition = None
        action = None
        if self._current().type in EXPRESSION_START:
            condition = self._expression()
        if self._match('LBRACE'):
            action = self._action()
        if condition is None and action is None:
            raise self._error("routine")
        return Conditional(condition, action)

    # Parses '{' statement (';' statement)* '}' with empty statements allowed
    def _action(self):
        self._expect('LBRACE', "'{'")
        statements = []
        while not self._match('RBRACE'):
            if self._match('SEMICOLON'):
                self.pos += 1
                continue
            statements.append(self._statement())
            if not (self._match('SEMICOLON') or self._match('RBRACE')):
                raise self._error("';' or '}'")
        self.pos += 1  # Skip '}'
        return Action(tuple(statements))

    def _statement(self):
        if self._match('PRINT'):
            self.pos += 1
            values = [self._expression()]
            while self._match('COMMA'):
                self.pos += 1
                values.append(self._expression())
            return Print(tuple(values))

        if self._match('IDENTIFIER'):
            target = self._identifier()
            op = self._expect('ASSIGN', "'=', '+=' or '-='")
            value = self._expression()
            if op.value != '=':
                # x += e is shorthand for x = x + e
                value = BinOp(op.value[0], Var(target), value, op.line, op.column)
            return Assign(target, value)

        raise self._error("statement")

    # Parses a scalar name, or an array element name[expression]
    def _identifier(self):
        token = self._expect('IDENTIFIER', "identifier")
        if self._match('LBRACKET'):
            self.pos += 1
            index = self._expression()
            self._expect('RBRACKET', "']'")
            return Array(token.value, index, token.line, token.column)
        return Scalar(token.value, token.line, token.column)

    # Precedence climbing: parse operators binding at least as tight as min_precedence
    def _expression(self, min_precedence=1):
        left = self._factor()
        while self._match('OPERATOR') and PRECEDENCE[self._current().value] >= min_precedence:
            op = self._current()
            self.pos += 1
            right = self._expression(PRECEDENCE[op.value] + 1)
            left = BinOp(op.value, left, right, op.line, op.column)
        return left

    def _factor(self):
        token = self._current()
        if token.type == 'NUMBER':
            self.pos += 1
            return Literal(token.value)
        elif token.type == 'IDENTIFIER':
            return Var(self._identifier())
        elif token.type == 'LPAREN':
            self.pos += 1
            expr = self._expression()
            self._expect('RPAREN', "')'")
            return expr
        raise self._error("expression")

    # Helper methods for parsing
    def _current(self):
        return self.tokens[self.pos]

    def _match(self, type, value=None):
        token = self.tokens[self.pos]
        if token.type == type:
            if value is None or token.value == value:
                return True
        return False

    def _expect(self, type, expected):
        if not self._match(type):
            raise self._error(expected)
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _error(self, expected):
        token = self.tokens[self.pos]
        return ParseError(expected, token.text(), token.line, token.column)
