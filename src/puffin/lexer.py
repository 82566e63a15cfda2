import string

from .errors import LexicalError

# Largest value a Puffin integer can hold (signed 64-bit)
INT64_MAX = 2 ** 63 - 1

DIGITS = "0123456789"
LETTERS = string.ascii_letters


# Token class represents a single token in the source code with position tracking
# Used by the lexer to break down source code into meaningful units
class Token:
    def __init__(self, type, value, line=1, column=1):
        self.type = type      # Token type (e.g., NUMBER, OPERATOR, IDENTIFIER)
        self.value = value    # Actual value of the token
        self.line = line      # Line number in source code
        self.column = column  # Column number in source code

    def __str__(self):
        return f"Token({self.type}, {self.value}, line={self.line}, col={self.column})"

    def __repr__(self):
        return str(self)

    def text(self):
        """Source-like rendering of the token, used in error messages."""
        if self.type == 'EOF':
            return 'end of input'
        return repr(str(self.value))


# Lexer class breaks down source code into tokens
class Lexer:
    keywords = {'begin': 'BEGIN', 'end': 'END', 'print': 'PRINT'}

    punctuation = {
        '{': 'LBRACE',
        '}': 'RBRACE',
        '[': 'LBRACKET',
        ']': 'RBRACKET',
        '(': 'LPAREN',
        ')': 'RPAREN',
        ';': 'SEMICOLON',
        ',': 'COMMA',
    }

    def __init__(self, text):
        self.text = text      # Source code to tokenize
        self.pos = 0          # Current position in text
        self.line = 1         # Current line number
        self.column = 1       # Current column number
        self.tokens = []      # List of tokens

    # Main tokenization method that processes the entire source code
    def tokenize(self):
        while self.pos < len(self.text):
            char = self.text[self.pos]

            # Skip comments (running from '#' to the end of the line)
            if char == '#':
                self._skip_comment()
                continue

            # Handle whitespace and newlines
            if char.isspace():
                self._advance()
                continue
            # Handle identifiers and keywords
            elif char in LETTERS:
                start_col = self.column
                word = self._read_word()
                token_type = self.keywords.get(word, 'IDENTIFIER')
                self.tokens.append(Token(token_type, word, self.line, start_col))
            elif char in DIGITS:
                self.tokens.append(self._number())
            elif char in self.punctuation:
                self.tokens.append(Token(self.punctuation[char], char, self.line, self.column))
                self._advance()
            else:
                self.tokens.append(self._operator())

        self.tokens.append(Token('EOF', None, self.line, self.column))
        return self.tokens

    # Helper methods for tokenization
    def _advance(self):
        if self.text[self.pos] == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def _peek(self, offset=1):
        if self.pos + offset < len(self.text):
            return self.text[self.pos + offset]
        return ''

    def _skip_comment(self):
        while self.pos < len(self.text) and self.text[self.pos] != '\n':
            self._advance()

    def _read_word(self):
        result = ''
        while self.pos < len(self.text) and self.text[self.pos] in LETTERS + DIGITS:
            result += self.text[self.pos]
            self._advance()
        return result

    def _number(self):
        start_col = self.column
        result = ''
        while self.pos < len(self.text) and self.text[self.pos] in DIGITS:
            result += self.text[self.pos]
            self._advance()
        if self.pos < len(self.text) and self.text[self.pos] in LETTERS:
            raise LexicalError(
                f"Malformed number '{result}{self.text[self.pos]}'", self.line, self.column)
        value = int(result)
        if value > INT64_MAX:
            raise LexicalError(
                f"Number {result} does not fit in a 64-bit integer", self.line, start_col)
        return Token('NUMBER', value, self.line, start_col)

    def _operator(self):
        char = self.text[self.pos]
        line, start_col = self.line, self.column
        pair = char + self._peek()

        if pair in ('>=', '<=', '==', '!='):
            self._advance()
            self._advance()
            return Token('OPERATOR', pair, line, start_col)
        if pair in ('+=', '-='):
            self._advance()
            self._advance()
            return Token('ASSIGN', pair, line, start_col)
        if char == '=':
            self._advance()
            return Token('ASSIGN', char, line, start_col)
        if char in '+-*/<>':
            self._advance()
            return Token('OPERATOR', char, line, start_col)
        raise LexicalError(f"Unexpected character: {char!r}", line, start_col)
