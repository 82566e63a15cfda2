import sys
from .lexer import Lexer
from .parser import Parser
from .interpreter import Interpreter


def _trace(message):
    print(message, file=sys.stderr)


def run_puffin(code, out=None, debug=False):
    """Run the Puffin interpreter.

    Args:
        code (str): The source code to execute
        out: Writable text sink for print output (defaults to sys.stdout)
        debug (bool): If True, traces each pipeline stage on stderr

    Returns:
        Environment: The final variable state

    Raises:
        PuffinError: The first lexical, syntax or runtime error
    """
    if debug:
        _trace("Tokenizing...")
    # Convert source code to tokens
    lexer = Lexer(code)
    tokens = lexer.tokenize()
    if debug:
        _trace("Tokens: " + ", ".join(str(t) for t in tokens))
        _trace("Parsing...")

    # Convert tokens to AST
    parser = Parser(tokens)
    program = parser.parse()
    if debug:
        _trace(f"Parsed {len(program.routines)} routine(s)")
        _trace("Interpreting...")

    # Execute the AST
    interpreter = Interpreter(out)
    environment = interpreter.interpret(program)
    if debug:
        _trace("Done.")
    return environment


if __name__ == "__main__":
    test_code = """
    # Count up in begin, test in the body, report in end
    begin { x = 5; squares[x] = x * x; print x }
    x > 3 { print x * 2; total += squares[x] }
    x > 9 { print 0 }
    end { print x + 1, total }
    """

    run_puffin(test_code, debug=True)
