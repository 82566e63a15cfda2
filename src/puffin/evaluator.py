from .ast import Literal, Var, BinOp
from .errors import DivisionByZero, PuffinRuntimeError
from .values import Integer, apply_operator


# Evaluator computes the integer value of an expression against an Environment
class Evaluator:
    def evaluate(self, expression, environment):
        """Evaluates an expression node.

        Args:
            expression (Node): Literal, Var or BinOp node
            environment (Environment): Variable storage for the current run

        Returns:
            int: The value of the expression
        """
        try:
            return self._eval_expression(expression, environment).value
        except RecursionError:
            raise PuffinRuntimeError("Expression nested too deeply") from None

    def _eval_expression(self, expression, environment):
        if isinstance(expression, Literal):
            return Integer(expression.value)
        elif isinstance(expression, Var):
            return Integer(environment.read(expression.target, self))
        elif isinstance(expression, BinOp):
            # Left operand first, then right
            left = self._eval_expression(expression.left, environment)
            right = self._eval_expression(expression.right, environment)
            if expression.op == '/' and right.is_zero():
                raise DivisionByZero(
                    "Division by zero", expression.line or None, expression.column or None)
            return apply_operator(expression.op, left, right)
        raise ValueError(f"Unknown expression node: {expression!r}")
