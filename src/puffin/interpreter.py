import sys
from enum import Enum

from .ast import Begin, End, Conditional, Print, Assign
from .evaluator import Evaluator
from .values import Environment, Integer


class Phase(Enum):
    INIT = 'init'
    RUNNING_BEGIN = 'running-begin'
    RUNNING_BODY = 'running-body'
    RUNNING_END = 'running-end'
    DONE = 'done'


class Interpreter:
    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout  # Sink for print output
        self.evaluator = Evaluator()
        self.environment = None
        self.phase = Phase.INIT

    def interpret(self, program):
        """Runs a parsed program: begin routines, then each conditional routine once, then end routines.

        Any error raised while running aborts the run and propagates unchanged;
        ``phase`` is left at the phase that failed.

        Args:
            program (Program): The parsed program

        Returns:
            Environment: The final variable state
        """
        self.phase = Phase.INIT
        self.environment = Environment()

        self.phase = Phase.RUNNING_BEGIN
        for routine in program.routines:
            if isinstance(routine, Begin):
                self._execute_action(routine.action)

        self.phase = Phase.RUNNING_BODY
        for routine in program.routines:
            if isinstance(routine, Conditional):
                self._execute_routine(routine)

        self.phase = Phase.RUNNING_END
        for routine in program.routines:
            if isinstance(routine, End):
                self._execute_action(routine.action)

        self.phase = Phase.DONE
        return self.environment

    def _execute_routine(self, routine):
        if routine.condition is not None:
            condition = Integer(self.evaluator.evaluate(routine.condition, self.environment))
            if not condition.is_truthy():
                return
        if routine.action is not None:
            self._execute_action(routine.action)

    def _execute_action(self, action):
        for stmt in action.statements:
            self._execute_statement(stmt)

    def _execute_statement(self, stmt):
        if isinstance(stmt, Print):
            values = [self.evaluator.evaluate(expr, self.environment) for expr in stmt.values]
            self.out.write(' '.join(str(value) for value in values) + '\n')
            # Output order must match execution order, even when a later statement fails
            if hasattr(self.out, 'flush'):
                self.out.flush()
        elif isinstance(stmt, Assign):
            value = self.evaluator.evaluate(stmt.value, self.environment)
            self.environment.write(stmt.target, value, self.evaluator)
        else:
            raise ValueError(f"Unknown statement node: {stmt!r}")
