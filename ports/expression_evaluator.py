"""
Port: ExpressionEvaluator
Odpowiedzialność: liczenie wyrażenia infiksowego z jedną zmienną `x`.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExpressionEvaluator(Protocol):
    def evaluate(self, expression: str, x: float) -> float:
        """
        Evaluates an infix expression built from numeric literals, the
        variable `x`, parentheses and the binary operators + - * /.
        `x` is substituted wherever the character `x` appears.

        Returns a float with IEEE-754 semantics: division by zero yields
        inf / -inf / nan instead of raising.
        Raises an EvalError subclass (see contracts.py) for malformed input.
        Must be pure: no state survives between calls.
        """
        ...
