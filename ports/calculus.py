"""
Port: NumericCalculus
Odpowiedzialność: numeryczne pochodne i całki funkcji f(x) podanej tekstem.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import DerivativeResult, IntegralResult


@runtime_checkable
class NumericCalculus(Protocol):
    def derivative(
        self,
        expression: str,
        x: float,
        step: Optional[float] = None,
        method: Optional[str] = None,
    ) -> DerivativeResult:
        """
        Approximates f'(x) with a finite difference.
        method: "forward" (f(x+h) - f(x)) / h, or "central".
        step/method default to the adapter's configured values.
        Raises ValueError for a non-positive step or unknown method;
        evaluator errors propagate unchanged.
        """
        ...

    def integral(
        self,
        expression: str,
        lower: float,
        upper: float,
        intervals: Optional[int] = None,
        method: Optional[str] = None,
    ) -> IntegralResult:
        """
        Approximates the definite integral of f over [lower, upper].
        method: "trapezoid" or "simpson" (interval count rounded up to even).
        lower > upper gives the negated integral; lower == upper gives 0.
        """
        ...
