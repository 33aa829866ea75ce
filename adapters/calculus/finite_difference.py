"""
Adapter: FiniteDifferenceCalculus
Implementuje port NumericCalculus na bazie wstrzykniętego ExpressionEvaluator.

Pochodna:
  forward  — (f(x+h) - f(x)) / h          (2 ewaluacje)
  central  — (f(x+h) - f(x-h)) / (2h)     (2 ewaluacje)

Całka oznaczona (złożone kwadratury na n równych podprzedziałach):
  trapezoid — h * (f0/2 + f1 + ... + f(n-1) + fn/2)
  simpson   — h/3 * (f0 + 4*f_nieparz + 2*f_parz + fn), n zaokrąglane w górę do parzystej

Błędy ewaluatora (EvalError) przechodzą bez zmian; inf/nan z f(x) też.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from adapters.expression_evaluator.stack_evaluator import bind
from contracts import DerivativeResult, IntegralResult
from ports.expression_evaluator import ExpressionEvaluator

logger = logging.getLogger("unicalc.calculus")

DERIVATIVE_METHODS = ("forward", "central")
INTEGRATION_METHODS = ("trapezoid", "simpson")


def _trapezoid(f: Callable[[float], float], a: float, h: float, n: int) -> float:
    inner = math.fsum(f(a + i * h) for i in range(1, n))
    return h * ((f(a) + f(a + n * h)) / 2.0 + inner)


def _simpson(f: Callable[[float], float], a: float, h: float, n: int) -> float:
    odd = math.fsum(f(a + i * h) for i in range(1, n, 2))
    even = math.fsum(f(a + i * h) for i in range(2, n, 2))
    return h / 3.0 * (f(a) + 4.0 * odd + 2.0 * even + f(a + n * h))


class FiniteDifferenceCalculus:
    """Numeryczne pochodne i całki wyrażeń w zmiennej x."""

    def __init__(
        self,
        evaluator: ExpressionEvaluator,
        step: float = 1e-6,
        intervals: int = 1000,
        derivative_method: str = "forward",
        integration_method: str = "simpson",
    ) -> None:
        self._evaluator = evaluator
        self._step = _check_step(step)
        self._intervals = _check_intervals(intervals)
        self._derivative_method = _check_method(derivative_method, DERIVATIVE_METHODS)
        self._integration_method = _check_method(integration_method, INTEGRATION_METHODS)

    # -- NumericCalculus protocol --------------------------------------------

    def derivative(
        self,
        expression: str,
        x: float,
        step: Optional[float] = None,
        method: Optional[str] = None,
    ) -> DerivativeResult:
        h = self._step if step is None else _check_step(step)
        method = self._derivative_method if method is None else _check_method(
            method, DERIVATIVE_METHODS
        )
        f = bind(expression, self._evaluator)

        if method == "forward":
            value = (f(x + h) - f(x)) / h
        else:
            value = (f(x + h) - f(x - h)) / (2.0 * h)

        logger.debug("d/dx %r at x=%r (%s, h=%r) = %r", expression, x, method, h, value)
        return DerivativeResult(
            expression=expression,
            x=x,
            step=h,
            method=method,  # type: ignore[arg-type]
            value=value,
            evaluations=2,
        )

    def integral(
        self,
        expression: str,
        lower: float,
        upper: float,
        intervals: Optional[int] = None,
        method: Optional[str] = None,
    ) -> IntegralResult:
        n = self._intervals if intervals is None else _check_intervals(intervals)
        method = self._integration_method if method is None else _check_method(
            method, INTEGRATION_METHODS
        )
        if method == "simpson" and n % 2:
            n += 1

        if lower == upper:
            value = 0.0
        else:
            f = bind(expression, self._evaluator)
            h = (upper - lower) / n
            rule = _simpson if method == "simpson" else _trapezoid
            value = rule(f, lower, h, n)

        logger.debug(
            "integral %r over [%r, %r] (%s, n=%d) = %r",
            expression, lower, upper, method, n, value,
        )
        return IntegralResult(
            expression=expression,
            lower=lower,
            upper=upper,
            intervals=n,
            method=method,  # type: ignore[arg-type]
            value=value,
        )


def _check_step(step: float) -> float:
    if not step > 0 or math.isinf(step):
        raise ValueError(f"Krok różnicowy musi być dodatni i skończony, jest {step!r}")
    return float(step)


def _check_intervals(intervals: int) -> int:
    if intervals < 1:
        raise ValueError(f"Liczba podprzedziałów musi być >= 1, jest {intervals!r}")
    return int(intervals)


def _check_method(method: str, allowed: tuple[str, ...]) -> str:
    if method not in allowed:
        raise ValueError(f"Nieznana metoda {method!r}; dostępne: {', '.join(allowed)}")
    return method
