"""
contracts.py — Jedyne źródło prawdy dla typów danych w UniCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd (modele wyników + wyjątki ewaluatora).
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_serializer

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Helpers ─────────────────────────────────────

def json_float(value: float) -> Union[float, str]:
    """JSON nie ma literałów dla inf/NaN — zamieniamy je na napisy."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


# ─────────────────────────── Evaluator: błędy ────────────────────────────

class EvalError(ValueError):
    """Bazowy błąd ewaluatora wyrażeń. `code` jest stabilny (API / CLI)."""

    code = "EVAL_ERROR"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class MalformedNumber(EvalError):
    code = "MALFORMED_NUMBER"

    def __init__(self, literal: str, position: int) -> None:
        super().__init__(f"Niepoprawna liczba {literal!r} (pozycja {position})", position)
        self.literal = literal


class UnexpectedCharacter(EvalError):
    code = "UNEXPECTED_CHARACTER"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Nieoczekiwany znak {char!r} (pozycja {position})", position)
        self.char = char


class InsufficientOperands(EvalError):
    code = "INSUFFICIENT_OPERANDS"

    def __init__(self, operator: str) -> None:
        super().__init__(f"Za mało argumentów dla operatora {operator!r}")
        self.operator = operator


class MalformedExpression(EvalError):
    code = "MALFORMED_EXPRESSION"

    def __init__(self, reason: str, position: Optional[int] = None) -> None:
        super().__init__(f"Niepoprawne wyrażenie: {reason}", position)
        self.reason = reason


class UnknownOperator(EvalError):
    code = "UNKNOWN_OPERATOR"

    def __init__(self, operator: str) -> None:
        super().__init__(f"Nieznany operator: {operator!r}")
        self.operator = operator


class NestingTooDeep(EvalError):
    code = "NESTING_TOO_DEEP"

    def __init__(self, limit: int, position: int) -> None:
        super().__init__(
            f"Zbyt głębokie zagnieżdżenie nawiasów (limit {limit}, pozycja {position})",
            position,
        )
        self.limit = limit


# ─────────────────────────── Evaluator: wynik ────────────────────────────

class EvalResult(BaseModel):
    expression: str
    x: float
    value: float

    @field_serializer("x", "value", when_used="json")
    def _ser_float(self, v: float) -> Union[float, str]:
        return json_float(v)


# ─────────────────────────── Calculus ────────────────────────────────────

DerivativeMethod = Literal["forward", "central"]
IntegrationMethod = Literal["trapezoid", "simpson"]


class DerivativeResult(BaseModel):
    expression: str
    x: float
    step: float
    method: DerivativeMethod
    value: float
    evaluations: int  # ile razy wywołano f(x)

    @field_serializer("x", "value", when_used="json")
    def _ser_float(self, v: float) -> Union[float, str]:
        return json_float(v)


class IntegralResult(BaseModel):
    expression: str
    lower: float
    upper: float
    intervals: int     # faktycznie użyta liczba podprzedziałów
    method: IntegrationMethod
    value: float

    @field_serializer("value", when_used="json")
    def _ser_float(self, v: float) -> Union[float, str]:
        return json_float(v)


# ─────────────────────────── Statistics ──────────────────────────────────

class StatsSummary(BaseModel):
    count: int
    mean: float
    variance: float
    std_dev: float
    minimum: float
    maximum: float
    sample: bool = False  # True = wariancja z próby (n-1)


# ─────────────────────────── Menu ────────────────────────────────────────

class MathGroup(str, Enum):
    ARITHMETIC = "arithmetic"
    LINEAR_ALGEBRA = "linear_algebra"
    CALCULUS = "calculus"
    STATISTICS = "statistics"
    PROBABILITY = "probability"
    MACHINE_LEARNING = "machine_learning"


class MenuEntry(BaseModel):
    key: str          # klawisz w menu: "1".."6"
    group: MathGroup
    title: str
    functions: list[str] = Field(default_factory=list)
