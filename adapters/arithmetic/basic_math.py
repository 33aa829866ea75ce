"""
Adapter: BasicMath
Podstawowe działania na dwóch liczbach (menu "Basic Arithmetic").

W odróżnieniu od ewaluatora wyrażeń dzielenie przez zero jest tu błędem.
"""
from __future__ import annotations

from typing import Callable

# Aliasy operacji → nazwa kanoniczna
_OP_ALIASES = {
    "add": "add", "+": "add", "plus": "add",
    "sub": "sub", "-": "sub", "minus": "sub", "subtract": "sub",
    "mul": "mul", "*": "mul", "×": "mul", "times": "mul", "multiply": "mul",
    "div": "div", "/": "div", "÷": "div", "divide": "div",
}


def normalize_operation(op: str) -> str:
    """Zwraca 'add'/'sub'/'mul'/'div' albo rzuca ValueError."""
    canonical = _OP_ALIASES.get(op.strip().lower())
    if canonical is None:
        raise ValueError(f"Nieznana operacja: {op!r}")
    return canonical


class BasicMath:
    """Dodawanie, odejmowanie, mnożenie, dzielenie."""

    @staticmethod
    def add(a: float, b: float) -> float:
        return a + b

    @staticmethod
    def subtract(a: float, b: float) -> float:
        return a - b

    @staticmethod
    def multiply(a: float, b: float) -> float:
        return a * b

    @staticmethod
    def divide(a: float, b: float) -> float:
        if b == 0:
            raise ZeroDivisionError("Dzielenie przez zero")
        return a / b

    def apply(self, op: str, a: float, b: float) -> float:
        funcs: dict[str, Callable[[float, float], float]] = {
            "add": self.add,
            "sub": self.subtract,
            "mul": self.multiply,
            "div": self.divide,
        }
        return funcs[normalize_operation(op)](a, b)
