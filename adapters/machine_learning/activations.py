"""
Adapter: funkcje aktywacji i straty (menu "Machine Learning").

Aktywacje:  relu = max(0, x), sigmoid = 1 / (1 + exp(-x)), tanh
Straty:     mse, binary_cross_entropy (predykcje przycinane do [eps, 1-eps])
"""
from __future__ import annotations

import math
from typing import Callable, Sequence

_EPSILON = 1e-12


def relu(x: float) -> float:
    return max(0.0, x)


def sigmoid(x: float) -> float:
    # Dwie gałęzie, żeby exp() nie przepełniał się dla dużych |x|
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def tanh(x: float) -> float:
    return math.tanh(x)


ACTIVATIONS: dict[str, Callable[[float], float]] = {
    "relu": relu,
    "sigmoid": sigmoid,
    "tanh": tanh,
}


def activate(name: str, values: Sequence[float]) -> list[float]:
    fn = ACTIVATIONS.get(name.lower())
    if fn is None:
        raise ValueError(
            f"Nieznana aktywacja: {name!r}; dostępne: {', '.join(ACTIVATIONS)}"
        )
    return [fn(float(v)) for v in values]


def _paired(predicted: Sequence[float], target: Sequence[float]) -> list[tuple[float, float]]:
    if len(predicted) != len(target):
        raise ValueError(
            f"Różne długości predykcji i celu: {len(predicted)} i {len(target)}"
        )
    if not predicted:
        raise ValueError("Puste dane")
    return [(float(p), float(t)) for p, t in zip(predicted, target)]


def mse(predicted: Sequence[float], target: Sequence[float]) -> float:
    pairs = _paired(predicted, target)
    return math.fsum((p - t) ** 2 for p, t in pairs) / len(pairs)


def binary_cross_entropy(predicted: Sequence[float], target: Sequence[float]) -> float:
    pairs = _paired(predicted, target)
    total = 0.0
    for p, t in pairs:
        p = min(max(p, _EPSILON), 1.0 - _EPSILON)
        total -= t * math.log(p) + (1.0 - t) * math.log(1.0 - p)
    return total / len(pairs)


LOSSES: dict[str, Callable[[Sequence[float], Sequence[float]], float]] = {
    "mse": mse,
    "bce": binary_cross_entropy,
    "binary_cross_entropy": binary_cross_entropy,
}


def loss(name: str, predicted: Sequence[float], target: Sequence[float]) -> float:
    fn = LOSSES.get(name.lower())
    if fn is None:
        raise ValueError(f"Nieznana funkcja straty: {name!r}; dostępne: {', '.join(LOSSES)}")
    return fn(predicted, target)
