"""
Adapter: operacje wektorowe i macierzowe (menu "Linear Algebra").

Wektor  = list[float]
Macierz = list[list[float]] (wierszami, wszystkie wiersze tej samej długości)

Niezgodne wymiary → ValueError.
"""
from __future__ import annotations

import math
from typing import Sequence, Union

Vector = list[float]
Matrix = list[list[float]]


def _check_matrix(m: Sequence[Sequence[float]], name: str) -> tuple[int, int]:
    if not m or not m[0]:
        raise ValueError(f"Macierz {name} jest pusta")
    cols = len(m[0])
    for i, row in enumerate(m):
        if len(row) != cols:
            raise ValueError(
                f"Macierz {name}: wiersz {i} ma {len(row)} kolumn, oczekiwano {cols}"
            )
    return len(m), cols


def dot(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Iloczyn skalarny v1 · v2."""
    if len(v1) != len(v2):
        raise ValueError(f"Wektory mają różne długości: {len(v1)} i {len(v2)}")
    return math.fsum(a * b for a, b in zip(v1, v2))


def matmul(m1: Sequence[Sequence[float]], m2: Sequence[Sequence[float]]) -> Matrix:
    """Iloczyn macierzy M1 (n×k) * M2 (k×m) → n×m."""
    rows1, cols1 = _check_matrix(m1, "M1")
    rows2, cols2 = _check_matrix(m2, "M2")
    if cols1 != rows2:
        raise ValueError(
            f"Nie można pomnożyć macierzy {rows1}x{cols1} i {rows2}x{cols2}"
        )
    columns = list(zip(*m2))
    return [[dot(row, col) for col in columns] for row in m1]


def scale(
    value: Union[Sequence[float], Sequence[Sequence[float]]],
    k: float,
) -> Union[Vector, Matrix]:
    """Mnożenie wektora lub macierzy przez skalar."""
    if value and isinstance(value[0], (list, tuple)):
        _check_matrix(value, "M")  # type: ignore[arg-type]
        return [[k * a for a in row] for row in value]  # type: ignore[union-attr]
    return [k * a for a in value]  # type: ignore[operator]
