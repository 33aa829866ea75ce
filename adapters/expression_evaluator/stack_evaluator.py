"""
Adapter: StackExpressionEvaluator
Implementuje port ExpressionEvaluator — jednoprzebiegowy parser infiksowy
z dwoma stosami (wartości + operatory), w stylu shunting-yard.

Gramatyka:
  liczba    = [0-9.]+          (parsowana przez float())
  zmienna   = 'x'              (podstawiana wartością z wywołania)
  grupa     = '(' wyrażenie ')' — rekurencja, głębokość = zagnieżdżenie
  operator  = '+' | '-'  (priorytet 1), '*' | '/'  (priorytet 2), lewostronne

Brak operatorów unarnych, potęgowania i funkcji — "-1" to błąd.

Nawiasy:
  tryb domyślny — ')' bez pary na najwyższym poziomie kończy parsowanie,
                  reszta tekstu jest ignorowana; '(' bez pary zamyka koniec tekstu
  strict        — oba przypadki są błędami

Dzielenie przez zero daje inf / -inf / nan (IEEE-754), nie wyjątek.
"""
from __future__ import annotations

import logging
import math
import operator
import sys
from typing import Callable

from contracts import (
    InsufficientOperands,
    MalformedExpression,
    MalformedNumber,
    NestingTooDeep,
    UnexpectedCharacter,
    UnknownOperator,
)
from ports.expression_evaluator import ExpressionEvaluator

logger = logging.getLogger("unicalc.evaluator")

_PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}

_NUMBER_CHARS = frozenset("0123456789.")


def max_safe_depth() -> int:
    """Najgłębsze zagnieżdżenie, które zmieści się w stosie interpretera."""
    # druga połowa zostaje dla ramek wywołującego
    return sys.getrecursionlimit() // 2


def _ieee_divide(a: float, b: float) -> float:
    # float / 0.0 w Pythonie rzuca ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _ieee_divide,
}


def _apply(op: str, values: list[float]) -> None:
    """Zdejmuje prawy, potem lewy argument i odkłada `left op right`."""
    fn = _OPERATIONS.get(op)
    if fn is None:
        raise UnknownOperator(op)
    if len(values) < 2:
        raise InsufficientOperands(op)
    right = values.pop()
    left = values.pop()
    values.append(fn(left, right))


class _Parser:
    """Kursor po tekście; jedna instancja na jedno wywołanie evaluate()."""

    def __init__(self, text: str, x: float, max_depth: int, strict: bool) -> None:
        self._text = text
        self._x = x
        self._max_depth = max_depth
        self._strict = strict
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def parse(self) -> float:
        value = self._level(0)
        if self._pos < len(self._text):
            logger.debug(
                "Ignoring text after unmatched ')': %r", self._text[self._pos:]
            )
        return value

    def _level(self, depth: int) -> float:
        values: list[float] = []
        ops: list[str] = []
        text = self._text
        closed = False

        while self._pos < len(text):
            ch = text[self._pos]
            if ch.isspace():
                self._pos += 1
            elif ch in _NUMBER_CHARS:
                values.append(self._number())
            elif ch == "x":
                self._pos += 1
                values.append(self._x)
            elif ch == "(":
                if depth >= self._max_depth:
                    raise NestingTooDeep(self._max_depth, self._pos)
                self._pos += 1
                values.append(self._level(depth + 1))
            elif ch == ")":
                if depth == 0 and self._strict:
                    raise UnexpectedCharacter(ch, self._pos)
                self._pos += 1
                closed = True
                break
            elif ch in _PRECEDENCE:
                while ops and _PRECEDENCE[ops[-1]] >= _PRECEDENCE[ch]:
                    _apply(ops.pop(), values)
                ops.append(ch)
                self._pos += 1
            else:
                raise UnexpectedCharacter(ch, self._pos)

        if depth > 0 and not closed and self._strict:
            raise MalformedExpression("brak nawiasu zamykającego", self._pos)

        while ops:
            _apply(ops.pop(), values)

        if len(values) != 1:
            raise MalformedExpression(
                f"oczekiwano 1 wartości, jest {len(values)}", self._pos
            )
        return values[0]

    def _number(self) -> float:
        start = self._pos
        text = self._text
        while self._pos < len(text) and text[self._pos] in _NUMBER_CHARS:
            self._pos += 1
        literal = text[start:self._pos]
        try:
            return float(literal)
        except ValueError:
            raise MalformedNumber(literal, start) from None


class StackExpressionEvaluator:
    """Bezstanowy ewaluator wyrażeń z jedną zmienną `x` (reentrant)."""

    def __init__(self, max_depth: int = 200, strict_parentheses: bool = False) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth musi być >= 0, jest {max_depth}")
        if max_depth > max_safe_depth():
            raise ValueError(
                f"max_depth musi być <= {max_safe_depth()}, jest {max_depth}"
            )
        self._max_depth = max_depth
        self._strict = strict_parentheses

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def strict_parentheses(self) -> bool:
        return self._strict

    # -- ExpressionEvaluator protocol ----------------------------------------

    def evaluate(self, expression: str, x: float) -> float:
        parser = _Parser(expression, float(x), self._max_depth, self._strict)
        try:
            value = parser.parse()
        except RecursionError:
            # limit rekursji obniżony po utworzeniu ewaluatora
            logger.warning("Recursion limit hit at depth <= %d", self._max_depth)
            raise NestingTooDeep(self._max_depth, parser.position) from None
        logger.debug("evaluate(%r, x=%r) = %r", expression, x, value)
        return value


_DEFAULT_EVALUATOR = StackExpressionEvaluator()


def evaluate(expression: str, x: float) -> float:
    """Liczy `expression` dla danego `x` domyślnym (tolerancyjnym) ewaluatorem."""
    return _DEFAULT_EVALUATOR.evaluate(expression, x)


def bind(
    expression: str,
    evaluator: ExpressionEvaluator | None = None,
) -> Callable[[float], float]:
    """Zwraca zwykłą funkcję f(x) dla wyrażenia — dla pochodnych i całek."""
    ev = evaluator if evaluator is not None else _DEFAULT_EVALUATOR

    def f(x: float) -> float:
        return ev.evaluate(expression, x)

    return f
