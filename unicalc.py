#!/usr/bin/env python3
"""
unicalc.py — CLI narzędzie UniCalc (Universal Calculator).

Działa całkowicie lokalnie — nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem UNICALC_
lub plik .env (np. UNICALC_STRICT_PARENTHESES=true).

Podkomendy:
    eval       — policz wyrażenie w zmiennej x
    derive     — pochodna numeryczna f'(x)
    integrate  — całka oznaczona z f(x)
    arith      — działanie na dwóch liczbach
    dot        — iloczyn skalarny wektorów
    matmul     — iloczyn macierzy
    scale      — mnożenie wektora/macierzy przez skalar
    stats      — średnia, wariancja, odchylenie standardowe
    sample     — losowanie próby
    activate   — funkcje aktywacji (relu, sigmoid, tanh)
    loss       — funkcje straty (mse, bce)
    examples   — przykłady użycia
    menu       — interaktywne menu kalkulatora

Użycie:
    python unicalc.py eval "(2+3)*4"
    python unicalc.py eval "x*x + 1" --x 3
    python unicalc.py derive "x*x" --x 2 --method central
    python unicalc.py integrate "x*x" --lower 0 --upper 3
    python unicalc.py arith div 1 4
    python unicalc.py matmul "[[1,2],[3,4]]" "[[5],[6]]"
    python unicalc.py stats 3.5 7.1 5.6
    python unicalc.py sample 1 2 3 4 5 --k 2 --seed 7
    python unicalc.py menu
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Callable, NoReturn, Optional, TypeVar

from rich import box
from rich.console import Console
from rich.prompt import FloatPrompt, Prompt
from rich.table import Table
from rich.text import Text

from contracts import EvalError, MathGroup, MenuEntry

T = TypeVar("T")

logger = logging.getLogger("unicalc.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None
_ERR_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _err_console() -> Console:
    global _ERR_CONSOLE
    if _ERR_CONSOLE is None:
        _ERR_CONSOLE = Console(stderr=True, highlight=False)
    return _ERR_CONSOLE


def _settings():
    from config import Settings
    return Settings()


def _evaluator():
    from adapters.expression_evaluator.stack_evaluator import StackExpressionEvaluator

    settings = _settings()
    return StackExpressionEvaluator(
        max_depth=settings.max_nesting_depth,
        strict_parentheses=settings.strict_parentheses,
    )


def _calculus():
    from adapters.calculus.finite_difference import FiniteDifferenceCalculus

    settings = _settings()
    return FiniteDifferenceCalculus(
        evaluator=_evaluator(),
        step=settings.derivative_step,
        intervals=settings.integration_intervals,
        derivative_method=settings.derivative_method,
        integration_method=settings.integration_method,
    )


def _fmt(value: float) -> str:
    """Liczby całkowite bez '.0'; inf/nan jak w Pythonie."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def describe_error(exc: EvalError, expression: Optional[str] = None) -> str:
    """Opis błędu ewaluatora (+ wskaźnik '^' pod wyrażeniem)."""
    message = f"{exc.code}: {exc.message}"
    if expression is not None and exc.position is not None:
        pointer = " " * min(exc.position, len(expression)) + "^"
        message = f"{message}\n  {expression}\n  {pointer}"
    return message


def _fail(message: str) -> NoReturn:
    _err_console().print(Text(f"Błąd: {message}", style="red"), soft_wrap=True)
    sys.exit(1)


def _numbers(data: Any) -> list[float]:
    # bool to podklasa int, ale true/false z JSON to nie liczby
    if not isinstance(data, list) or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in data
    ):
        raise ValueError("Oczekiwano listy liczb")
    return [float(v) for v in data]


def _parse_vector(raw: str) -> list[float]:
    """'[1, 2, 3]' albo '1,2,3' → [1.0, 2.0, 3.0]."""
    raw = raw.strip()
    if not raw:
        raise ValueError("Pusty wektor")
    if raw.startswith("["):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Niepoprawny JSON: {exc}") from None
        return _numbers(data)
    return [float(part) for part in raw.split(",")]


def _parse_matrix(raw: str) -> list[list[float]]:
    """'[[1,2],[3,4]]' albo '1,2;3,4' → [[1.0, 2.0], [3.0, 4.0]]."""
    raw = raw.strip()
    if raw.startswith("["):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Niepoprawny JSON: {exc}") from None
        if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
            raise ValueError("Oczekiwano listy wierszy")
        return [_numbers(row) for row in data]
    return [_parse_vector(row) for row in raw.split(";")]


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), _fmt(value) if isinstance(value, float) else str(value))
    _console().print(table)


def _print_title(message: str) -> None:
    _console().print(Text(message, style="bold green"))


def _print_fancy(message: str, style: str = "default") -> None:
    rule = "=" * 29
    _console().print(Text(f"{rule}\n{message}\n{rule}", style=style))


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    try:
        value = _evaluator().evaluate(args.expression, args.x)
    except EvalError as exc:
        _fail(describe_error(exc, args.expression))
    _console().print(_fmt(value))


def _derive(args: argparse.Namespace) -> None:
    try:
        result = _calculus().derivative(
            args.expression, args.x, step=args.step, method=args.method
        )
    except EvalError as exc:
        _fail(describe_error(exc, args.expression))
    except ValueError as exc:
        _fail(str(exc))
    _print_kv_table("Pochodna", [
        ("f(x)", result.expression),
        ("x", result.x),
        ("h", repr(result.step)),
        ("metoda", result.method),
        ("f'(x)", result.value),
    ])


def _integrate(args: argparse.Namespace) -> None:
    try:
        result = _calculus().integral(
            args.expression,
            args.lower,
            args.upper,
            intervals=args.intervals,
            method=args.method,
        )
    except EvalError as exc:
        _fail(describe_error(exc, args.expression))
    except ValueError as exc:
        _fail(str(exc))
    _print_kv_table("Całka", [
        ("f(x)", result.expression),
        ("przedział", f"[{_fmt(result.lower)}, {_fmt(result.upper)}]"),
        ("podprzedziały", result.intervals),
        ("metoda", result.method),
        ("wynik", result.value),
    ])


def _arith(args: argparse.Namespace) -> None:
    from adapters.arithmetic.basic_math import BasicMath

    try:
        value = BasicMath().apply(args.op, args.a, args.b)
    except (ValueError, ZeroDivisionError) as exc:
        _fail(str(exc))
    _console().print(_fmt(value))


def _dot(args: argparse.Namespace) -> None:
    from adapters.linear_algebra.vector_ops import dot

    try:
        value = dot(_parse_vector(args.v1), _parse_vector(args.v2))
    except ValueError as exc:
        _fail(str(exc))
    _console().print(_fmt(value))


def _print_matrix(title: str, matrix: list[list[float]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False)
    for _ in matrix[0]:
        table.add_column(justify="right")
    for row in matrix:
        table.add_row(*(_fmt(v) for v in row))
    _console().print(table)


def _matmul(args: argparse.Namespace) -> None:
    from adapters.linear_algebra.vector_ops import matmul

    try:
        result = matmul(_parse_matrix(args.m1), _parse_matrix(args.m2))
    except ValueError as exc:
        _fail(str(exc))
    _print_matrix("M1 * M2", result)


def _scale(args: argparse.Namespace) -> None:
    from adapters.linear_algebra.vector_ops import scale

    try:
        raw = args.value.strip()
        is_matrix = ";" in raw or raw.startswith("[[")
        value = _parse_matrix(raw) if is_matrix else _parse_vector(raw)
        result = scale(value, args.k)
    except ValueError as exc:
        _fail(str(exc))
    if result and isinstance(result[0], list):
        _print_matrix(f"{_fmt(args.k)} * M", result)  # type: ignore[arg-type]
    else:
        _console().print(", ".join(_fmt(v) for v in result))  # type: ignore[arg-type]


def _stats(args: argparse.Namespace) -> None:
    from adapters.statistics.descriptive import summarize

    try:
        summary = summarize(args.data, sample=args.sample)
    except ValueError as exc:
        _fail(str(exc))
    _print_kv_table("Statystyki", [
        ("n", summary.count),
        ("średnia", summary.mean),
        ("wariancja", summary.variance),
        ("odch. std.", summary.std_dev),
        ("min", summary.minimum),
        ("max", summary.maximum),
    ])


def _sample(args: argparse.Namespace) -> None:
    from adapters.probability.sampler import RandomSampler

    seed = args.seed if args.seed is not None else _settings().random_seed
    sampler = RandomSampler(seed=seed)
    try:
        drawn = (sampler.choices if args.replace else sampler.sample)(args.population, args.k)
    except ValueError as exc:
        _fail(str(exc))
    _console().print(", ".join(_fmt(v) for v in drawn))


def _activate(args: argparse.Namespace) -> None:
    from adapters.machine_learning.activations import activate

    try:
        values = activate(args.name, args.values)
    except ValueError as exc:
        _fail(str(exc))
    _console().print(", ".join(f"{v:.6g}" for v in values))


def _loss(args: argparse.Namespace) -> None:
    from adapters.machine_learning.activations import loss

    try:
        value = loss(args.name, args.pred, args.target)
    except ValueError as exc:
        _fail(str(exc))
    _console().print(f"{value:.6g}")


def _examples(args: argparse.Namespace | None = None) -> None:
    from adapters.arithmetic.basic_math import BasicMath
    from adapters.statistics.descriptive import mean

    calculus = _calculus()
    slope = calculus.derivative("x*x", 2.0, step=1e-4, method="central").value
    area = calculus.integral("x*x", 0.0, 3.0, intervals=10, method="simpson").value
    value = _evaluator().evaluate("(2+3)*4", 0.0)

    console = _console()
    console.print(Text("Przykłady użycia kalkulatora:", style="cyan"))
    console.print(f"1. Dodawanie: 3 + 4 = {_fmt(BasicMath.add(3, 4))}")
    console.print(f"2. Wyrażenie: (2+3)*4 = {_fmt(value)}")
    console.print(f"3. Pochodna: d/dx (x*x) w x = 2 wynosi {slope:.4f}")
    console.print(f"4. Całka: ∫ x*x dx na [0, 3] = {area:.4f}")
    console.print(f"5. Średnia: średnia z [1, 2, 3] to {_fmt(mean([1, 2, 3]))}")


# -- menu interaktywne -----------------------------------------------------

MENU: list[MenuEntry] = [
    MenuEntry(key="1", group=MathGroup.ARITHMETIC, title="Basic Arithmetic",
              functions=["Addition (a + b)", "Subtraction (a - b)",
                         "Multiplication (a * b)", "Division (a / b)"]),
    MenuEntry(key="2", group=MathGroup.LINEAR_ALGEBRA, title="Linear Algebra",
              functions=["Vector Dot Product (v1 · v2)", "Matrix Multiplication (M1 * M2)"]),
    MenuEntry(key="3", group=MathGroup.CALCULUS, title="Calculus",
              functions=["Differentiation (f'(x))", "Integration (∫f(x)dx)"]),
    MenuEntry(key="4", group=MathGroup.STATISTICS, title="Statistics",
              functions=["Mean (average)", "Variance (var)", "Standard Deviation (std dev)"]),
    MenuEntry(key="5", group=MathGroup.PROBABILITY, title="Probability",
              functions=["Random Sampling"]),
    MenuEntry(key="6", group=MathGroup.MACHINE_LEARNING, title="Machine Learning",
              functions=["ReLU (max(0, x))", "Sigmoid (1 / (1 + exp(-x)))", "Tanh (tanh(x))"]),
]


def _ask_until_valid(label: str, parse: Callable[[str], T]) -> T:
    """Pyta aż `parse` nie rzuci ValueError (EvalError też jest ValueError)."""
    while True:
        raw = Prompt.ask(label, console=_console())
        try:
            return parse(raw)
        except EvalError as exc:
            _console().print(Text(describe_error(exc, raw), style="red"))
        except (ValueError, ZeroDivisionError) as exc:
            _console().print(Text(str(exc), style="red"))
        logger.debug("Rejected input %r for %r", raw, label)


def _choose_function(entry: MenuEntry) -> int:
    _console().print(f"  {entry.title} Functions:")
    for idx, name in enumerate(entry.functions, 1):
        _console().print(f"    {idx}. {name}")
    choices = [str(i) for i in range(1, len(entry.functions) + 1)]
    return int(Prompt.ask("Wybierz funkcję", choices=choices, console=_console()))


def _run_arithmetic(choice: int) -> str:
    from adapters.arithmetic.basic_math import BasicMath

    a = FloatPrompt.ask("a", console=_console())
    op = ("add", "sub", "mul", "div")[choice - 1]
    return _fmt(_ask_until_valid("b", lambda raw: BasicMath().apply(op, a, float(raw))))


def _run_linear_algebra(choice: int) -> str:
    from adapters.linear_algebra.vector_ops import dot, matmul

    if choice == 1:
        v1 = _ask_until_valid("v1 (np. 1,2,3)", _parse_vector)
        return _fmt(_ask_until_valid("v2", lambda raw: dot(v1, _parse_vector(raw))))
    m1 = _ask_until_valid("M1 (wiersze przez ';', np. 1,2;3,4)", _parse_matrix)
    result = _ask_until_valid("M2", lambda raw: matmul(m1, _parse_matrix(raw)))
    return "; ".join(", ".join(_fmt(v) for v in row) for row in result)


def _run_calculus(choice: int) -> str:
    calculus = _calculus()
    if choice == 1:
        x = FloatPrompt.ask("x", console=_console())
        result = _ask_until_valid("f(x)", lambda raw: calculus.derivative(raw, x))
        return f"f'({_fmt(x)}) ≈ {result.value:.6g}"
    lower = FloatPrompt.ask("a (dolna granica)", console=_console())
    upper = FloatPrompt.ask("b (górna granica)", console=_console())
    result = _ask_until_valid("f(x)", lambda raw: calculus.integral(raw, lower, upper))
    return f"∫ f(x)dx na [{_fmt(lower)}, {_fmt(upper)}] ≈ {result.value:.6g}"


def _run_statistics(choice: int) -> str:
    from adapters.statistics.descriptive import mean, std_dev, variance

    fn = (mean, variance, std_dev)[choice - 1]
    return f"{_ask_until_valid('dane (np. 3.5,7.1,5.6)', lambda raw: fn(_parse_vector(raw))):.6g}"


def _run_probability(choice: int) -> str:
    from adapters.probability.sampler import RandomSampler

    sampler = RandomSampler(seed=_settings().random_seed)
    population = _ask_until_valid("populacja (np. 1,2,3,4)", _parse_vector)
    drawn = _ask_until_valid("k", lambda raw: sampler.sample(population, int(raw)))
    return ", ".join(_fmt(v) for v in drawn)


def _run_machine_learning(choice: int) -> str:
    from adapters.machine_learning.activations import activate

    name = ("relu", "sigmoid", "tanh")[choice - 1]
    values = _ask_until_valid("wartości (np. -1,0,2)", lambda raw: activate(name, _parse_vector(raw)))
    return ", ".join(f"{v:.6g}" for v in values)


_GROUP_RUNNERS: dict[MathGroup, Callable[[int], str]] = {
    MathGroup.ARITHMETIC: _run_arithmetic,
    MathGroup.LINEAR_ALGEBRA: _run_linear_algebra,
    MathGroup.CALCULUS: _run_calculus,
    MathGroup.STATISTICS: _run_statistics,
    MathGroup.PROBABILITY: _run_probability,
    MathGroup.MACHINE_LEARNING: _run_machine_learning,
}


def _welcome_screen() -> None:
    console = _console()
    console.clear()
    _print_title("Welcome to Universal Calculator")
    console.print("This program offers various mathematical functionalities including:")
    for entry in MENU:
        console.print(f"{entry.key}. {entry.title}")
    Prompt.ask("\nNaciśnij Enter, aby kontynuować", default="", show_default=False, console=console)


def _calculator_menu() -> None:
    console = _console()
    console.clear()
    _print_title("Calculator Menu")
    console.print("Choose a math group:")
    for entry in MENU:
        console.print(f"{entry.key}. {entry.title}")
    console.print("0. Back")
    key = Prompt.ask("Wybór", choices=["0", *(e.key for e in MENU)], console=console)
    if key == "0":
        return

    entry = next(e for e in MENU if e.key == key)
    console.clear()
    choice = _choose_function(entry)
    result = _GROUP_RUNNERS[entry.group](choice)
    _print_fancy(f"Result: {result}", style="green")
    Prompt.ask("Naciśnij Enter, aby wrócić do menu", default="", show_default=False, console=console)


def _menu(args: argparse.Namespace | None = None) -> None:
    console = _console()
    _welcome_screen()
    while True:
        console.clear()
        _print_title("Main Menu")
        console.print("1. Use the calculator")
        console.print("2. Show examples")
        console.print("3. Exit program")
        choice = Prompt.ask("Wybór", choices=["1", "2", "3"], console=console)
        if choice == "1":
            _calculator_menu()
        elif choice == "2":
            console.clear()
            _examples()
            Prompt.ask("Naciśnij Enter, aby wrócić do menu", default="", show_default=False, console=console)
        else:
            break


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="unicalc",
        description="UniCalc — Universal Calculator (CLI)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Policz wyrażenie w zmiennej x")
    p.add_argument("expression", help="Wyrażenie, np. '(2+3)*x'")
    p.add_argument("--x", type=float, default=0.0, help="Wartość x (domyślnie 0)")

    # derive
    p = sub.add_parser("derive", help="Pochodna numeryczna f'(x)")
    p.add_argument("expression")
    p.add_argument("--x", type=float, required=True)
    p.add_argument("--step", type=float, default=None, metavar="H")
    p.add_argument("--method", choices=["forward", "central"], default=None)

    # integrate
    p = sub.add_parser("integrate", help="Całka oznaczona z f(x)")
    p.add_argument("expression")
    p.add_argument("--lower", type=float, required=True)
    p.add_argument("--upper", type=float, required=True)
    p.add_argument("--intervals", type=int, default=None, metavar="N")
    p.add_argument("--method", choices=["trapezoid", "simpson"], default=None)

    # arith
    p = sub.add_parser("arith", help="Działanie na dwóch liczbach")
    p.add_argument("op", help="add | sub | mul | div (lub + - * /)")
    p.add_argument("a", type=float)
    p.add_argument("b", type=float)

    # linear algebra
    p = sub.add_parser("dot", help="Iloczyn skalarny v1 · v2")
    p.add_argument("v1", help="np. '[1,2,3]' lub '1,2,3'")
    p.add_argument("v2")

    p = sub.add_parser("matmul", help="Iloczyn macierzy M1 * M2")
    p.add_argument("m1", help="np. '[[1,2],[3,4]]' lub '1,2;3,4'")
    p.add_argument("m2")

    p = sub.add_parser("scale", help="Mnożenie wektora/macierzy przez skalar")
    p.add_argument("value", help="wektor lub macierz")
    p.add_argument("k", type=float)

    # stats
    p = sub.add_parser("stats", help="Średnia, wariancja, odchylenie standardowe")
    p.add_argument("data", type=float, nargs="+")
    p.add_argument("--sample", action="store_true", help="Wariancja z próby (n-1)")

    # sample
    p = sub.add_parser("sample", help="Losowanie próby")
    p.add_argument("population", type=float, nargs="+")
    p.add_argument("--k", type=int, required=True)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--replace", action="store_true", help="Losowanie ze zwracaniem")

    # ml
    p = sub.add_parser("activate", help="Funkcja aktywacji")
    p.add_argument("name", choices=["relu", "sigmoid", "tanh"])
    p.add_argument("values", type=float, nargs="+")

    p = sub.add_parser("loss", help="Funkcja straty")
    p.add_argument("name", choices=["mse", "bce"])
    p.add_argument("--pred", type=float, nargs="+", required=True)
    p.add_argument("--target", type=float, nargs="+", required=True)

    sub.add_parser("examples", help="Przykłady użycia")
    sub.add_parser("menu", help="Interaktywne menu kalkulatora")

    args = parser.parse_args(argv)
    logging.basicConfig(level=_settings().log_level.upper())

    cmds: dict[str, Callable[[argparse.Namespace], None]] = {
        "eval":      _eval,
        "derive":    _derive,
        "integrate": _integrate,
        "arith":     _arith,
        "dot":       _dot,
        "matmul":    _matmul,
        "scale":     _scale,
        "stats":     _stats,
        "sample":    _sample,
        "activate":  _activate,
        "loss":      _loss,
        "examples":  _examples,
        "menu":      _menu,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
