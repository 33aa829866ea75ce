from __future__ import annotations

import pytest

import unicalc
from contracts import UnexpectedCharacter


def test_eval_prints_value(capsys):
    unicalc.main(["eval", "2+3*4"])

    assert capsys.readouterr().out.strip() == "14"


def test_eval_with_variable(capsys):
    unicalc.main(["eval", "x*x", "--x", "1.5"])

    assert capsys.readouterr().out.strip() == "2.25"


def test_eval_error_exits_with_diagnostic(capsys):
    with pytest.raises(SystemExit) as excinfo:
        unicalc.main(["eval", "2@3"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "UNEXPECTED_CHARACTER" in err
    assert "2@3" in err


def test_strict_mode_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("UNICALC_STRICT_PARENTHESES", "true")

    with pytest.raises(SystemExit):
        unicalc.main(["eval", "1+2)"])

    assert "UNEXPECTED_CHARACTER" in capsys.readouterr().err


def test_describe_error_points_at_offending_character():
    message = unicalc.describe_error(UnexpectedCharacter("@", 1), "2@3")

    lines = message.splitlines()
    assert lines[0].startswith("UNEXPECTED_CHARACTER")
    assert lines[1] == "  2@3"
    assert lines[2] == "   ^"


def test_arith_division_by_zero(capsys):
    with pytest.raises(SystemExit):
        unicalc.main(["arith", "div", "1", "0"])

    assert "zero" in capsys.readouterr().err


def test_dot_and_sample(capsys):
    unicalc.main(["dot", "[1,2,3]", "4,5,6"])
    unicalc.main(["sample", "1", "2", "3", "--k", "3", "--seed", "2"])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "32"
    assert sorted(out[1].split(", ")) == ["1", "2", "3"]


def test_activate_accepts_negative_values(capsys):
    unicalc.main(["activate", "relu", "-1", "2"])

    assert capsys.readouterr().out.strip() == "0, 2"


def test_menu_runs_derivative_and_exits(monkeypatch, capsys):
    answers = iter([
        "",       # ekran powitalny
        "1",      # Use the calculator
        "3",      # Calculus
        "1",      # Differentiation
        "2",      # x
        "x^2",    # odrzucone, ponowne pytanie
        "x*x",
        "",       # powrót do menu
        "3",      # Exit
    ])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    monkeypatch.setenv("UNICALC_DERIVATIVE_METHOD", "central")

    unicalc.main(["menu"])

    out = capsys.readouterr().out
    assert "Welcome to Universal Calculator" in out
    assert "UNEXPECTED_CHARACTER" in out
    assert "f'(2) ≈ 4" in out


def test_dot_rejects_nested_vector(capsys):
    with pytest.raises(SystemExit) as excinfo:
        unicalc.main(["dot", "[[1,2]]", "[1]"])

    assert excinfo.value.code == 1
    assert "Oczekiwano listy liczb" in capsys.readouterr().err


def test_matmul_rejects_null_entry(capsys):
    with pytest.raises(SystemExit):
        unicalc.main(["matmul", "[[1,null]]", "[[1],[2]]"])

    assert "Oczekiwano listy liczb" in capsys.readouterr().err


def test_menu_asks_again_after_non_numeric_vector(monkeypatch, capsys):
    answers = iter([
        "",        # ekran powitalny
        "1",       # Use the calculator
        "2",       # Linear Algebra
        "1",       # Vector Dot Product
        "[null]",  # odrzucone, ponowne pytanie
        "1,2",
        "3,4",
        "",        # powrót do menu
        "3",       # Exit
    ])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))

    unicalc.main(["menu"])

    out = capsys.readouterr().out
    assert "Oczekiwano listy liczb" in out
    assert "Result: 11" in out
