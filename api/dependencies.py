"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.arithmetic.basic_math import BasicMath
from adapters.calculus.finite_difference import FiniteDifferenceCalculus
from adapters.expression_evaluator.stack_evaluator import StackExpressionEvaluator
from adapters.probability.sampler import RandomSampler


def get_evaluator(request: Request) -> StackExpressionEvaluator:
    return request.app.state.evaluator


def get_calculus(request: Request) -> FiniteDifferenceCalculus:
    return request.app.state.calculus


def get_basic_math(request: Request) -> BasicMath:
    return request.app.state.basic_math


def get_sampler(request: Request) -> RandomSampler:
    return request.app.state.sampler
