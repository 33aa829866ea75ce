"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_serializer

from contracts import DerivativeMethod, IntegrationMethod, json_float


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)
    x: float = 0.0


# ─────────────────────────── /calculus ───────────────────────────

class DerivativeRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)
    x: float
    step: Optional[float] = Field(default=None, gt=0)
    method: Optional[DerivativeMethod] = None


class IntegralRequest(BaseModel):
    expression: str = Field(..., max_length=10_000)
    lower: float
    upper: float
    intervals: Optional[int] = Field(default=None, ge=1, le=1_000_000)
    method: Optional[IntegrationMethod] = None


# ─────────────────────────── /arithmetic ─────────────────────────

class ArithmeticRequest(BaseModel):
    op: str  # add | sub | mul | div lub + - * /
    a: float
    b: float


class ScalarResponse(BaseModel):
    result: float

    @field_serializer("result", when_used="json")
    def _ser_result(self, v: float) -> Union[float, str]:
        return json_float(v)


# ─────────────────────────── /linear-algebra ─────────────────────

class DotRequest(BaseModel):
    v1: list[float]
    v2: list[float]


class MatmulRequest(BaseModel):
    m1: list[list[float]]
    m2: list[list[float]]


class MatrixResponse(BaseModel):
    result: list[list[float]]


# ─────────────────────────── /statistics ─────────────────────────

class SummaryRequest(BaseModel):
    data: list[float] = Field(..., min_length=1)
    sample: bool = False


# ─────────────────────────── /probability ────────────────────────

class SampleRequest(BaseModel):
    population: list[float]
    k: int = Field(..., ge=0)
    replace: bool = False
    seed: Optional[int] = None  # None = sampler z konfiguracji


class SampleResponse(BaseModel):
    sample: list[float]


# ─────────────────────────── /ml ─────────────────────────────────

class ActivateRequest(BaseModel):
    name: Literal["relu", "sigmoid", "tanh"]
    values: list[float]


class ValuesResponse(BaseModel):
    values: list[float]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
