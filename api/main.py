"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy bezstanowe adaptery (ewaluator, calculus, arytmetyka, sampler)
    na podstawie Settings i odkłada je w app.state
  - Nic nie trzyma połączeń — zamknięcie tylko loguje

Błędy domenowe są mapowane na kody HTTP:
  EvalError         → 422 {"detail", "code"}
  ZeroDivisionError → 400
  ValueError        → 400
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.arithmetic.basic_math import BasicMath
from adapters.calculus.finite_difference import FiniteDifferenceCalculus
from adapters.expression_evaluator.stack_evaluator import StackExpressionEvaluator
from adapters.probability.sampler import RandomSampler
from api.routers import arithmetic, calculus, evaluate, linear_algebra, ml, probability, statistics
from api.schemas import HealthResponse
from config import Settings
from contracts import EvalError

logger = logging.getLogger("unicalc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe — tworzone raz
    app.state.evaluator = StackExpressionEvaluator(
        max_depth=settings.max_nesting_depth,
        strict_parentheses=settings.strict_parentheses,
    )
    app.state.calculus = FiniteDifferenceCalculus(
        evaluator=app.state.evaluator,
        step=settings.derivative_step,
        intervals=settings.integration_intervals,
        derivative_method=settings.derivative_method,
        integration_method=settings.integration_method,
    )
    app.state.basic_math = BasicMath()
    app.state.sampler = RandomSampler(seed=settings.random_seed)

    logger.info("UniCalc API ready.")
    yield

    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(calculus.router)
    app.include_router(arithmetic.router)
    app.include_router(linear_algebra.router)
    app.include_router(statistics.router)
    app.include_router(probability.router)
    app.include_router(ml.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(EvalError)
    async def eval_error_handler(request: Request, exc: EvalError):
        logger.info("Rejected expression (%s): %s", exc.code, exc.message)
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": exc.code, "position": exc.position},
        )

    @app.exception_handler(ZeroDivisionError)
    async def zero_division_handler(request: Request, exc: ZeroDivisionError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


app = create_app()
