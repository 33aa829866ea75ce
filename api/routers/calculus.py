"""
Router: POST /calculus/derivative, POST /calculus/integral
Numeryczne pochodne i całki wyrażeń w zmiennej x.
"""
from fastapi import APIRouter, Depends

from adapters.calculus.finite_difference import FiniteDifferenceCalculus
from api.dependencies import get_calculus
from api.schemas import DerivativeRequest, IntegralRequest
from contracts import DerivativeResult, IntegralResult

router = APIRouter(prefix="/calculus", tags=["calculus"])


@router.post("/derivative", response_model=DerivativeResult)
async def derivative(
    body: DerivativeRequest,
    calculus: FiniteDifferenceCalculus = Depends(get_calculus),
) -> DerivativeResult:
    return calculus.derivative(body.expression, body.x, step=body.step, method=body.method)


@router.post("/integral", response_model=IntegralResult)
def integral(
    body: IntegralRequest,
    calculus: FiniteDifferenceCalculus = Depends(get_calculus),
) -> IntegralResult:
    return calculus.integral(
        body.expression,
        body.lower,
        body.upper,
        intervals=body.intervals,
        method=body.method,
    )
