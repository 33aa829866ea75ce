"""
Router: POST /arithmetic
Dzielenie przez zero → 400 (handler w api/main.py).
"""
from fastapi import APIRouter, Depends

from adapters.arithmetic.basic_math import BasicMath
from api.dependencies import get_basic_math
from api.schemas import ArithmeticRequest, ScalarResponse

router = APIRouter(prefix="/arithmetic", tags=["arithmetic"])


@router.post("", response_model=ScalarResponse)
async def arithmetic(
    body: ArithmeticRequest,
    basic_math: BasicMath = Depends(get_basic_math),
) -> ScalarResponse:
    return ScalarResponse(result=basic_math.apply(body.op, body.a, body.b))
