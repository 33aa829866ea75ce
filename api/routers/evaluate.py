"""
Router: POST /evaluate
Liczy wyrażenie infiksowe dla podanej wartości x.
"""
from fastapi import APIRouter, Depends

from adapters.expression_evaluator.stack_evaluator import StackExpressionEvaluator
from api.dependencies import get_evaluator
from api.schemas import EvaluateRequest
from contracts import EvalResult

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvalResult)
async def evaluate(
    body: EvaluateRequest,
    evaluator: StackExpressionEvaluator = Depends(get_evaluator),
) -> EvalResult:
    value = evaluator.evaluate(body.expression, body.x)
    return EvalResult(expression=body.expression, x=body.x, value=value)
