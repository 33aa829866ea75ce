"""
Router: POST /linear-algebra/dot, POST /linear-algebra/matmul
"""
from fastapi import APIRouter

from adapters.linear_algebra.vector_ops import dot, matmul
from api.schemas import DotRequest, MatmulRequest, MatrixResponse, ScalarResponse

router = APIRouter(prefix="/linear-algebra", tags=["linear-algebra"])


@router.post("/dot", response_model=ScalarResponse)
async def dot_product(body: DotRequest) -> ScalarResponse:
    return ScalarResponse(result=dot(body.v1, body.v2))


@router.post("/matmul", response_model=MatrixResponse)
async def matrix_multiply(body: MatmulRequest) -> MatrixResponse:
    return MatrixResponse(result=matmul(body.m1, body.m2))
