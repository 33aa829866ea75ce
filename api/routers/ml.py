"""
Router: POST /ml/activate
"""
from fastapi import APIRouter

from adapters.machine_learning.activations import activate as apply_activation
from api.schemas import ActivateRequest, ValuesResponse

router = APIRouter(prefix="/ml", tags=["ml"])


@router.post("/activate", response_model=ValuesResponse)
async def activate(body: ActivateRequest) -> ValuesResponse:
    return ValuesResponse(values=apply_activation(body.name, body.values))
