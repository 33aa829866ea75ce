"""
Router: POST /probability/sample
seed w żądaniu → jednorazowy sampler (powtarzalny wynik); bez seed → sampler z app.state.
"""
from fastapi import APIRouter, Depends

from adapters.probability.sampler import RandomSampler
from api.dependencies import get_sampler
from api.schemas import SampleRequest, SampleResponse

router = APIRouter(prefix="/probability", tags=["probability"])


@router.post("/sample", response_model=SampleResponse)
async def sample(
    body: SampleRequest,
    sampler: RandomSampler = Depends(get_sampler),
) -> SampleResponse:
    if body.seed is not None:
        sampler = RandomSampler(seed=body.seed)
    if body.replace:
        drawn = sampler.choices(body.population, body.k)
    else:
        drawn = sampler.sample(body.population, body.k)
    return SampleResponse(sample=drawn)
