"""
Router: POST /statistics/summary
"""
from fastapi import APIRouter

from adapters.statistics.descriptive import summarize
from api.schemas import SummaryRequest
from contracts import StatsSummary

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.post("/summary", response_model=StatsSummary)
async def summary(body: SummaryRequest) -> StatsSummary:
    return summarize(body.data, sample=body.sample)
