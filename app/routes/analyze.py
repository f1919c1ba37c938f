"""Analyze route (full analysis with AI-refined suggestions)."""

from deps import APIRouter

from ..schemas import AnalysisResponse, AnalyzeRequest, ErrorDetail
from ..services.checker import result_to_out
from ..utils import run_check, scan_stats

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorDetail}},
)
async def analyze(req: AnalyzeRequest) -> AnalysisResponse:
    """Full analysis: rules, refined fix suggestions and fixed code. Counts toward /stats."""
    result = await run_check(req, refine=True)
    scan_stats.record(result)
    return result_to_out(result)
