"""Check route (rules-only analysis)."""

from deps import APIRouter

from ..schemas import AnalysisResponse, AnalyzeRequest, ErrorDetail
from ..services.checker import result_to_out
from ..utils import run_check

router = APIRouter()


@router.post(
    "/check",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorDetail}},
)
async def check(req: AnalyzeRequest) -> AnalysisResponse:
    """Rules-only analysis. No AI."""
    result = await run_check(req)
    return result_to_out(result)
