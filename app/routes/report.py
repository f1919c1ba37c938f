"""Report route (plain-text report)."""

from deps import APIRouter, PlainTextResponse

from baseline_checker.reporter import ReportGenerator

from ..schemas import AnalyzeRequest, ErrorDetail
from ..utils import run_check

router = APIRouter()


@router.post("/report", responses={400: {"model": ErrorDetail}}, response_class=PlainTextResponse)
async def report(req: AnalyzeRequest) -> str:
    """Rules-only analysis rendered as a text report."""
    result = await run_check(req)
    return ReportGenerator.generate_text_report(result)
