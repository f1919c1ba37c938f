"""Utility functions for the API."""

import logging

from deps import HTTPException, run_in_threadpool

from baseline_checker.errors import AnalysisError, InvalidLanguageError
from baseline_checker.issue import CompatibilityResult

from .config import ai_refinement_enabled
from .schemas import AnalyzeRequest
from .services import AIService, CheckerService, ScanStats

logger = logging.getLogger(__name__)

checker_svc = CheckerService(refiner=AIService() if ai_refinement_enabled() else None)
scan_stats = ScanStats()


async def run_check(req: AnalyzeRequest, refine: bool = False) -> CompatibilityResult:
    """Run the checker in the threadpool. Maps analysis errors to HTTP 400."""
    method = checker_svc.analyze if refine else checker_svc.check
    try:
        return await run_in_threadpool(method, req.code, req.language)
    except InvalidLanguageError as e:
        raise HTTPException(400, str(e))
    except AnalysisError as e:
        logger.warning("Analysis rejected: %s", e)
        raise HTTPException(400, str(e))
