"""Health and AI status routes."""

from deps import APIRouter, Any, Dict

from ..ai_status import get_ai_status
from ..utils import checker_svc

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check."""
    return {"status": "ok", "catalog": checker_svc.catalog_info()}


@router.get("/ai-status")
def ai_status() -> Dict[str, Any]:
    """Together.ai availability (cached for 30 seconds)."""
    return get_ai_status()
