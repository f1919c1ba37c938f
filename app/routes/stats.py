"""Statistics and catalog routes."""

from deps import APIRouter, List

from ..schemas import FeatureOut, StatsResponse
from ..utils import checker_svc, scan_stats

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def stats() -> StatsResponse:
    """Running statistics of /analyze calls since startup."""
    return StatsResponse(**scan_stats.snapshot())


@router.get("/features", response_model=List[FeatureOut])
def features() -> List[FeatureOut]:
    """The feature catalog the checker consults."""
    return checker_svc.features()
