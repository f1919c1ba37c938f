"""Checker service: wraps baseline_checker and maps to API models."""

import logging

from deps import Any, Dict, List, Optional

from baseline_checker.catalog import FeatureCatalog, FeatureDefinition, default_catalog
from baseline_checker.issue import CompatibilityResult
from baseline_checker.main_checker import BaselineChecker

from ..config import get_catalog_path
from ..schemas import AnalysisResponse, FeatureOut

logger = logging.getLogger(__name__)


def load_catalog() -> FeatureCatalog:
    """Built-in catalog, or the JSON file named by BASELINE_CATALOG_PATH."""
    path = get_catalog_path()
    if path is None or not path.is_file():
        return default_catalog()
    catalog = FeatureCatalog.from_json(path)
    logger.info("Loaded %d features from %s (version %s)", len(catalog), path, catalog.version)
    return catalog


def result_to_out(result: CompatibilityResult) -> AnalysisResponse:
    return AnalysisResponse(**result.to_dict())


def _feature_to_out(d: FeatureDefinition) -> FeatureOut:
    return FeatureOut(
        id=d.id,
        name=d.name,
        category=d.category,
        baselineStatus=d.baseline_status.value,
        browserMinVersions=dict(d.browser_min_versions),
        defaultSeverity=d.default_severity.value,
        mdnLink=d.doc_link,
    )


class CheckerService:
    """Wraps BaselineChecker for use by the API.

    ``refiner`` is only used by :meth:`analyze`; :meth:`check` is rules-only.
    """

    def __init__(self, catalog: Optional[FeatureCatalog] = None, refiner: Optional[Any] = None):
        self.catalog = catalog if catalog is not None else load_catalog()
        self.rules_checker = BaselineChecker(self.catalog)
        if refiner is not None:
            self.refining_checker = BaselineChecker(self.catalog, refiner=refiner)
        else:
            self.refining_checker = self.rules_checker

    def check(self, code: str, language: str) -> CompatibilityResult:
        """Rule-based analysis, catalog suggestion text only."""
        return self.rules_checker.analyze(code, language)

    def analyze(self, code: str, language: str) -> CompatibilityResult:
        """Rule-based analysis with refined suggestion wording when available."""
        return self.refining_checker.analyze(code, language)

    def features(self) -> List[FeatureOut]:
        return [_feature_to_out(d) for d in self.catalog]

    def catalog_info(self) -> Dict[str, Any]:
        return {"version": self.catalog.version, "count": len(self.catalog)}
