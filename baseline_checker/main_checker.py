"""
Main checker class that coordinates scanning, evaluation and fixing.
"""

import dataclasses
import logging
from functools import lru_cache
from typing import Iterator, Mapping, Optional

from .catalog import FeatureCatalog, default_catalog
from .errors import AnalysisError
from .evaluator import Evaluator, summarize
from .fixer import Fixer
from .issue import CompatibilityResult, Occurrence
from .scanners import MarkupScanner, ScriptScanner, StyleScanner
from .utils import normalize_language

logger = logging.getLogger(__name__)


class BaselineChecker:
    """Main checker class for web platform compatibility issues.

    The catalog and the optional suggestion refiner are injected so the
    support table can be swapped without touching the pipeline.
    """

    def __init__(
        self,
        catalog: Optional[FeatureCatalog] = None,
        refiner=None,
        target_versions: Optional[Mapping[str, str]] = None,
    ):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.evaluator = Evaluator(self.catalog, target_versions)
        self.fixer = Fixer(self.catalog, refiner)

        # JavaScript and TypeScript share the same scanner; HTML reuses both
        # for its embedded blocks.
        _script_scanner = ScriptScanner(self.catalog)
        _style_scanner = StyleScanner(self.catalog)
        self.language_scanners = {
            'javascript': _script_scanner,
            'typescript': _script_scanner,
            'css': _style_scanner,
            'html': MarkupScanner(self.catalog, _script_scanner, _style_scanner),
        }

    def scan(self, code: str, language: str) -> Iterator[Occurrence]:
        """Lazily yield raw feature occurrences."""
        lang = normalize_language(language)
        if not isinstance(code, str):
            raise AnalysisError(f"code must be a string, not {type(code).__name__}")
        return self.language_scanners[lang].scan(code)

    def analyze(self, code: str, language: str, fix: bool = True) -> CompatibilityResult:
        """Analyze a snippet and return its compatibility result.

        Raises InvalidLanguageError for unsupported languages. Empty or
        whitespace-only code yields a perfect score with no issues.
        """
        occurrences = self.scan(code, language)
        lang = normalize_language(language)
        if not code.strip():
            return CompatibilityResult(score=100, summary=summarize((), 100))

        logger.debug("Analyzing %d characters of %s", len(code), lang)
        result = self.evaluator.evaluate(occurrences)
        issues = self.fixer.refine_suggestions(result.issues)
        fixed_code = self.fixer.apply_fixes(code, issues, lang) if fix else None
        logger.debug(
            "Analysis finished: score=%d issues=%d fixed=%s",
            result.score, len(issues), fixed_code is not None,
        )
        return dataclasses.replace(result, issues=issues, fixed_code=fixed_code)


@lru_cache(maxsize=1)
def get_default_checker() -> BaselineChecker:
    """Shared checker using the default catalog and no refiner."""
    return BaselineChecker()


def analyze(code: str, language: str) -> CompatibilityResult:
    """Analyze with the default checker."""
    return get_default_checker().analyze(code, language)
