"""
Evaluator: turns raw occurrences into issues, a score and a summary.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .catalog import FeatureCatalog, FeatureDefinition
from .errors import UnknownFeatureError
from .issue import (
    BaselineStatus,
    BrowserSupportEntry,
    CompatibilityIssue,
    CompatibilityResult,
    Occurrence,
    Severity,
    SupportStatus,
)
from .utils import TARGET_BROWSER_VERSIONS, TRACKED_BROWSERS, version_below

logger = logging.getLogger(__name__)

GRADE_BRACKETS = (
    (95, "A+"),
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)

_GRADE_VERDICTS = {
    "A+": "Safe to ship to every targeted browser.",
    "A": "Safe to ship to every targeted browser.",
    "B": "Some targeted browsers need fallbacks.",
    "C": "Some targeted browsers need fallbacks.",
    "D": "Likely to break in several targeted browsers.",
    "F": "Likely to break in several targeted browsers.",
}


def score_grade(score: int) -> str:
    """Letter grade for a 0-100 score."""
    for threshold, grade in GRADE_BRACKETS:
        if score >= threshold:
            return grade
    return "F"


def compute_score(issues: Iterable[CompatibilityIssue]) -> int:
    """100 minus the severity penalty of every issue, floored at 0."""
    return max(0, 100 - sum(issue.severity.penalty for issue in issues))


def summarize(issues: Sequence[CompatibilityIssue], score: int) -> str:
    """One-sentence summary built from issue counts and the grade."""
    grade = score_grade(score)
    if not issues:
        return (
            "No compatibility issues found; the code only uses widely supported web features. "
            f"Grade {grade} ({score}/100)."
        )
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    plural = "" if len(issues) == 1 else "s"
    return (
        f"Found {len(issues)} compatibility issue{plural} "
        f"({counts[Severity.HIGH]} high, {counts[Severity.MEDIUM]} medium, "
        f"{counts[Severity.LOW]} low severity). "
        f"Grade {grade} ({score}/100): {_GRADE_VERDICTS[grade]}"
    )


def browser_support(
    definition: FeatureDefinition,
    target_versions: Mapping[str, str] = TARGET_BROWSER_VERSIONS,
) -> Tuple[BrowserSupportEntry, ...]:
    """Support entries for every tracked browser lacking full support.

    flagged when the browser only ships the feature behind a flag,
    unsupported when it has no minimum version, partial when the targeted
    version predates the minimum. Fully supporting browsers are omitted.
    """
    entries = []
    for browser in TRACKED_BROWSERS:
        target = target_versions[browser]
        minimum = definition.browser_min_versions.get(browser)
        if browser in definition.flagged_browsers:
            status: Optional[SupportStatus] = SupportStatus.FLAGGED
        elif minimum is None:
            status = SupportStatus.UNSUPPORTED
        elif version_below(target, minimum):
            status = SupportStatus.PARTIAL
        else:
            status = None
        if status is not None:
            entries.append(BrowserSupportEntry(browser, target, status))
    return tuple(entries)


class Evaluator:
    """Groups occurrences by feature and scores the resulting issues."""

    def __init__(
        self,
        catalog: FeatureCatalog,
        target_versions: Optional[Mapping[str, str]] = None,
    ):
        self.catalog = catalog
        self.target_versions = dict(TARGET_BROWSER_VERSIONS)
        if target_versions:
            self.target_versions.update(target_versions)

    def evaluate(self, occurrences: Iterable[Occurrence]) -> CompatibilityResult:
        groups: Dict[str, List[Occurrence]] = {}
        for occurrence in occurrences:
            groups.setdefault(occurrence.feature_id, []).append(occurrence)

        issues: List[CompatibilityIssue] = []
        for feature_id, group in groups.items():
            try:
                definition = self._definition(feature_id)
            except UnknownFeatureError as e:
                logger.error("Dropping %d occurrence(s): %s", len(group), e)
                continue
            issue = self._build_issue(definition, group)
            if issue is not None:
                issues.append(issue)

        issues.sort(key=lambda i: (i.severity.rank, self.catalog.order_of(i.feature_id)))
        score = compute_score(issues)
        return CompatibilityResult(score=score, summary=summarize(issues, score), issues=tuple(issues))

    def _definition(self, feature_id: str) -> FeatureDefinition:
        definition = self.catalog.lookup(feature_id)
        if definition is None:
            raise UnknownFeatureError(feature_id)
        return definition

    def _build_issue(
        self, definition: FeatureDefinition, group: List[Occurrence]
    ) -> Optional[CompatibilityIssue]:
        """One issue per feature; None when the feature carries no risk."""
        browsers = browser_support(definition, self.target_versions)
        if not browsers and definition.baseline_status is BaselineStatus.WIDELY_AVAILABLE:
            return None
        locations = tuple(sorted(group, key=lambda o: (o.line_number, o.offset or 0)))
        return CompatibilityIssue(
            feature_name=definition.name,
            description=definition.description,
            severity=definition.default_severity,
            baseline_status=definition.baseline_status,
            browsers_unsupported=browsers,
            suggested_fix=definition.fix.text,
            line_number=locations[0].line_number if definition.pinpoint else None,
            mdn_link=definition.doc_link,
            feature_id=definition.id,
            locations=locations,
        )
