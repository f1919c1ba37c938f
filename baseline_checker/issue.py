"""
Issue data models for the baseline compatibility checker.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Severity(Enum):
    """Issue severity levels."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @property
    def penalty(self) -> int:
        return _SEVERITY_PENALTY[self]


_SEVERITY_RANK = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}
_SEVERITY_PENALTY = {Severity.HIGH: 15, Severity.MEDIUM: 8, Severity.LOW: 3}


class BaselineStatus(Enum):
    """How broadly a feature is supported across the major browsers."""
    WIDELY_AVAILABLE = "widely_available"
    NEWLY_AVAILABLE = "newly_available"
    LIMITED_AVAILABILITY = "limited_availability"


class SupportStatus(Enum):
    """Support problem of a single browser for a feature."""
    UNSUPPORTED = "unsupported"
    PARTIAL = "partial"
    FLAGGED = "flagged"


@dataclass(frozen=True)
class Occurrence:
    """A raw feature match produced by a scanner."""
    feature_id: str
    line_number: int
    matched_text: str
    # Character offset of the match in the scanned document.
    offset: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class BrowserSupportEntry:
    """A tracked browser that does not fully support a feature."""
    name: str
    version: str
    support_status: SupportStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "supportStatus": self.support_status.value,
        }


@dataclass(frozen=True)
class CompatibilityIssue:
    """One detected feature with compatibility risk."""
    feature_name: str
    description: str
    severity: Severity
    baseline_status: BaselineStatus
    browsers_unsupported: Tuple[BrowserSupportEntry, ...]
    suggested_fix: str
    line_number: Optional[int] = None
    mdn_link: Optional[str] = None
    # Not part of the wire format; used by the fixer.
    feature_id: str = field(default="", compare=False)
    locations: Tuple[Occurrence, ...] = field(default=(), repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (camelCase, optional fields omitted when unset)."""
        out: Dict[str, Any] = {
            "featureName": self.feature_name,
            "description": self.description,
            "severity": self.severity.value,
            "baselineStatus": self.baseline_status.value,
            "browsersUnsupported": [b.to_dict() for b in self.browsers_unsupported],
            "suggestedFix": self.suggested_fix,
        }
        if self.line_number is not None:
            out["lineNumber"] = self.line_number
        if self.mdn_link:
            out["mdnLink"] = self.mdn_link
        return out


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of one analysis call."""
    score: int
    summary: str
    issues: Tuple[CompatibilityIssue, ...] = ()
    fixed_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "score": self.score,
            "summary": self.summary,
            "issues": [i.to_dict() for i in self.issues],
        }
        if self.fixed_code is not None:
            out["fixedCode"] = self.fixed_code
        return out
