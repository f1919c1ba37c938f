"""Pydantic request/response models.

Response field names are camelCase; the web UI renders them verbatim.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnalyzeRequest(BaseModel):
    """Request body for snippet analysis."""

    code: str = Field(..., description="Source code to analyze")
    language: str = Field(..., description="Language: javascript, typescript, css or html")


# --- Issue (response) ---


class BrowserSupportOut(BaseModel):
    """A targeted browser lacking full support for a feature."""

    name: str = Field(..., description="Chrome, Firefox, Safari or Edge")
    version: str
    supportStatus: str = Field(..., description="unsupported, partial or flagged")


class IssueOut(BaseModel):
    """Single compatibility issue."""

    featureName: str
    description: str
    severity: str = Field(..., description="high, medium or low")
    baselineStatus: str
    browsersUnsupported: List[BrowserSupportOut] = Field(default_factory=list)
    suggestedFix: str
    lineNumber: Optional[int] = None
    mdnLink: Optional[str] = None


# --- Responses ---


class AnalysisResponse(BaseModel):
    """Response for POST /check and POST /analyze."""

    score: int = Field(..., ge=0, le=100)
    summary: str
    issues: List[IssueOut] = Field(default_factory=list)
    fixedCode: Optional[str] = Field(default=None, description="Automatically fixed code, when any fix applied")


class StatsResponse(BaseModel):
    """Running statistics of analyses served by this process."""

    totalScans: int = 0
    averageScore: int = 0
    currentScore: int = 0
    issuesFound: int = 0
    badges: List[str] = Field(default_factory=list)


class FeatureOut(BaseModel):
    """Catalog entry as listed by GET /features."""

    id: str
    name: str
    category: str
    baselineStatus: str
    browserMinVersions: Dict[str, Optional[str]]
    defaultSeverity: str
    mdnLink: Optional[str] = None


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
