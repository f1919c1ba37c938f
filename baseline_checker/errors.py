"""
Exceptions raised by the baseline compatibility checker.
"""


class AnalysisError(Exception):
    """Base class for analysis failures surfaced to callers."""


class InvalidLanguageError(AnalysisError):
    """The requested language is not one the checker can scan."""

    def __init__(self, language):
        self.language = language
        super().__init__(
            f"Unsupported language {language!r}; expected one of javascript, typescript, css, html"
        )


class UnknownFeatureError(AnalysisError):
    """An occurrence refers to a feature id missing from the catalog."""

    def __init__(self, feature_id: str):
        self.feature_id = feature_id
        super().__init__(f"Feature {feature_id!r} is not in the catalog")
