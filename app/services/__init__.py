"""Services for checker, AI refinement and running statistics."""

from .checker import CheckerService
from .ai import AIService
from .stats import ScanStats

__all__ = ["CheckerService", "AIService", "ScanStats"]
