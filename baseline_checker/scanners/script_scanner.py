"""
JavaScript/TypeScript feature detection.
"""

from ..scanner_base import BaseScanner
from ..utils import LineIndex, position_inside_string_literal


class ScriptScanner(BaseScanner):
    """Detects JS syntax and API features in JavaScript and TypeScript."""

    category = "js"

    def _skip_match(self, view: str, index: LineIndex, start: int) -> bool:
        """Ignore matches that start inside a quoted string literal."""
        line_start = index.line_start(index.line_of(start))
        line_end = view.find("\n", start)
        line = view[line_start:line_end if line_end != -1 else len(view)]
        return position_inside_string_literal(line, start - line_start)
