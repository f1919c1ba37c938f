"""
Fixer: suggestion wording and best-effort automatic rewrites.
"""

import dataclasses
import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .catalog import FIX_PREPEND, FIX_REPLACE, FeatureCatalog
from .issue import CompatibilityIssue
from .utils import LANGUAGE_CATEGORY, LineIndex

logger = logging.getLogger(__name__)

_DOCTYPE = re.compile(r"\A\s*<!doctype[^>]*>[^\n]*\n?", re.IGNORECASE)


class Fixer:
    """Applies catalog fix templates to analyzed code.

    ``refiner`` is any object with ``refine(issue) -> Optional[str]``. When it
    is missing, returns nothing, or fails, the catalog's suggestion text is
    used unchanged.
    """

    def __init__(self, catalog: FeatureCatalog, refiner=None):
        self.catalog = catalog
        self.refiner = refiner

    def refine_suggestions(self, issues: Sequence[CompatibilityIssue]) -> Tuple[CompatibilityIssue, ...]:
        """Return the issues with suggested fixes reworded by the refiner."""
        if self.refiner is None:
            return tuple(issues)
        refined = []
        for issue in issues:
            text = None
            try:
                text = self.refiner.refine(issue)
            except Exception:
                logger.warning(
                    "Suggestion refiner failed for %s; keeping catalog text",
                    issue.feature_name,
                    exc_info=True,
                )
            if text and text.strip():
                issue = dataclasses.replace(issue, suggested_fix=text.strip())
            refined.append(issue)
        return tuple(refined)

    def apply_fixes(
        self,
        code: str,
        issues: Iterable[CompatibilityIssue],
        language: Optional[str] = None,
    ) -> Optional[str]:
        """Return the fixed code, or None when no fix could be applied.

        Never raises: a fix that cannot be located is skipped.
        """
        try:
            fixed = self._apply(code, list(issues), language)
        except Exception:
            logger.exception("Automatic fixing failed; returning no fixed code")
            return None
        return fixed if fixed != code else None

    def _apply(self, code: str, issues: List[CompatibilityIssue], language: Optional[str]) -> str:
        edits = []
        prepends: List[str] = []
        category = LANGUAGE_CATEGORY.get(language or "")
        for issue in issues:
            definition = self.catalog.lookup(issue.feature_id)
            if definition is None or not definition.fix.auto_applicable:
                continue
            if definition.fix.kind == FIX_REPLACE:
                if issue.line_number is None:
                    continue
                for location in issue.locations:
                    edits.append((location, definition.fix.substitutions))
            elif definition.fix.kind == FIX_PREPEND:
                if category and definition.category != category:
                    logger.debug("Not prepending %s fix into %s code", definition.id, language)
                    continue
                if definition.fix.text not in prepends and definition.fix.text not in code:
                    prepends.append(definition.fix.text)

        fixed = self._replace_tokens(code, edits)
        if prepends:
            fixed = self._prepend(fixed, prepends, category)
        return fixed

    def _replace_tokens(self, code: str, edits) -> str:
        """Rewrite matched tokens at their recorded positions, right to left."""
        if not edits:
            return code
        index = LineIndex(code)
        placed = []
        for location, substitutions in edits:
            pos = self._locate(code, index, location)
            if pos is None:
                continue
            placed.append((pos, location, substitutions))

        fixed = code
        boundary = len(code)
        for pos, location, substitutions in sorted(placed, key=lambda e: e[0], reverse=True):
            token = location.matched_text
            if pos + len(token) > boundary:
                logger.debug("Skipping fix on line %d: overlaps another edit", location.line_number)
                continue
            replacement = render_substitutions(token, substitutions)
            if replacement == token:
                logger.debug("Skipping fix on line %d: no substitution applies to %r", location.line_number, token)
                continue
            fixed = fixed[:pos] + replacement + fixed[pos + len(token):]
            boundary = pos
        return fixed

    @staticmethod
    def _locate(code: str, index: LineIndex, location) -> Optional[int]:
        """Return the start of the location's token in ``code``, or None.

        Without a recorded offset the token must occur exactly once on its line.
        """
        token = location.matched_text
        pos = location.offset
        if pos is None:
            if not 1 <= location.line_number <= index.line_count:
                pos = -1
            else:
                start = index.line_start(location.line_number)
                end = code.find("\n", start)
                end = len(code) if end == -1 else end
                pos = code.find(token, start, end)
                if pos != -1 and code.find(token, pos + 1, end) != -1:
                    logger.debug("Skipping fix on line %d: %r is ambiguous", location.line_number, token)
                    return None
        if pos < 0 or code[pos:pos + len(token)] != token:
            logger.debug("Skipping fix on line %d: %r not found at its position", location.line_number, token)
            return None
        return pos

    def _prepend(self, code: str, blocks: List[str], category: Optional[str]) -> str:
        header = "\n".join(blocks) + "\n"
        if category == "html":
            doctype = _DOCTYPE.match(code)
            if doctype:
                head = doctype.group(0)
                if not head.endswith("\n"):
                    head += "\n"
                return head + header + code[doctype.end():]
        return header + code


def render_substitutions(token: str, substitutions) -> str:
    """Apply (pattern, replacement) pairs to a matched token in order."""
    out = token
    for pattern, replacement in substitutions:
        out = re.sub(pattern, replacement, out)
    return out
