"""
Base scanner class for web platform feature detection.
"""

from typing import Iterator, Tuple

from .catalog import FeatureCatalog, FeatureDefinition, RegexRule
from .issue import Occurrence
from .structural import get_predicate
from .utils import LineIndex, mask_comments


class BaseScanner:
    """Base class for all scanners.

    A scanner applies every catalog rule of its category to the text and
    yields one Occurrence per match. Scanners keep no per-call state, so a
    single instance can serve concurrent calls.
    """

    category = ""

    def __init__(self, catalog: FeatureCatalog):
        self.catalog = catalog

    def scan(self, text: str) -> Iterator[Occurrence]:
        """Yield occurrences for the given source text."""
        if not text or not text.strip():
            return
        yield from self._scan_view(mask_comments(text, self.category))

    def _scan_view(self, view: str) -> Iterator[Occurrence]:
        """Run the category's rules over an already masked view."""
        if not view.strip():
            return
        index = LineIndex(view)
        for definition in self.catalog.all_for_category(self.category):
            if definition.polyfill_marker and definition.polyfill_marker in view:
                continue
            for start, token in self._matches(definition, view):
                if self._skip_match(view, index, start):
                    continue
                yield Occurrence(definition.id, index.line_of(start), token, start)

    def _matches(self, definition: FeatureDefinition, view: str) -> Iterator[Tuple[int, str]]:
        rule = definition.detect
        if isinstance(rule, RegexRule):
            for match in rule.regex.finditer(view):
                yield match.start(), match.group(0)
        else:
            yield from get_predicate(rule.predicate)(view)

    def _skip_match(self, view: str, index: LineIndex, start: int) -> bool:
        """Override in subclasses to drop matches (e.g. inside string literals)."""
        return False
