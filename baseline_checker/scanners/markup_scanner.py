"""
HTML feature detection, including embedded <script> and <style> blocks.
"""

import re
from typing import Iterator, List, Optional, Tuple

from ..catalog import FeatureCatalog
from ..issue import Occurrence
from ..scanner_base import BaseScanner
from ..utils import blank_spans, keep_spans, mask_comments
from .script_scanner import ScriptScanner
from .style_scanner import StyleScanner

_SCRIPT_BLOCK = re.compile(r"<script\b([^>]*)>(.*?)</script\s*>", re.IGNORECASE | re.DOTALL)
_STYLE_BLOCK = re.compile(r"<style\b([^>]*)>(.*?)</style\s*>", re.IGNORECASE | re.DOTALL)
_TYPE_ATTR = re.compile(r"""\btype\s*=\s*["']?([^"'\s>]+)""", re.IGNORECASE)

JS_SCRIPT_TYPES = {
    "",
    "module",
    "text/javascript",
    "application/javascript",
    "text/ecmascript",
    "application/ecmascript",
}

Span = Tuple[int, int]


def _block_spans(pattern: "re.Pattern", view: str, script: bool = False) -> List[Span]:
    spans = []
    for match in pattern.finditer(view):
        if script:
            type_match = _TYPE_ATTR.search(match.group(1))
            script_type = type_match.group(1).lower() if type_match else ""
            if script_type not in JS_SCRIPT_TYPES:
                continue
        spans.append(match.span(2))
    return spans


class MarkupScanner(BaseScanner):
    """Detects HTML elements and attributes, then delegates embedded blocks.

    Embedded code is scanned on a copy of the document where everything
    outside the blocks is blanked, so reported lines are document lines.
    """

    category = "html"

    def __init__(
        self,
        catalog: FeatureCatalog,
        script_scanner: Optional[ScriptScanner] = None,
        style_scanner: Optional[StyleScanner] = None,
    ):
        super().__init__(catalog)
        self.script_scanner = script_scanner or ScriptScanner(catalog)
        self.style_scanner = style_scanner or StyleScanner(catalog)

    def scan(self, text: str) -> Iterator[Occurrence]:
        if not text or not text.strip():
            return
        view = mask_comments(text, "html")
        script_spans = _block_spans(_SCRIPT_BLOCK, view, script=True)
        all_scripts = [m.span(2) for m in _SCRIPT_BLOCK.finditer(view)]
        # A "<style>" inside script text is not a style block.
        style_spans = [
            (start, end) for start, end in _block_spans(_STYLE_BLOCK, view)
            if not any(a <= start < b for a, b in all_scripts)
        ]
        every_block = all_scripts + style_spans

        yield from self._scan_view(blank_spans(view, every_block))
        if script_spans:
            yield from self.script_scanner.scan(keep_spans(view, script_spans))
        if style_spans:
            yield from self.style_scanner.scan(keep_spans(view, style_spans))
