"""
Utility functions for the baseline compatibility checker.
"""

import re
from bisect import bisect_right
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import InvalidLanguageError

# Languages accepted by analyze() and the catalog category scanned for each.
LANGUAGE_CATEGORY: Dict[str, str] = {
    "javascript": "js",
    "typescript": "js",
    "css": "css",
    "html": "html",
}
LANGUAGES = tuple(LANGUAGE_CATEGORY)
CATEGORIES = ("js", "css", "html")

TRACKED_BROWSERS = ("Chrome", "Firefox", "Safari", "Edge")

# Oldest version of each browser the analysis still targets: roughly the
# releases still in wide use two years back (Chrome/Edge 109 is the last
# build for Windows 7/8, Firefox 115 is the ESR line, Safari 15.6 ships with
# the oldest macOS and iOS versions still receiving updates).
TARGET_BROWSER_VERSIONS: Dict[str, str] = {
    "Chrome": "109",
    "Firefox": "115",
    "Safari": "15.6",
    "Edge": "109",
}

_HTML_COMMENT = re.compile(r"<!--.*?(?:-->|\Z)", re.DOTALL)


def normalize_language(language) -> str:
    """Return the canonical language name or raise InvalidLanguageError."""
    if not isinstance(language, str):
        raise InvalidLanguageError(language)
    lang = language.strip().lower()
    if lang not in LANGUAGE_CATEGORY:
        raise InvalidLanguageError(language)
    return lang


def parse_version(version: str) -> Tuple[int, ...]:
    """'15.4' -> (15, 4). Non-numeric parts are ignored."""
    parts = []
    for piece in str(version).split("."):
        digits = re.match(r"\d+", piece.strip())
        if not digits:
            break
        parts.append(int(digits.group(0)))
    return tuple(parts) or (0,)


def version_below(version: str, minimum: str) -> bool:
    """True if ``version`` is older than ``minimum``."""
    return parse_version(version) < parse_version(minimum)


class LineIndex:
    """Maps character offsets of a text to 1-based line numbers."""

    def __init__(self, text: str):
        self._starts: List[int] = [0]
        pos = text.find("\n")
        while pos != -1:
            self._starts.append(pos + 1)
            pos = text.find("\n", pos + 1)

    def line_of(self, offset: int) -> int:
        return bisect_right(self._starts, offset)

    def line_start(self, line_number: int) -> int:
        return self._starts[line_number - 1]

    @property
    def line_count(self) -> int:
        return len(self._starts)


def _blank(text: str) -> str:
    """Replace every character except newlines with a space."""
    return re.sub(r"[^\n]", " ", text)


def blank_spans(text: str, spans: Iterable[Tuple[int, int]]) -> str:
    """Blank out the given non-overlapping (start, end) spans, keeping offsets and newlines."""
    pieces = []
    pos = 0
    for start, end in sorted(spans):
        pieces.append(text[pos:start])
        pieces.append(_blank(text[start:end]))
        pos = end
    pieces.append(text[pos:])
    return "".join(pieces)


def keep_spans(text: str, spans: Iterable[Tuple[int, int]]) -> str:
    """Blank out everything outside the given spans."""
    pieces = []
    pos = 0
    for start, end in sorted(spans):
        pieces.append(_blank(text[pos:start]))
        pieces.append(text[start:end])
        pos = end
    pieces.append(_blank(text[pos:]))
    return "".join(pieces)


def mask_comments(text: str, category: str) -> str:
    """Blank comments so rules never match inside them.

    Offsets and line breaks are preserved. JavaScript masks ``//`` and
    ``/* */`` comments, CSS masks ``/* */``, HTML masks ``<!-- -->``.
    String literals are skipped so ``"http://..."`` is not taken for a
    comment.
    """
    if category == "html":
        return _HTML_COMMENT.sub(lambda m: _blank(m.group(0)), text)

    line_comments = category == "js"
    quotes = "'\"`" if line_comments else "'\""
    spans: List[Tuple[int, int]] = []
    n = len(text)
    i = 0
    quote: Optional[str] = None
    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or (ch == "\n" and quote != "`"):
                quote = None
            i += 1
            continue
        if ch in quotes:
            quote = ch
        elif ch == "/" and i + 1 < n:
            nxt = text[i + 1]
            if nxt == "*":
                end = text.find("*/", i + 2)
                end = n if end == -1 else end + 2
                spans.append((i, end))
                i = end
                continue
            if nxt == "/" and line_comments:
                end = text.find("\n", i)
                end = n if end == -1 else end
                spans.append((i, end))
                i = end
                continue
        i += 1
    if not spans:
        return text
    return blank_spans(text, spans)


def position_inside_string_literal(line: str, pos: int) -> bool:
    """True if position pos in line is inside a quoted string literal (not code)."""
    if pos < 0 or pos >= len(line):
        return False
    in_string = False
    quote_char = None
    i = 0
    while i <= pos and i < len(line):
        ch = line[i]
        if ch in ('"', "'") and (i == 0 or line[i - 1] != "\\"):
            if not in_string:
                in_string = True
                quote_char = ch
            elif ch == quote_char:
                in_string = False
                quote_char = None
        i += 1
    return in_string
