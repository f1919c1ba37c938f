"""
Structural detection predicates.

Some features cannot be recognised by a single regex: a private field only
means something inside a class body, ``await`` only matters outside any
function, a CSS rule is only "nested" inside another style rule. These
predicates do a light brace walk over a comment-masked view and yield
``(offset, matched_text)`` pairs. Catalog entries refer to them by name.
"""

import re
from typing import Callable, Dict, Iterator, List, Tuple

Match = Tuple[int, str]
Predicate = Callable[[str], Iterator[Match]]

PREDICATES: Dict[str, Predicate] = {}


def structural(name: str):
    """Register a predicate under a catalog-visible name."""
    def register(func: Predicate) -> Predicate:
        PREDICATES[name] = func
        return func
    return register


def get_predicate(name: str) -> Predicate:
    return PREDICATES[name]


_CLASS_HEAD = re.compile(r"\bclass\b[^{;=()]*\{")
_PRIVATE_NAME = re.compile(r"#[A-Za-z_$][\w$]*")
_BRACES_AND_AWAIT = re.compile(r"[{}]|\bawait\b")
_CONTROL_HEAD = re.compile(r"^(?:else\s+)?(?:if|for|while|switch|catch|with)\b")
_FUNCTION_HEAD = re.compile(r"\bfunction\b|=>\s*$|\)\s*(?::[^)]*)?$")
_BRACES = re.compile(r"[{}]")

# Longest statement head looked at when classifying a block.
_HEAD_WINDOW = 1024


def _block_end(view: str, open_pos: int) -> int:
    """Index of the brace closing the block opened at ``open_pos``."""
    depth = 0
    for match in _BRACES.finditer(view, open_pos):
        if match.group(0) == "{":
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                return match.start()
    return len(view)


def _statement_head(view: str, pos: int) -> str:
    """Text between the previous ``;``, ``{`` or ``}`` and ``pos``."""
    lo = max(0, pos - _HEAD_WINDOW)
    start = max(view.rfind(";", lo, pos), view.rfind("{", lo, pos), view.rfind("}", lo, pos), lo - 1)
    return view[start + 1:pos].strip()


@structural("private_class_field")
def private_class_field(view: str) -> Iterator[Match]:
    """``#name`` members used inside a class body."""
    pos = 0
    while True:
        head = _CLASS_HEAD.search(view, pos)
        if not head:
            return
        body_start = head.end() - 1
        body_end = _block_end(view, body_start)
        for match in _PRIVATE_NAME.finditer(view, body_start, body_end):
            yield match.start(), match.group(0)
        pos = max(body_end, head.end())


def _opens_function(head: str) -> bool:
    if _CONTROL_HEAD.match(head):
        return False
    return bool(_FUNCTION_HEAD.search(head))


@structural("top_level_await")
def top_level_await(view: str) -> Iterator[Match]:
    """``await`` outside of any function body."""
    stack: List[bool] = []
    function_depth = 0
    for match in _BRACES_AND_AWAIT.finditer(view):
        token = match.group(0)
        if token == "{":
            is_function = _opens_function(_statement_head(view, match.start()))
            stack.append(is_function)
            function_depth += is_function
        elif token == "}":
            if stack and stack.pop():
                function_depth -= 1
        elif function_depth == 0:
            # Expression-bodied arrow functions have no braces.
            if "=>" in _statement_head(view, match.start()).split("\n")[-1]:
                continue
            yield match.start(), token


@structural("css_nesting")
def css_nesting(view: str) -> Iterator[Match]:
    """Style rules opened inside another style rule."""
    stack: List[str] = []
    for match in _BRACES.finditer(view):
        if match.group(0) == "}":
            if stack:
                stack.pop()
            continue
        head = _statement_head(view, match.start())
        if "rule" in stack and head:
            offset = view.rfind(head, 0, match.start())
            yield offset, head.splitlines()[0].strip()
        stack.append("at" if head.startswith("@") else "rule")
