"""
Feature catalog: the browser support table the checker consults.

A catalog is plain data. Each FeatureDefinition says how to spot a feature
(a regex or a named structural predicate), how widely it is supported, and
what to suggest when it is found. The pipeline never hardcodes features, so a
catalog can be swapped (see FeatureCatalog.from_json) without code changes.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from .issue import BaselineStatus, Severity
from .structural import PREDICATES
from .utils import CATEGORIES, TRACKED_BROWSERS

logger = logging.getLogger(__name__)

FIX_REPLACE = "replace"
FIX_PREPEND = "prepend"
FIX_MANUAL = "manual"
FIX_KINDS = (FIX_REPLACE, FIX_PREPEND, FIX_MANUAL)


@dataclass(frozen=True)
class RegexRule:
    """Lexical detection rule; every match is one occurrence."""
    pattern: str
    ignore_case: bool = False
    regex: "re.Pattern" = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        flags = re.MULTILINE | (re.IGNORECASE if self.ignore_case else 0)
        object.__setattr__(self, "regex", re.compile(self.pattern, flags))


@dataclass(frozen=True)
class StructuralRule:
    """Detection by a named predicate registered in the structural module."""
    predicate: str

    def __post_init__(self):
        if self.predicate not in PREDICATES:
            raise ValueError(f"Unknown structural predicate {self.predicate!r}")


DetectRule = Union[RegexRule, StructuralRule]


@dataclass(frozen=True)
class FixTemplate:
    """How a feature can be remedied.

    ``text`` is the human-facing suggestion. ``replace`` fixes rewrite each
    matched token by applying ``substitutions`` (regex, replacement) in order;
    ``prepend`` fixes insert ``text`` once at the top of the file; ``manual``
    fixes are never applied automatically.
    """
    kind: str
    text: str
    substitutions: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self):
        if self.kind not in FIX_KINDS:
            raise ValueError(f"Unknown fix kind {self.kind!r}")
        if self.kind == FIX_REPLACE and not self.substitutions:
            raise ValueError("replace fixes need at least one substitution")

    @property
    def auto_applicable(self) -> bool:
        return self.kind != FIX_MANUAL


@dataclass(frozen=True)
class FeatureDefinition:
    """Metadata for one trackable web platform feature.

    ``browser_min_versions`` maps each tracked browser to the first version
    with full support, or None when the browser family does not ship it.
    Browsers listed in ``flagged_browsers`` only expose it behind a flag.
    """
    id: str
    name: str
    category: str
    detect: DetectRule
    baseline_status: BaselineStatus
    browser_min_versions: Mapping[str, Optional[str]]
    default_severity: Severity
    fix: FixTemplate
    description: str = ""
    doc_link: Optional[str] = None
    flagged_browsers: FrozenSet[str] = frozenset()
    pinpoint: bool = True
    polyfill_marker: Optional[str] = None

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise ValueError(f"{self.id}: unknown category {self.category!r}")
        unknown = set(self.browser_min_versions) - set(TRACKED_BROWSERS)
        unknown |= set(self.flagged_browsers) - set(TRACKED_BROWSERS)
        if unknown:
            raise ValueError(f"{self.id}: untracked browsers {sorted(unknown)}")


class FeatureCatalog:
    """Read-only, ordered collection of feature definitions keyed by id."""

    def __init__(self, definitions: Iterable[FeatureDefinition], version: str = "custom"):
        self.version = version
        self._by_id: Dict[str, FeatureDefinition] = {}
        self._order: Dict[str, int] = {}
        for definition in definitions:
            if definition.id in self._by_id:
                raise ValueError(f"Duplicate feature id {definition.id!r}")
            self._order[definition.id] = len(self._order)
            self._by_id[definition.id] = definition
        self._by_category: Dict[str, Tuple[FeatureDefinition, ...]] = {
            cat: tuple(d for d in self._by_id.values() if d.category == cat)
            for cat in CATEGORIES
        }

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self):
        return iter(self._by_id.values())

    def __contains__(self, feature_id: str) -> bool:
        return feature_id in self._by_id

    def lookup(self, feature_id: str) -> Optional[FeatureDefinition]:
        """Return the definition for an id, or None."""
        return self._by_id.get(feature_id)

    def all_for_category(self, category: str) -> Tuple[FeatureDefinition, ...]:
        """Definitions of one category in declaration order."""
        return self._by_category.get(category, ())

    def order_of(self, feature_id: str) -> int:
        """Declaration index, used as a sort tiebreaker."""
        return self._order.get(feature_id, len(self._order))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "FeatureCatalog":
        """Load a catalog from a JSON file.

        The file is either a list of feature objects or
        ``{"version": ..., "features": [...]}``. Keys mirror the
        FeatureDefinition fields.
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(data, list):
            data = {"features": data}
        features: List[FeatureDefinition] = []
        seen = set()
        for position, entry in enumerate(data.get("features", [])):
            try:
                definition = _definition_from_dict(entry)
            except (KeyError, TypeError, ValueError, AttributeError, re.error) as exc:
                entry_id = entry.get("id") if isinstance(entry, dict) else None
                logger.error("Skipping catalog entry %d (%s) in %s: %s", position, entry_id, path, exc)
                continue
            if definition.id in seen:
                logger.error("Skipping duplicate catalog entry %r in %s", definition.id, path)
                continue
            seen.add(definition.id)
            features.append(definition)
        return cls(features, version=str(data.get("version", "custom")))


def _definition_from_dict(d: Dict[str, Any]) -> FeatureDefinition:
    detect = d["detect"]
    kind = detect.get("kind", "regex")
    if kind == "regex":
        rule: DetectRule = RegexRule(detect["pattern"], bool(detect.get("ignore_case", False)))
    elif kind == "structural":
        rule = StructuralRule(detect["predicate"])
    else:
        raise ValueError(f"{d.get('id')}: unknown detect kind {kind!r}")
    fix = d.get("fix") or {"kind": FIX_MANUAL, "text": ""}
    subs: List[Tuple[str, str]] = [(p, r) for p, r in fix.get("substitutions", [])]
    for pattern, _ in subs:
        re.compile(pattern)
    return FeatureDefinition(
        id=d["id"],
        name=d["name"],
        category=d["category"],
        detect=rule,
        baseline_status=BaselineStatus(d["baseline_status"]),
        browser_min_versions=dict(d.get("browser_min_versions", {})),
        default_severity=Severity(d["default_severity"]),
        fix=FixTemplate(fix["kind"], fix.get("text", ""), tuple(subs)),
        description=d.get("description", ""),
        doc_link=d.get("doc_link"),
        flagged_browsers=frozenset(d.get("flagged_browsers", ())),
        pinpoint=bool(d.get("pinpoint", True)),
        polyfill_marker=d.get("polyfill_marker"),
    )


def default_catalog() -> FeatureCatalog:
    """The catalog shipped with the package."""
    from .features import CATALOG_VERSION, FEATURES

    return FeatureCatalog(FEATURES, version=CATALOG_VERSION)
