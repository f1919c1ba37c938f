"""
Default feature catalog.

Versions are the first release with full support. None means the browser
family does not ship the feature at all; ``flagged_browsers`` lists browsers
where it is only available behind an experimental flag.
"""

from .catalog import (
    FIX_MANUAL,
    FIX_PREPEND,
    FIX_REPLACE,
    FeatureDefinition,
    FixTemplate,
    RegexRule,
    StructuralRule,
)
from .issue import BaselineStatus, Severity

CATALOG_VERSION = "2025.06"

WIDELY = BaselineStatus.WIDELY_AVAILABLE
NEWLY = BaselineStatus.NEWLY_AVAILABLE
LIMITED = BaselineStatus.LIMITED_AVAILABILITY

MDN = "https://developer.mozilla.org/en-US/docs/Web"


def _versions(chrome, firefox, safari, edge):
    return {"Chrome": chrome, "Firefox": firefox, "Safari": safari, "Edge": edge}


# --- JavaScript / TypeScript ---

JS_FEATURES = (
    FeatureDefinition(
        id="optional-chaining",
        name="Optional chaining (?.)",
        category="js",
        detect=RegexRule(r"\?\.(?!\d)"),
        baseline_status=WIDELY,
        browser_min_versions=_versions("80", "74", "13.1", "80"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_MANUAL,
            "Supported by all targeted browsers. For older engines, transpile with "
            "@babel/plugin-transform-optional-chaining.",
        ),
        description="Optional chaining short-circuits property access on null or undefined.",
        doc_link=f"{MDN}/JavaScript/Reference/Operators/Optional_chaining",
    ),
    FeatureDefinition(
        id="nullish-coalescing",
        name="Nullish coalescing (??)",
        category="js",
        detect=RegexRule(r"\?\?(?!=)"),
        baseline_status=WIDELY,
        browser_min_versions=_versions("80", "72", "13.1", "80"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_MANUAL,
            "Supported by all targeted browsers. For older engines, use "
            "(a !== null && a !== undefined) ? a : b or transpile with Babel.",
        ),
        description="The ?? operator returns its right operand when the left is null or undefined.",
        doc_link=f"{MDN}/JavaScript/Reference/Operators/Nullish_coalescing",
    ),
    FeatureDefinition(
        id="logical-assignment",
        name="Logical assignment (||=, &&=, ??=)",
        category="js",
        detect=RegexRule(r"(?:\|\||&&|\?\?)="),
        baseline_status=WIDELY,
        browser_min_versions=_versions("85", "79", "14", "85"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_MANUAL, "Rewrite as a = a || b (or &&, ??) for older engines."),
        description="Logical assignment operators combine a logical operation with assignment.",
        doc_link=f"{MDN}/JavaScript/Reference/Operators/Logical_OR_assignment",
    ),
    FeatureDefinition(
        id="array-at",
        name="Array.prototype.at()",
        category="js",
        detect=RegexRule(r"\.at\(\s*-?\d"),
        baseline_status=WIDELY,
        browser_min_versions=_versions("92", "90", "15.4", "92"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/array/at";'),
        description="at() reads an element by index and accepts negative indexes from the end.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Array/at",
        polyfill_marker="core-js/actual/array/at",
    ),
    FeatureDefinition(
        id="private-class-fields",
        name="Private class fields (#field)",
        category="js",
        detect=StructuralRule("private_class_field"),
        baseline_status=WIDELY,
        browser_min_versions=_versions("74", "90", "14.1", "79"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Use a WeakMap keyed by the instance or a closure to keep state private "
            "when older engines must be supported.",
        ),
        description="Hash-prefixed class members are only reachable from inside the class body.",
        doc_link=f"{MDN}/JavaScript/Reference/Classes/Private_properties",
    ),
    FeatureDefinition(
        id="top-level-await",
        name="Top-level await",
        category="js",
        detect=StructuralRule("top_level_await"),
        baseline_status=WIDELY,
        browser_min_versions=_versions("89", "89", "15", "89"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Wrap the module body in an async IIFE: (async () => { ... })();",
        ),
        description="await outside an async function only works in ES modules.",
        doc_link=f"{MDN}/JavaScript/Reference/Operators/await#top_level_await",
    ),
    FeatureDefinition(
        id="structured-clone",
        name="structuredClone()",
        category="js",
        detect=RegexRule(r"\bstructuredClone\s*\("),
        baseline_status=WIDELY,
        browser_min_versions=_versions("98", "94", "15.4", "98"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/structured-clone";'),
        description="structuredClone() deep-copies values using the structured clone algorithm.",
        doc_link=f"{MDN}/API/structuredClone",
        polyfill_marker="core-js/actual/structured-clone",
    ),
    FeatureDefinition(
        id="array-find-last",
        name="Array.prototype.findLast()",
        category="js",
        detect=RegexRule(r"\.findLast(?:Index)?\s*\("),
        baseline_status=WIDELY,
        browser_min_versions=_versions("97", "104", "15.4", "97"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/array/find-last";'),
        description="findLast() and findLastIndex() search an array from the end.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Array/findLast",
        polyfill_marker="core-js/actual/array/find-last",
    ),
    FeatureDefinition(
        id="array-to-sorted",
        name="Array.prototype.toSorted()",
        category="js",
        detect=RegexRule(r"(?:[A-Za-z_$][\w$]*(?:\.#?[A-Za-z_$][\w$]*)*)?\.toSorted\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("110", "115", "16", "110"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_REPLACE,
            "Copy then sort in place: [...items].sort(compareFn)",
            ((r"^(.+)\.toSorted\($", r"[...\1].sort("),),
        ),
        description="toSorted() returns a sorted copy instead of sorting in place.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Array/toSorted",
    ),
    FeatureDefinition(
        id="array-to-reversed",
        name="Array.prototype.toReversed()",
        category="js",
        detect=RegexRule(r"(?:[A-Za-z_$][\w$]*(?:\.#?[A-Za-z_$][\w$]*)*)?\.toReversed\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("110", "115", "16", "110"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_REPLACE,
            "Copy then reverse in place: [...items].reverse()",
            ((r"^(.+)\.toReversed\($", r"[...\1].reverse("),),
        ),
        description="toReversed() returns a reversed copy instead of reversing in place.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Array/toReversed",
    ),
    FeatureDefinition(
        id="object-group-by",
        name="Object.groupBy()",
        category="js",
        detect=RegexRule(r"\bObject\.groupBy\s*\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("117", "119", "17.4", "117"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/object/group-by";'),
        description="Object.groupBy() groups iterable items by the key a callback returns.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Object/groupBy",
        polyfill_marker="core-js/actual/object/group-by",
    ),
    FeatureDefinition(
        id="promise-with-resolvers",
        name="Promise.withResolvers()",
        category="js",
        detect=RegexRule(r"\bPromise\.withResolvers\s*\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("119", "121", "17.4", "119"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/promise/with-resolvers";'),
        description="Promise.withResolvers() returns a promise together with its resolve and reject.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Promise/withResolvers",
        polyfill_marker="core-js/actual/promise/with-resolvers",
    ),
    FeatureDefinition(
        id="array-from-async",
        name="Array.fromAsync()",
        category="js",
        detect=RegexRule(r"\bArray\.fromAsync\s*\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("121", "115", "16.4", "121"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/array/from-async";'),
        description="Array.fromAsync() builds an array from an async iterable.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Array/fromAsync",
        polyfill_marker="core-js/actual/array/from-async",
    ),
    FeatureDefinition(
        id="set-methods",
        name="Set composition methods",
        category="js",
        detect=RegexRule(
            r"\.(?:union|intersection|difference|symmetricDifference|isSubsetOf|isSupersetOf|isDisjointFrom)\s*\("
        ),
        baseline_status=NEWLY,
        browser_min_versions=_versions("122", "127", "17", "122"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(FIX_PREPEND, 'import "core-js/actual/set";'),
        description="union(), intersection() and related methods combine Set objects.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Set/union",
        polyfill_marker="core-js/actual/set",
    ),
    FeatureDefinition(
        id="import-attributes",
        name="Import attributes (with { type })",
        category="js",
        detect=RegexRule(r"\bimport\b[^;\n]*?\bwith\s*\{\s*type\s*:"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("123", "138", "17.2", "123"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(
            FIX_MANUAL,
            "Load the resource with fetch() and parse it (e.g. await (await fetch(url)).json()), "
            "or let the bundler inline it.",
        ),
        description="Import attributes declare the type of a non-JavaScript module import.",
        doc_link=f"{MDN}/JavaScript/Reference/Statements/import/with",
    ),
    FeatureDefinition(
        id="temporal",
        name="Temporal API",
        category="js",
        detect=RegexRule(r"\bTemporal\.[A-Z]\w*"),
        baseline_status=LIMITED,
        browser_min_versions=_versions(None, "139", None, None),
        default_severity=Severity.HIGH,
        fix=FixTemplate(FIX_PREPEND, 'import { Temporal } from "@js-temporal/polyfill";'),
        description="Temporal is the modern date and time API replacing Date.",
        doc_link=f"{MDN}/JavaScript/Reference/Global_Objects/Temporal",
        flagged_browsers=frozenset({"Safari"}),
        polyfill_marker="@js-temporal/polyfill",
    ),
)


# --- CSS ---

CSS_FEATURES = (
    FeatureDefinition(
        id="css-has",
        name=":has() selector",
        category="css",
        detect=RegexRule(r":has\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("105", "121", "15.4", "105"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(
            FIX_MANUAL,
            "Guard the rule with @supports selector(:has(*)) { ... } and keep a class-based "
            "fallback toggled from JavaScript.",
        ),
        description="The :has() relational pseudo-class selects an element by its descendants.",
        doc_link=f"{MDN}/CSS/:has",
    ),
    FeatureDefinition(
        id="css-nesting",
        name="CSS nesting",
        category="css",
        detect=StructuralRule("css_nesting"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("112", "117", "16.5", "112"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Flatten nested rules or compile the stylesheet with postcss-nesting or Sass.",
        ),
        description="Style rules are nested inside other style rules.",
        doc_link=f"{MDN}/CSS/CSS_nesting",
        pinpoint=False,
    ),
    FeatureDefinition(
        id="container-queries",
        name="Container queries (@container)",
        category="css",
        detect=RegexRule(r"@container\b"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("105", "110", "16", "105"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Provide a @media-based layout first and layer the @container rules on top.",
        ),
        description="@container applies styles based on the size of a containing element.",
        doc_link=f"{MDN}/CSS/CSS_containment/Container_queries",
    ),
    FeatureDefinition(
        id="subgrid",
        name="CSS subgrid",
        category="css",
        detect=RegexRule(r"\bgrid-template-(?:columns|rows)\s*:\s*subgrid\b"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("117", "71", "16", "117"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Repeat the parent track sizes explicitly (e.g. grid-template-columns: inherit) "
            "inside @supports not (grid-template-columns: subgrid).",
        ),
        description="subgrid lets a nested grid adopt the tracks of its parent grid.",
        doc_link=f"{MDN}/CSS/CSS_grid_layout/Subgrid",
    ),
    FeatureDefinition(
        id="color-mix",
        name="color-mix()",
        category="css",
        detect=RegexRule(r"\bcolor-mix\("),
        baseline_status=NEWLY,
        browser_min_versions=_versions("111", "113", "16.2", "111"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Declare a precomputed color on the line before the color-mix() declaration "
            "so older browsers keep a fallback.",
        ),
        description="color-mix() blends two colors in a given color space.",
        doc_link=f"{MDN}/CSS/color_value/color-mix",
    ),
    FeatureDefinition(
        id="text-wrap-balance",
        name="text-wrap: balance",
        category="css",
        detect=RegexRule(r"\btext-wrap\s*:\s*balance\b"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("114", "121", "17.5", "114"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_MANUAL,
            "Safe to keep: unsupported browsers fall back to normal wrapping.",
        ),
        description="Balanced wrapping evens out line lengths in short text blocks.",
        doc_link=f"{MDN}/CSS/text-wrap",
    ),
    FeatureDefinition(
        id="viewport-units",
        name="Dynamic viewport units (dvh, svh, lvh)",
        category="css",
        detect=RegexRule(r"\b\d+(?:\.\d+)?[dsl]v[hw]\b"),
        baseline_status=NEWLY,
        browser_min_versions=_versions("108", "101", "15.4", "108"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_REPLACE,
            "Fall back to the classic viewport units (vh, vw).",
            ((r"^(\d+(?:\.\d+)?)[dsl]v([hw])$", r"\1v\2"),),
        ),
        description="Small, large and dynamic viewport units account for browser UI chrome.",
        doc_link=f"{MDN}/CSS/length#viewport-percentage_lengths",
    ),
    FeatureDefinition(
        id="css-scope",
        name="@scope at-rule",
        category="css",
        detect=RegexRule(r"@scope\b"),
        baseline_status=LIMITED,
        browser_min_versions=_versions("118", None, "17.4", "118"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(
            FIX_MANUAL,
            "Scope the rules with a parent class selector or BEM naming instead.",
        ),
        description="@scope limits selectors to a subtree of the document.",
        doc_link=f"{MDN}/CSS/@scope",
        flagged_browsers=frozenset({"Firefox"}),
    ),
    FeatureDefinition(
        id="anchor-positioning",
        name="CSS anchor positioning",
        category="css",
        detect=RegexRule(r"\banchor-name\s*:|\bposition-anchor\s*:|\banchor\("),
        baseline_status=LIMITED,
        browser_min_versions=_versions("125", None, "26", "125"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(
            FIX_MANUAL,
            "Position the element from JavaScript (e.g. Floating UI) when anchor "
            "positioning is unsupported.",
        ),
        description="Anchor positioning tethers an element to the position of another element.",
        doc_link=f"{MDN}/CSS/CSS_anchor_positioning",
        flagged_browsers=frozenset({"Firefox"}),
    ),
)


# --- HTML ---

HTML_FEATURES = (
    FeatureDefinition(
        id="dialog-element",
        name="<dialog> element",
        category="html",
        detect=RegexRule(r"<dialog\b", ignore_case=True),
        baseline_status=WIDELY,
        browser_min_versions=_versions("37", "98", "15.4", "79"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Supported by all targeted browsers. Load dialog-polyfill for older engines.",
        ),
        description="<dialog> provides native modal and non-modal dialog boxes.",
        doc_link=f"{MDN}/HTML/Element/dialog",
    ),
    FeatureDefinition(
        id="popover-attribute",
        name="popover attribute",
        category="html",
        detect=RegexRule(r"<[A-Za-z][\w-]*\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*?\spopover(?=[\s=>/])", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("114", "125", "17", "114"),
        default_severity=Severity.HIGH,
        fix=FixTemplate(
            FIX_MANUAL,
            "Load @oddbird/popover-polyfill or toggle visibility with a class when "
            "HTMLElement.prototype.togglePopover is missing.",
        ),
        description="The popover attribute turns an element into a top-layer popover.",
        doc_link=f"{MDN}/HTML/Global_attributes/popover",
    ),
    FeatureDefinition(
        id="search-element",
        name="<search> element",
        category="html",
        detect=RegexRule(r"</?search(?![\w-])", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("118", "118", "17", "118"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_REPLACE,
            'Use <div role="search"> instead of <search>.',
            (
                (r"(?i)^<search$", '<div role="search"'),
                (r"(?i)^</search$", "</div"),
            ),
        ),
        description="<search> marks up a search or filtering section.",
        doc_link=f"{MDN}/HTML/Element/search",
    ),
    FeatureDefinition(
        id="inert-attribute",
        name="inert attribute",
        category="html",
        detect=RegexRule(r"<[A-Za-z][\w-]*\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*?\sinert(?=[\s=>/])", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("102", "112", "15.5", "102"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_PREPEND,
            '<script src="https://unpkg.com/wicg-inert@3/dist/inert.min.js"></script>',
        ),
        description="inert removes a subtree from focus order and the accessibility tree.",
        doc_link=f"{MDN}/HTML/Global_attributes/inert",
        polyfill_marker="wicg-inert",
    ),
    FeatureDefinition(
        id="declarative-shadow-dom",
        name="Declarative shadow DOM",
        category="html",
        detect=RegexRule(r"<template\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*?\sshadowrootmode\b", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("111", "123", "16.4", "111"),
        default_severity=Severity.MEDIUM,
        fix=FixTemplate(
            FIX_MANUAL,
            "Attach the shadow root from script with element.attachShadow() when "
            "HTMLTemplateElement.prototype.shadowRootMode is missing.",
        ),
        description="<template shadowrootmode> creates a shadow root while parsing HTML.",
        doc_link=f"{MDN}/HTML/Element/template#shadowrootmode",
    ),
    FeatureDefinition(
        id="exclusive-accordion",
        name="Exclusive accordion (<details name>)",
        category="html",
        detect=RegexRule(r"<details\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*?\sname\s*=", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("120", "130", "17.2", "120"),
        default_severity=Severity.LOW,
        fix=FixTemplate(
            FIX_MANUAL,
            "Close sibling <details> elements from a toggle event listener.",
        ),
        description="<details> elements sharing a name open one at a time.",
        doc_link=f"{MDN}/HTML/Element/details#name",
    ),
    FeatureDefinition(
        id="loading-lazy",
        name='loading="lazy"',
        category="html",
        detect=RegexRule(r"""\bloading\s*=\s*["']?lazy\b""", ignore_case=True),
        baseline_status=WIDELY,
        browser_min_versions=_versions("77", "75", "15.4", "79"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_MANUAL, "Safe to keep: unsupported browsers load eagerly."),
        description="Native lazy loading defers offscreen images and iframes.",
        doc_link=f"{MDN}/HTML/Element/img#loading",
    ),
    FeatureDefinition(
        id="fetchpriority",
        name="fetchpriority attribute",
        category="html",
        detect=RegexRule(r"\bfetchpriority\s*=", ignore_case=True),
        baseline_status=NEWLY,
        browser_min_versions=_versions("101", "132", "17.2", "101"),
        default_severity=Severity.LOW,
        fix=FixTemplate(FIX_MANUAL, "Safe to keep: unsupported browsers ignore the hint."),
        description="fetchpriority hints the relative priority of a resource fetch.",
        doc_link=f"{MDN}/HTML/Element/img#fetchpriority",
    ),
)

FEATURES = JS_FEATURES + CSS_FEATURES + HTML_FEATURES
