import unittest

import pytest

from baseline_checker.catalog import FIX_MANUAL, FeatureCatalog, FeatureDefinition, FixTemplate, RegexRule
from baseline_checker.errors import AnalysisError, InvalidLanguageError
from baseline_checker.issue import BaselineStatus, Severity
from baseline_checker.main_checker import BaselineChecker, analyze
from baseline_checker.utils import TRACKED_BROWSERS

SAMPLES = {
    "javascript": (
        "import cfg from './config.json' with { type: 'json' };\n"
        "const byType = Object.groupBy(items, (i) => i.type);\n"
        "const sorted = items.toSorted();\n"
        "const { promise, resolve } = Promise.withResolvers();\n"
        "const now = Temporal.Now.instant();\n"
    ),
    "typescript": (
        "class Store<T> {\n"
        "  #items: T[] = [];\n"
        "  latest(): T | undefined { return this.#items.toReversed()[0]; }\n"
        "}\n"
        "const data = await fetch('/api');\n"
    ),
    "css": (
        ".card:has(img) { color: color-mix(in srgb, red, blue); }\n"
        ".card { .title { text-wrap: balance; } }\n"
        "@container (min-width: 30em) { .hero { height: 100dvh; } }\n"
        "@scope (.menu) { a { color: red; } }\n"
    ),
    "html": (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<body>\n"
        "  <search><input></search>\n"
        "  <div popover>tip</div>\n"
        "  <style>.x:has(p) { height: 50svh; }</style>\n"
        "  <script>structuredClone(x); Object.groupBy(a, f);</script>\n"
        "</body>\n"
        "</html>\n"
    ),
}


class TestAnalyzeProperties(unittest.TestCase):
    def setUp(self):
        self.checker = BaselineChecker()

    def test_score_bounds_and_determinism(self):
        for language, code in SAMPLES.items():
            with self.subTest(language=language):
                first = self.checker.analyze(code, language)
                second = self.checker.analyze(code, language)
                self.assertEqual(first.to_dict(), second.to_dict())
                self.assertGreaterEqual(first.score, 0)
                self.assertLessEqual(first.score, 100)
                self.assertTrue(first.issues)

    def test_issue_names_unique_and_browsers_tracked(self):
        for language, code in SAMPLES.items():
            with self.subTest(language=language):
                result = self.checker.analyze(code + code, language)
                names = [i.feature_name for i in result.issues]
                self.assertEqual(len(names), len(set(names)))
                for issue in result.issues:
                    for entry in issue.browsers_unsupported:
                        self.assertIn(entry.name, TRACKED_BROWSERS)

    def test_issues_sorted_by_severity(self):
        for language, code in SAMPLES.items():
            with self.subTest(language=language):
                ranks = [i.severity.rank for i in self.checker.analyze(code, language).issues]
                self.assertEqual(ranks, sorted(ranks))

    def test_adding_high_severity_feature_lowers_score(self):
        base = "const sorted = items.toSorted();\n"
        worse = base + "const grouped = Object.groupBy(items, f);\n"
        self.assertLess(
            self.checker.analyze(worse, "javascript").score,
            self.checker.analyze(base, "javascript").score,
        )

    def test_fixing_is_idempotent(self):
        for language, code in SAMPLES.items():
            with self.subTest(language=language):
                fixed = self.checker.analyze(code, language).fixed_code
                self.assertIsNotNone(fixed)
                again = self.checker.analyze(fixed, language)
                self.assertIsNone(again.fixed_code)


def test_nullish_coalescing_scores_100():
    result = analyze("a ?? b", "javascript")
    assert result.score == 100
    assert result.issues == ()
    assert result.fixed_code is None
    assert result.to_dict() == {"score": 100, "summary": result.summary, "issues": []}


@pytest.mark.parametrize("code", ["", "   \n\t  "])
def test_empty_input_scores_100(code):
    result = analyze(code, "css")
    assert result.score == 100
    assert result.issues == ()
    assert "fixedCode" not in result.to_dict()


def test_three_high_severity_features_score_55():
    code = (
        "import cfg from './config.json' with { type: 'json' };\n"
        "const groups = Object.groupBy(items, f);\n"
        "const now = Temporal.Now.instant();\n"
    )
    result = analyze(code, "javascript")
    assert [i.severity for i in result.issues] == [Severity.HIGH] * 3
    assert result.score == 55
    assert result.summary.startswith("Found 3 compatibility issues (3 high, 0 medium, 0 low severity). Grade F")


def test_css_feature_missing_in_safari():
    catalog = FeatureCatalog([
        FeatureDefinition(
            id="demo-prop",
            name="demo-prop",
            category="css",
            detect=RegexRule(r"\bdemo-prop\s*:"),
            baseline_status=BaselineStatus.LIMITED_AVAILABILITY,
            browser_min_versions={"Chrome": "100", "Firefox": "100", "Safari": None, "Edge": "100"},
            default_severity=Severity.MEDIUM,
            fix=FixTemplate(FIX_MANUAL, "Use a fallback."),
        )
    ])
    result = BaselineChecker(catalog).analyze(".a {\n  demo-prop: 1;\n}\n", "css")
    issue = result.to_dict()["issues"][0]
    assert issue["lineNumber"] == 2
    assert issue["browsersUnsupported"] == [
        {"name": "Safari", "version": "15.6", "supportStatus": "unsupported"},
    ]


def test_wire_shape(checker):
    result = checker.analyze("const g = Object.groupBy(a, f);\n", "javascript")
    issue = result.to_dict()["issues"][0]
    assert set(issue) == {
        "featureName", "description", "severity", "baselineStatus",
        "browsersUnsupported", "suggestedFix", "lineNumber", "mdnLink",
    }
    assert issue["severity"] == "high"
    assert issue["baselineStatus"] == "newly_available"
    assert result.to_dict()["fixedCode"].startswith('import "core-js/actual/object/group-by";')


@pytest.mark.parametrize("language", ["python", "", "JS"])
def test_invalid_language(checker, language):
    with pytest.raises(InvalidLanguageError):
        checker.analyze("a ?? b", language)


def test_language_is_case_insensitive(checker):
    assert checker.analyze(".a:has(b) {}", " CSS ").issues


def test_non_string_code_rejected(checker):
    with pytest.raises(AnalysisError):
        checker.analyze(None, "javascript")


def test_fix_can_be_disabled(checker):
    result = checker.analyze("items.toSorted();", "javascript", fix=False)
    assert result.issues
    assert result.fixed_code is None


def test_scan_is_lazy(checker):
    occurrences = checker.scan("Object.groupBy(a, f);", "typescript")
    assert next(occurrences).feature_id == "object-group-by"


@pytest.mark.parametrize("code, language", [
    (".a { height: 10dvh; min-height: 110dvh; }\n", "css"),
    ("const x = a.toSorted(f), y = b.a.toSorted(g);\n", "javascript"),
])
def test_overlapping_tokens_fix_cleanly(code, language):
    fixed = analyze(code, language).fixed_code
    again = analyze(fixed, language)
    assert again.issues == ()
    assert again.fixed_code is None
