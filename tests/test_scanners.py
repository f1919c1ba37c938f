from baseline_checker.scanners import MarkupScanner, ScriptScanner, StyleScanner
from baseline_checker.utils import LineIndex, keep_spans, mask_comments


def _found(occurrences):
    return [(o.feature_id, o.line_number) for o in occurrences]


def test_script_scanner_reports_document_lines(catalog):
    code = "const a = 1;\nconst groups = Object.groupBy(items, fn);\nconst last = list.findLast(x => x);\n"
    found = _found(ScriptScanner(catalog).scan(code))
    assert ("object-group-by", 2) in found
    assert ("array-find-last", 3) in found


def test_script_scanner_reports_every_match(catalog):
    code = "a.toSorted();\nb.toSorted();\n"
    found = _found(ScriptScanner(catalog).scan(code))
    assert found.count(("array-to-sorted", 1)) == 1
    assert found.count(("array-to-sorted", 2)) == 1


def test_script_scanner_ignores_comments_and_strings(catalog):
    code = (
        "// Object.groupBy(items)\n"
        "/* structuredClone(value)\n"
        "   Temporal.Now */\n"
        "const msg = 'call Object.groupBy(x) later';\n"
        "const url = \"http://example.org\"; structuredClone(v);\n"
    )
    found = _found(ScriptScanner(catalog).scan(code))
    assert found == [("structured-clone", 5)]


def test_empty_input_yields_nothing(catalog):
    for scanner in (ScriptScanner(catalog), StyleScanner(catalog), MarkupScanner(catalog)):
        assert list(scanner.scan("")) == []
        assert list(scanner.scan("  \n\t\n")) == []


def test_polyfilled_feature_is_not_reported(catalog):
    code = 'import "core-js/actual/object/group-by";\nObject.groupBy(items, fn);\n'
    assert _found(ScriptScanner(catalog).scan(code)) == []


def test_polyfill_marker_in_comment_does_not_count(catalog):
    code = '// import "core-js/actual/object/group-by";\nObject.groupBy(items, fn);\n'
    assert _found(ScriptScanner(catalog).scan(code)) == [("object-group-by", 2)]


def test_style_scanner(catalog):
    code = (
        ".card:has(img) { color: red; }\n"
        "/* @container sidebar (min-width: 400px) */\n"
        ".hero { height: 100dvh; }\n"
    )
    found = _found(StyleScanner(catalog).scan(code))
    assert ("css-has", 1) in found
    assert ("viewport-units", 3) in found
    assert not any(f == "container-queries" for f, _ in found)


def test_markup_scanner_scans_embedded_blocks(catalog):
    code = (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        "<style>\n"
        "  .menu:has(> li) { display: block; }\n"
        "</style>\n"
        "</head>\n"
        "<body>\n"
        "  <div popover id=\"tip\">Hi</div>\n"
        "  <script>\n"
        "    const g = Object.groupBy(items, fn);\n"
        "  </script>\n"
        "</body>\n"
        "</html>\n"
    )
    found = _found(MarkupScanner(catalog).scan(code))
    assert ("css-has", 5) in found
    assert ("popover-attribute", 9) in found
    assert ("object-group-by", 11) in found


def test_markup_scanner_skips_non_js_scripts_and_comments(catalog):
    code = (
        "<script type=\"application/json\">{\"x\": \"Object.groupBy(\"}</script>\n"
        "<!-- <search>old</search> -->\n"
        "<script type=\"module\">Temporal.Now.instant();</script>\n"
    )
    found = _found(MarkupScanner(catalog).scan(code))
    assert found == [("temporal", 3)]


def test_markup_rules_do_not_match_inside_script(catalog):
    code = "<script>\n  const html = `<dialog open>`;\n</script>\n"
    found = _found(MarkupScanner(catalog).scan(code))
    assert not any(f == "dialog-element" for f, _ in found)


def test_search_element_pattern(catalog):
    found = _found(MarkupScanner(catalog).scan("<search-box></search-box>\n<search>\n</search>\n"))
    assert found == [("search-element", 2), ("search-element", 3)]


def test_mask_comments_keeps_offsets():
    code = "a /* b\nc */ d // e\nf"
    masked = mask_comments(code, "js")
    assert len(masked) == len(code)
    assert masked.count("\n") == code.count("\n")
    assert masked.split() == ["a", "d", "f"]
    assert mask_comments("a // b", "css") == "a // b"
    assert mask_comments("<p><!-- x --></p>", "html") == "<p>" + " " * 10 + "</p>"


def test_line_index_and_keep_spans():
    text = "one\ntwo\nthree"
    index = LineIndex(text)
    assert index.line_of(0) == 1
    assert index.line_of(4) == 2
    assert index.line_of(len(text) - 1) == 3
    assert index.line_start(3) == 8
    assert keep_spans(text, [(4, 7)]) == "   \ntwo\n     "


def test_markup_attributes_inside_quoted_values_are_ignored(catalog):
    code = (
        "<input placeholder=\"open popover\" title='inert text'>\n"
        "<button data-x=\"a>b\" popovertarget=\"tip\">Open</button>\n"
        "<div class=\"card\" inert>x</div>\n"
    )
    found = _found(MarkupScanner(catalog).scan(code))
    assert ("inert-attribute", 3) in found
    assert not any(line == 1 for _, line in found)
    assert not any(f == "popover-attribute" for f, _ in found)
