"""Tests for the fallback policy and elisp detection."""

import pytest

from yas_to_vscode.errors import ConversionWarning
from yas_to_vscode.validation import contains_elisp, convert_body, validate

PARSE_FAILED = ConversionWarning.SNIPPET_BODY_PARSE_FAILED
ELISP = ConversionWarning.ELISP_CODE_FOUND


class TestValidate:
    def test_literal_dollar(self):
        assert validate("cost: $5") == (["cost: $5"], [])

    def test_mirror_field(self):
        assert validate("$1 and $1") == (["$1 and $1"], [])

    def test_nested_default_stays_on_one_line(self):
        assert validate("${1:a\nb} end") == (["${1:a\nb} end"], [])

    def test_choice(self):
        lines, warnings = validate("${7:$$(yas-choose-value '(\"x\" \"y\" \"z\"))}")
        assert lines == ["${7|x,y,z|}"]
        assert warnings == []

    def test_empty_default_vs_bare_field(self):
        assert validate("${3:}") == validate("$3") == (["$3"], [])

    def test_multiple_lines(self):
        assert validate("fn ${1:name}() {\n    $0\n}") == (
            ["fn ${1:name}() {", "    $0", "}"],
            [],
        )

    def test_empty_body(self):
        assert validate("") == ([""], [])

    def test_carriage_return_before_closing_brace_is_not_dropped(self):
        body = "${1:a\r}"
        assert validate(body) == ([body], [PARSE_FAILED])

    def test_parse_failure_keeps_body_verbatim(self):
        body = "if (${1:cond) {\n    $0\n"
        assert validate(body) == ([body], [PARSE_FAILED])

    @pytest.mark.parametrize(
        "body",
        [
            "${",
            "$",
            "${1:",
            "${1:}}}",
            "{{{}}}",
            "${x:y}",
            "$$$$",
            "${1:${2:${3:",
            "a\rb",
            "${99999999999999999999999}",
            "${1:" * 300,
            "${1:" * 150 + "}" * 150,
        ],
    )
    def test_never_raises(self, body):
        lines, warnings = validate(body)
        if warnings:
            assert (lines, warnings) == ([body], [PARSE_FAILED])


class TestElispDetection:
    @pytest.mark.parametrize(
        "line",
        [
            '`(format-time-string "%Y")`',
            'year: `(format-time-string "%Y")`',
            "${1:$$(yas-choose-value '(\"a\" \"b)}",
            "$(upcase yas-text)",
            "${2:$$(capitalize yas-text)}",
        ],
    )
    def test_detected(self, line):
        assert contains_elisp([line])

    @pytest.mark.parametrize(
        "line",
        [
            "plain text",
            "cost: $5",
            "${7|x,y,z|}",
            "escaped \\`(not code)",
            "call(f) `quoted`",
        ],
    )
    def test_not_detected(self, line):
        assert not contains_elisp([line])

    def test_any_line(self):
        assert contains_elisp(["fine", "`(code)`"])
        assert not contains_elisp([])


class TestConvertBody:
    def test_clean_body(self):
        converted = convert_body("fn ${1:name}()")
        assert converted.result == ["fn ${1:name}()"]
        assert converted.warnings == []
        assert converted.ok

    def test_elisp_is_flagged_but_kept(self):
        converted = convert_body('// `(buffer-name)`\n$0')
        assert converted.result == ["// `(buffer-name)`", "$0"]
        assert converted.warnings == [ELISP]

    def test_both_warnings(self):
        body = "${1:$(upcase yas-text)"
        converted = convert_body(body)
        assert converted.result == [body]
        assert converted.warnings == [PARSE_FAILED, ELISP]

    def test_mirror_transform_is_flagged(self):
        converted = convert_body("${1:name} ${1:$(upcase yas-text)}")
        assert ELISP in converted.warnings
        assert PARSE_FAILED not in converted.warnings
