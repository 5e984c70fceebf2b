"""Tests for JSON recovery from model output."""

import json

import pytest

from resume_ai.core.extraction import (
    ExtractionOutcome,
    balanced_span,
    clean_fences,
    extract_structured,
    safe_json,
)

FALLBACK = {"fallback": True}


class TestCleanFences:
    def test_strips_json_fence_and_whitespace(self):
        assert clean_fences('  ```json\n{"a": 1}\n```  ') == '{"a": 1}'

    def test_strips_bare_fence(self):
        assert clean_fences('```\n[1, 2]\n```') == "[1, 2]"

    def test_missing_closing_fence(self):
        assert clean_fences('```json\n{"a": 1}') == '{"a": 1}'


class TestBalancedSpan:
    def test_first_complete_object(self):
        text = 'prefix {"a": {"b": 1}} suffix {"c": 2}'
        start, end = balanced_span(text, "{", "}")
        assert text[start:end] == '{"a": {"b": 1}}'

    def test_ignores_braces_inside_strings(self):
        text = '{"a": "}{"} trailing }'
        start, end = balanced_span(text, "{", "}")
        assert text[start:end] == '{"a": "}{"}'

    def test_handles_escaped_quotes(self):
        text = r'{"a": "say \"}\" ok"} tail'
        start, end = balanced_span(text, "{", "}")
        assert json.loads(text[start:end]) == {"a": 'say "}" ok'}

    def test_unclosed_span_returns_none(self):
        assert balanced_span('{"a": {"b": 1}', "{", "}") is None

    def test_no_open_char(self):
        assert balanced_span("no json here", "[", "]") is None


class TestExtractStructured:
    def test_fenced_object_with_trailing_sentence(self):
        text = '```json\n{"a":1,"b":[1,2,3]}\n``` trailing sentence.'
        outcome = extract_structured(text, FALLBACK)
        assert outcome.recovered is True
        assert outcome.value == {"a": 1, "b": [1, 2, 3]}

    def test_object_wrapped_in_prose(self):
        text = 'Sure! Here is the result: {"score": 85, "tips": ["x"]} Let me know {if} you need more.'
        assert extract_structured(text, FALLBACK).value == {"score": 85, "tips": ["x"]}

    def test_array_of_objects_is_recovered_whole(self):
        jobs = [{"title": "Engineer", "keywords": ["Python"]}, {"title": "Lead", "keywords": []}]
        text = f"Here are some roles:\n{json.dumps(jobs)}\nGood luck!"
        outcome = extract_structured(text, [])
        assert outcome.value == jobs
        assert outcome.strategy == "balanced_array"

    def test_plain_array(self):
        assert extract_structured('["React", "Node.js"]', []).value == ["React", "Node.js"]

    def test_object_preferred_over_earlier_disjoint_array(self):
        text = 'See note [1]. Result: {"a": 1}'
        outcome = extract_structured(text, FALLBACK)
        assert outcome.value == {"a": 1}
        assert outcome.strategy == "balanced_object"

    def test_skips_unparseable_span_and_uses_next(self):
        text = 'Use {placeholders} like this: {"name": "Jane"}'
        assert extract_structured(text, FALLBACK).value == {"name": "Jane"}

    def test_truncated_object_without_complete_inner_value_returns_fallback(self):
        text = '{"items": [{"name": "GC'
        outcome = extract_structured(text, FALLBACK)
        assert outcome == ExtractionOutcome(value=FALLBACK, recovered=False)

    def test_truncated_outer_value_yields_first_complete_inner_value(self):
        text = '{"items": [{"name": "AWS"}, {"name": "GC'
        outcome = extract_structured(text, FALLBACK)
        assert outcome.value == {"name": "AWS"}
        assert outcome.strategy == "balanced_object"

    def test_unclosed_brace_in_leading_prose_is_skipped(self):
        outcome = extract_structured('Fill the {placeholder before: {"a": 1}', FALLBACK)
        assert outcome.recovered is True
        assert outcome.value == {"a": 1}

    def test_unclosed_bracket_in_leading_prose_is_skipped(self):
        assert extract_structured('Options [see below: ["a", "b"]', []).value == ["a", "b"]

    def test_array_of_objects_after_bracketed_aside(self):
        text = 'Top roles [ranked]: [{"title": "A"}, {"title": "B"}]'
        outcome = extract_structured(text, [])
        assert outcome.value == [{"title": "A"}, {"title": "B"}]
        assert outcome.strategy == "balanced_array"

    def test_array_of_objects_after_unparseable_object(self):
        text = 'Use {x} here: [{"a": 1}, {"a": 2}]'
        assert extract_structured(text, []).value == [{"a": 1}, {"a": 2}]

    def test_fenced_markdown_inside_string_value_survives(self):
        value = {"md": "```python\nprint(1)\n```"}
        for text in (json.dumps(value), f"```json\n{json.dumps(value)}\n```"):
            outcome = extract_structured(text, FALLBACK)
            assert outcome.recovered is True
            assert outcome.value == value

    def test_array_recovered_when_later_object_truncated(self):
        text = 'result: ["a", "b"] and then {"broken": '
        outcome = extract_structured(text, FALLBACK)
        assert outcome.value == ["a", "b"]

    @pytest.mark.parametrize("text", ["", "   ", "plain prose only", "{not json}", "[1, 2", "}{"])
    def test_malformed_returns_fallback(self, text):
        outcome = extract_structured(text, FALLBACK)
        assert outcome.recovered is False
        assert outcome.value is FALLBACK

    @pytest.mark.parametrize("text", [None, 42, b'{"a": 1}'])
    def test_non_string_input_returns_fallback(self, text):
        assert extract_structured(text, FALLBACK).recovered is False

    def test_raw_scalar_parse(self):
        outcome = extract_structured("  42  ", FALLBACK)
        assert outcome.value == 42
        assert outcome.strategy == "raw"

    def test_validate_rejects_shape(self):
        outcome = extract_structured('{"a": 1}', [], validate=lambda v: isinstance(v, list))
        assert outcome.recovered is False
        assert outcome.value == []

    def test_deep_nesting_never_raises(self):
        text = "[" * 5000 + "]" * 5000
        outcome = extract_structured(text, FALLBACK)
        assert isinstance(outcome, ExtractionOutcome)

    def test_idempotent(self):
        text = 'noise {"a": [1, {"b": null}]} more noise'
        assert extract_structured(text, FALLBACK) == extract_structured(text, FALLBACK)

    @pytest.mark.parametrize(
        "value",
        [
            {"a": 1, "nested": {"list": [1, 2, {"x": "y"}]}},
            [1, "two", {"three": 3}],
            {"text": "braces } and { inside", "quote": "\"q\""},
            {"md": "```python\nprint(1)\n```", "tail": "```"},
            [],
            {},
        ],
    )
    @pytest.mark.parametrize("prefix,suffix", [("", ""), ("Output:\n", "\nThanks."), ("```json\n", "\n```")])
    def test_embedded_value_round_trips(self, value, prefix, suffix):
        recovered = extract_structured(f"{prefix}{json.dumps(value)}{suffix}", FALLBACK).value
        assert recovered == value
        assert extract_structured(json.dumps(recovered), FALLBACK).value == value

    def test_logs_warning_on_fallback(self, caplog):
        caplog.set_level("WARNING", logger="resume_ai.core.extraction")
        extract_structured("nothing to see", FALLBACK)
        assert any("fell back" in r.getMessage() for r in caplog.records)


def test_safe_json_shorthand():
    assert safe_json('x {"a": 1} y') == {"a": 1}
    assert safe_json("nope") is None
    assert safe_json("nope", []) == []
