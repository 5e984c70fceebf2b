"""Recover a JSON value from model output.

Model output is often almost valid: wrapped in a fenced code block or prose,
followed by trailing text, or truncated after the complete value. Attempts
run in order and the first successful parse wins:

1. strip code fences and surrounding whitespace
2. balanced ``{...}`` spans, first one first
3. balanced ``[...]`` spans
4. non-greedy ``[...]`` then ``{...}`` regex matches, each guarded
5. the whole cleaned string

Fences are only stripped at the very start and end, so fenced blocks inside
string values survive. An opening delimiter that never closes is skipped and
the scan resumes after it. An array span that encloses an object span is the
outer value and is tried before that object. If every attempt fails the
caller's fallback is returned. Nothing here raises.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Span = Tuple[int, int]

_FENCE_OPEN = re.compile(r"\A```(?:json|JSON)?[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"```\s*$")
_ARRAY_LAZY = re.compile(r"\[[\s\S]*?\]")
_OBJECT_LAZY = re.compile(r"\{[\s\S]*?\}")

# Scan attempts per delimiter, unclosed openers included.
MAX_SPANS = 16


@dataclass(frozen=True)
class ExtractionOutcome(Generic[T]):
    value: T
    recovered: bool
    strategy: Optional[str] = None


def clean_fences(text: str) -> str:
    cleaned = text.strip()
    cleaned = _FENCE_OPEN.sub("", cleaned)
    cleaned = _FENCE_CLOSE.sub("", cleaned)
    return cleaned.strip()


def balanced_span(text: str, open_char: str, close_char: str, start_at: int = 0) -> Optional[Span]:
    """Return ``(start, end)`` of the first complete span at or after *start_at*.

    Depth counts delimiter characters outside JSON string literals; text after
    the span closes is never examined. Returns None when the first span never
    closes.
    """
    start = text.find(open_char, start_at)
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == open_char:
            depth += 1
        elif ch == close_char:
            depth -= 1
            if depth == 0:
                return start, i + 1
    return None


def _spans(text: str, open_char: str, close_char: str) -> Iterator[Span]:
    """Disjoint balanced spans in order of appearance."""
    pos = 0
    for _ in range(MAX_SPANS):
        start = text.find(open_char, pos)
        if start == -1:
            return
        span = balanced_span(text, open_char, close_char, start)
        if span is None:
            pos = start + 1
            continue
        yield span
        pos = span[1]


def _attempts(cleaned: str) -> Iterator[Tuple[str, str]]:
    object_spans = list(_spans(cleaned, "{", "}"))
    array_spans = list(_spans(cleaned, "[", "]"))

    for obj_start, obj_end in object_spans:
        for start, end in array_spans:
            if start < obj_start and end >= obj_end:
                yield "balanced_array", cleaned[start:end]
        yield "balanced_object", cleaned[obj_start:obj_end]
    for start, end in array_spans:
        yield "balanced_array", cleaned[start:end]

    array_match = _ARRAY_LAZY.search(cleaned)
    if array_match:
        yield "lazy_array", array_match.group(0)
    object_match = _OBJECT_LAZY.search(cleaned)
    if object_match:
        yield "lazy_object", object_match.group(0)

    yield "raw", cleaned


def extract_structured(
    text: Any,
    fallback: T,
    validate: Optional[Callable[[Any], bool]] = None,
) -> ExtractionOutcome[Any]:
    """Recover the first JSON object or array embedded in *text*.

    Args:
        text: Raw model output. Non-strings yield the fallback.
        fallback: Value returned when nothing parses.
        validate: Optional shape check; a parsed value it rejects counts as
            a failed attempt and extraction moves on.

    Returns:
        ExtractionOutcome with ``recovered`` True when a value was parsed.
    """
    if not isinstance(text, str) or not text.strip():
        return ExtractionOutcome(value=fallback, recovered=False)

    cleaned = clean_fences(text)
    seen = set()
    for strategy, candidate in _attempts(cleaned):
        if candidate in seen:
            continue
        seen.add(candidate)
        try:
            value = json.loads(candidate)
        except (ValueError, RecursionError):
            continue
        if validate is not None and not validate(value):
            continue
        return ExtractionOutcome(value=value, recovered=True, strategy=strategy)

    logger.warning("JSON extraction fell back to default; input starts with %r", text[:200])
    return ExtractionOutcome(value=fallback, recovered=False)


def safe_json(text: Any, fallback: T = None) -> Any:
    """Shorthand returning only the recovered value or *fallback*."""
    return extract_structured(text, fallback).value
