"""Generation façade and structured extraction."""

from .extraction import ExtractionOutcome, balanced_span, clean_fences, extract_structured, safe_json
from .generation import GenerationClient, generate_text

__all__ = [
    "ExtractionOutcome",
    "GenerationClient",
    "balanced_span",
    "clean_fences",
    "extract_structured",
    "generate_text",
    "safe_json",
]
