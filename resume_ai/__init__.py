"""Resume AI - resilient generation client for resume content."""

from .config import GenerationSettings, load_settings
from .core.extraction import ExtractionOutcome, extract_structured, safe_json
from .core.generation import GenerationClient, generate_text
from .providers.types import (
    Failure,
    FailureKind,
    GenerationFailedError,
    GenerationRequest,
    GenerationResult,
    Success,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationSettings",
    "load_settings",
    "GenerationClient",
    "generate_text",
    "extract_structured",
    "safe_json",
    "ExtractionOutcome",
    "GenerationRequest",
    "GenerationResult",
    "Success",
    "Failure",
    "FailureKind",
    "GenerationFailedError",
]
