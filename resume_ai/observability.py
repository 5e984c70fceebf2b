"""Logging for generation calls."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER_NAME = "resume_ai"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure logging format and handlers on the package logger."""
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.WARNING)
    return root


class GenerationObserver:
    """
    Structured log entries for generation calls.

    Every entry carries its fields under ``record.context``. Prompt text is
    never logged.
    """

    def __init__(self, name: str = "resume_ai.generation"):
        self.logger = logging.getLogger(name)

    def _emit(self, level: int, message: str, context: Dict[str, Any]) -> None:
        self.logger.log(level, "%s %s", message, context, extra={"context": context})

    def log_request(self, max_tokens: int, temperature: float, has_api_key: bool):
        """
        Log the start of a generation call.

        Args:
            max_tokens: Output token budget passed to the backend
            temperature: Sampling temperature passed to the backend
            has_api_key: Whether a live credential is configured
        """
        self._emit(
            logging.INFO,
            "AI text generation initiated",
            {"max_tokens": max_tokens, "temperature": temperature, "has_api_key": has_api_key},
        )

    def log_response(self, length: int, duration_ms: float):
        self._emit(
            logging.INFO,
            "AI response received",
            {"length": length, "duration_ms": round(duration_ms, 2)},
        )

    def log_failure(self, kind: str, detail: str, duration_ms: float, status_code: Optional[int] = None):
        self._emit(
            logging.ERROR,
            "AI generation failed",
            {
                "kind": kind,
                "status": status_code,
                "detail": detail[:200],
                "duration_ms": round(duration_ms, 2),
            },
        )

    def log_mock(self, route: str):
        self._emit(logging.WARNING, "No API key found, using mock responses", {"route": route})
