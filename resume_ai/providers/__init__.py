"""Transport factory and defaults."""

from __future__ import annotations

from typing import Optional

from .base import Transport
from .classifier import classify
from .gemini import DEFAULT_API_BASE, DEFAULT_MODEL, GeminiTransport
from .mock import DEFAULT_ROUTES, MockOracle, MockRoute
from .types import FailureKind, GenerationRequest, RawResponse, TransportFailure


def create_transport(
    api_key: Optional[str],
    model: str = DEFAULT_MODEL,
    api_base: str = DEFAULT_API_BASE,
    timeout_s: float = 30.0,
) -> Optional[Transport]:
    """Live transport for *api_key*, or None when there is no credential."""
    if not api_key:
        return None
    return GeminiTransport(api_key=api_key, model=model, api_base=api_base, timeout_s=timeout_s)


__all__ = [
    "DEFAULT_ROUTES",
    "FailureKind",
    "GeminiTransport",
    "GenerationRequest",
    "MockOracle",
    "MockRoute",
    "RawResponse",
    "Transport",
    "TransportFailure",
    "classify",
    "create_transport",
]
