"""Transport protocol definition."""

from __future__ import annotations

from typing import Optional, Protocol

from .types import GenerationRequest, RawResponse


class Transport(Protocol):
    """One outbound request per call; no retry."""

    async def invoke(self, request: GenerationRequest, timeout: Optional[float] = None) -> RawResponse: ...
