"""Generation façade: live transport or offline mock, never both."""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from resume_ai.config import GenerationSettings
from resume_ai.observability import GenerationObserver
from resume_ai.providers.base import Transport
from resume_ai.providers.classifier import classify
from resume_ai.providers.gemini import GeminiTransport
from resume_ai.providers.mock import MockOracle
from resume_ai.providers.types import (
    Failure,
    FailureKind,
    GenerationRequest,
    GenerationResult,
    Success,
    TransportFailure,
)


class GenerationClient:
    """Turn a prompt into text.

    With a credential configured every call is exactly one transport request
    and its classified failure is returned as-is; a live failure never falls
    back to mock output. Without a credential the mock oracle answers and the
    call always succeeds.
    """

    def __init__(
        self,
        settings: GenerationSettings,
        transport: Optional[Transport] = None,
        oracle: Optional[MockOracle] = None,
        observer: Optional[GenerationObserver] = None,
    ) -> None:
        self.settings = settings
        self.oracle = oracle or MockOracle()
        self.observer = observer or GenerationObserver()
        if transport is None and settings.live_mode:
            transport = GeminiTransport(
                api_key=settings.api_key or "",
                model=settings.model,
                api_base=settings.api_base,
                timeout_s=settings.timeout_s,
            )
        self.transport = transport

    @property
    def live_mode(self) -> bool:
        return self.settings.live_mode

    def build_request(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> GenerationRequest:
        """Apply configured defaults only where the caller omitted a value."""
        return GenerationRequest(
            prompt=prompt,
            max_tokens=self.settings.default_max_tokens if max_tokens is None else max_tokens,
            temperature=self.settings.default_temperature if temperature is None else temperature,
        )

    async def generate_text(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> GenerationResult:
        return await self.generate(self.build_request(prompt, max_tokens, temperature), timeout=timeout)

    async def generate(self, request: GenerationRequest, timeout: Optional[float] = None) -> GenerationResult:
        self.observer.log_request(request.max_tokens, request.temperature, self.live_mode)

        if not self.live_mode or self.transport is None:
            return await self._synthesize(request)

        start = time.monotonic()
        try:
            raw = await self.transport.invoke(request, timeout=timeout)
        except TransportFailure as exc:
            return self._fail(FailureKind.TRANSPORT_ERROR, str(exc), start)

        kind = classify(raw.status_code, raw.body_text, raw.has_payload)
        if kind is not None:
            detail = raw.body_text if kind is not FailureKind.EMPTY_OUTPUT else "Empty response from Gemini API"
            return self._fail(kind, detail, start, raw.status_code)

        text = raw.text or ""
        self.observer.log_response(len(text), (time.monotonic() - start) * 1000)
        return Success(text=text)

    async def _synthesize(self, request: GenerationRequest) -> GenerationResult:
        self.observer.log_mock(self.oracle.route_for(request.prompt))
        if self.settings.mock_delay_s > 0:
            await asyncio.sleep(self.settings.mock_delay_s)
        return Success(text=self.oracle.synthesize(request.prompt))

    def _fail(self, kind: FailureKind, detail: str, start: float, status_code: Optional[int] = None) -> Failure:
        self.observer.log_failure(kind.value, detail, (time.monotonic() - start) * 1000, status_code)
        return Failure(kind=kind, detail=detail, status_code=status_code)


async def generate_text(
    client: GenerationClient,
    prompt: str,
    max_tokens: Optional[int] = None,
    temperature: Optional[float] = None,
) -> str:
    """Text or ``GenerationFailedError`` for callers that want exceptions."""
    result = await client.generate_text(prompt, max_tokens=max_tokens, temperature=temperature)
    return result.unwrap()
