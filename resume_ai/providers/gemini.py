"""Gemini transport over plain HTTPS."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .contracts import GenerateContentRequest, GenerateContentResponse
from .types import GenerationRequest, RawResponse, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_TIMEOUT_S = 30.0


class GeminiTransport:
    """Issue one generateContent POST per call.

    Non-2xx statuses are returned as a ``RawResponse`` for the classifier;
    only the absence of any response raises ``TransportFailure``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_base: str = DEFAULT_API_BASE,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.model = model
        self.api_base = (api_base or DEFAULT_API_BASE).rstrip("/")
        self.timeout_s = timeout_s
        self._api_key = api_key
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def invoke(self, request: GenerationRequest, timeout: Optional[float] = None) -> RawResponse:
        payload = GenerateContentRequest.from_prompt(
            request.prompt,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        ).model_dump(exclude_none=True)
        deadline = timeout if timeout is not None else self.timeout_s

        # httpx applies the timeout per phase; wait_for bounds the whole exchange.
        try:
            if self._client is not None:
                response = await asyncio.wait_for(self._post(self._client, payload, deadline), deadline)
            else:
                async with httpx.AsyncClient() as client:
                    response = await asyncio.wait_for(self._post(client, payload, deadline), deadline)
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise TransportFailure(f"timed out after {deadline}s") from exc
        except httpx.HTTPError as exc:
            raise TransportFailure(f"{type(exc).__name__}: {exc}") from exc

        body = response.text
        if not response.is_success:
            return RawResponse(status_code=response.status_code, body_text=body)

        try:
            envelope = GenerateContentResponse.model_validate_json(body)
        except ValidationError as exc:
            # A 2xx body that is not an envelope at all carries no payload.
            logger.debug("Unparseable response envelope: %s", exc)
            return RawResponse(status_code=response.status_code, body_text=body)

        return RawResponse(
            status_code=response.status_code,
            body_text=body,
            text=envelope.first_text() or None,
        )

    async def _post(self, client: httpx.AsyncClient, payload: dict, deadline: float) -> httpx.Response:
        return await client.post(
            self.url,
            params={"key": self._api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=deadline,
        )
