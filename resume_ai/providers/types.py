"""Provider-agnostic request, result and failure types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.7


class FailureKind(Enum):
    """Closed set of classified generation failures."""

    QUOTA_EXCEEDED = "quota_exceeded"
    EMPTY_OUTPUT = "empty_output"
    TRANSPORT_ERROR = "transport_error"
    UPSTREAM_ERROR = "upstream_error"

    @property
    def retryable(self) -> bool:
        # Every kind may be retried by the caller; upstream errors only with caution.
        return self is not FailureKind.UPSTREAM_ERROR


@dataclass(frozen=True)
class GenerationRequest:
    """A single text-generation call."""

    prompt: str
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def __post_init__(self) -> None:
        if not isinstance(self.prompt, str):
            raise ValueError("prompt must be a string")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be a positive integer, got {self.max_tokens!r}")
        if isinstance(self.temperature, bool) or not isinstance(self.temperature, (int, float)):
            raise ValueError(f"temperature must be a number, got {self.temperature!r}")
        if self.temperature < 0 or self.temperature > 2:
            raise ValueError(f"temperature must be between 0 and 2, got {self.temperature}")


class GenerationFailedError(Exception):
    """Raised by callers that prefer exceptions over result values."""

    def __init__(self, failure: "Failure"):
        super().__init__(f"{failure.kind.value}: {failure.detail}")
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


@dataclass(frozen=True)
class Success:
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Success requires non-empty text")

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.text


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str = ""
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    def raise_error(self) -> None:
        raise GenerationFailedError(self)

    def unwrap(self) -> str:
        raise GenerationFailedError(self)


GenerationResult = Union[Success, Failure]


class TransportFailure(Exception):
    """No response arrived: connection error or the deadline expired.

    A response whose body is not a readable envelope is still a ``RawResponse``
    (without text) and classifies from its status code.
    """


@dataclass(frozen=True)
class RawResponse:
    """What the transport saw on the wire for one request."""

    status_code: int
    body_text: str
    text: Optional[str] = None

    @property
    def has_payload(self) -> bool:
        return bool(self.text)
