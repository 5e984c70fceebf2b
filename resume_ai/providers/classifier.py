"""Map transport outcomes onto the failure taxonomy."""

from __future__ import annotations

from typing import Optional

from .types import FailureKind

QUOTA_STATUS = 429


def classify(status_code: Optional[int], body_text: str = "", has_payload: bool = False) -> Optional[FailureKind]:
    """Classify a transport outcome.

    Args:
        status_code: HTTP status, or None when no response arrived at all.
        body_text: Raw response body. Never inspected for classification.
        has_payload: Whether a 2xx envelope carried generated text.

    Returns:
        The failure kind, or None for a 2xx response with a payload.
    """
    if status_code is None:
        return FailureKind.TRANSPORT_ERROR
    if status_code == QUOTA_STATUS:
        return FailureKind.QUOTA_EXCEEDED
    if 200 <= status_code <= 299:
        return None if has_payload else FailureKind.EMPTY_OUTPUT
    # 1xx/3xx are not expected from the endpoint once redirects are followed
    return FailureKind.UPSTREAM_ERROR
