"""Caller-side retry with exponential backoff for generation results.

The generation client performs a single attempt per call; callers that want
retries wrap it here.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from resume_ai.providers.types import Failure, FailureKind, GenerationResult

logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""
    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 60.0
    exponential_base: float = 2.0
    jitter_factor: float = 0.2  # ±20% random variation
    retry_upstream: bool = False


def backoff_delay(attempt: int, config: RetryConfig) -> float:
    """Delay before retry number *attempt* (0-based), jitter included."""
    base_delay = min(
        config.base_delay * (config.exponential_base ** attempt),
        config.max_delay,
    )
    jitter = base_delay * config.jitter_factor * (2 * random.random() - 1)
    return max(0.0, base_delay + jitter)


def should_retry(failure: Failure, config: RetryConfig, empty_retries: int) -> bool:
    if failure.kind is FailureKind.EMPTY_OUTPUT:
        # Safe to retry once.
        return empty_retries < 1
    if failure.kind is FailureKind.UPSTREAM_ERROR:
        return config.retry_upstream
    return failure.kind.retryable


async def retry_generation(
    call: Callable[[], Awaitable[GenerationResult]],
    config: Optional[RetryConfig] = None,
) -> GenerationResult:
    """
    Re-invoke *call* while it returns a retryable failure.

    Args:
        call: Zero-argument coroutine factory, e.g. ``lambda: client.generate(req)``
        config: Retry configuration

    Returns:
        The first success, or the last failure once attempts run out
    """
    config = config or RetryConfig()
    empty_retries = 0
    result: GenerationResult = await call()

    for attempt in range(1, config.max_attempts):
        if result.ok:
            if attempt > 1:
                logger.info(f"Retry succeeded on attempt {attempt}")
            return result

        # result.ok is False only on Failure
        failure: Failure = result  # type: ignore[assignment]
        if not should_retry(failure, config, empty_retries):
            logger.error(f"Not retrying {failure.kind.value} failure")
            return result
        if failure.kind is FailureKind.EMPTY_OUTPUT:
            empty_retries += 1

        delay = backoff_delay(attempt - 1, config)
        logger.warning(
            f"Attempt {attempt}/{config.max_attempts} failed: {failure.kind.value}. "
            f"Retrying in {delay:.2f}s..."
        )
        await asyncio.sleep(delay)
        result = await call()

    if not result.ok:
        logger.error(f"All {config.max_attempts} retry attempts failed")
    return result
