"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest

from resume_ai.config import API_KEY_ENV_VARS


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear credentials and overrides that can leak into tests on developer machines."""
    for key in (
        *API_KEY_ENV_VARS,
        "RESUME_AI_API_BASE",
        "RESUME_AI_MODEL",
        "RESUME_AI_TIMEOUT_S",
        "RESUME_AI_MOCK_DELAY_S",
    ):
        monkeypatch.delenv(key, raising=False)
