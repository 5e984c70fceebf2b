"""Configuration validator for startup checks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlparse

from resume_ai.config import expand_placeholder, resolve_api_key


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML
        environ: Environment to resolve credentials against (defaults to os.environ)

    Returns:
        List of ConfigError (empty = valid)
    """
    env = os.environ if environ is None else environ
    errors: List[ConfigError] = []

    # --- API Key ---
    api_key = resolve_api_key(env) or expand_placeholder(raw_config.get("api_key"), env)
    if not api_key:
        errors.append(ConfigError(
            field="api_key",
            message="No API key found (GOOGLE_AI_API_KEY / GEMINI_API_KEY / GOOGLE_GEMINI_API_KEY); "
                    "running with mock responses",
            severity=Severity.WARNING,
        ))

    # --- API base ---
    api_base = raw_config.get("api_base")
    if api_base:
        parsed = urlparse(str(api_base))
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(ConfigError(
                field="api_base",
                message=f"api_base must be an http(s) URL, got {api_base!r}",
                severity=Severity.ERROR,
            ))

    # --- Model ---
    model = raw_config.get("model", "gemini-2.0-flash-exp")
    if not model or not isinstance(model, str):
        errors.append(ConfigError(
            field="model",
            message="model must be a non-empty string",
            severity=Severity.ERROR,
        ))

    # --- Temperature ---
    temperature = raw_config.get("temperature", 0.7)
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)) or temperature < 0 or temperature > 2:
        errors.append(ConfigError(
            field="temperature",
            message=f"temperature must be a number between 0 and 2, got {temperature}",
            severity=Severity.ERROR,
        ))

    # --- Max tokens ---
    max_tokens = raw_config.get("max_tokens", 2000)
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
        errors.append(ConfigError(
            field="max_tokens",
            message=f"max_tokens must be a positive integer, got {max_tokens}",
            severity=Severity.ERROR,
        ))

    # --- Timeout ---
    timeout_s = raw_config.get("timeout_s", 30.0)
    if isinstance(timeout_s, bool) or not isinstance(timeout_s, (int, float)) or timeout_s <= 0:
        errors.append(ConfigError(
            field="timeout_s",
            message=f"timeout_s must be a positive number, got {timeout_s}",
            severity=Severity.ERROR,
        ))

    # --- Mock delay ---
    mock_delay_s = raw_config.get("mock_delay_s", 0.0)
    if isinstance(mock_delay_s, bool) or not isinstance(mock_delay_s, (int, float)) or mock_delay_s < 0:
        errors.append(ConfigError(
            field="mock_delay_s",
            message=f"mock_delay_s must be zero or positive, got {mock_delay_s}",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
