"""Read-once generation settings.

Settings are resolved a single time at process start (environment first,
then an optional YAML overlay) and handed to ``GenerationClient``; nothing
reads the environment at call time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from resume_ai.providers.gemini import DEFAULT_API_BASE, DEFAULT_MODEL, DEFAULT_TIMEOUT_S
from resume_ai.providers.types import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

# First non-empty wins.
API_KEY_ENV_VARS = ("GOOGLE_AI_API_KEY", "GEMINI_API_KEY", "GOOGLE_GEMINI_API_KEY")

ENV_API_BASE = "RESUME_AI_API_BASE"
ENV_MODEL = "RESUME_AI_MODEL"
ENV_TIMEOUT = "RESUME_AI_TIMEOUT_S"
ENV_MOCK_DELAY = "RESUME_AI_MOCK_DELAY_S"


@dataclass(frozen=True)
class GenerationSettings:
    api_key: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    model: str = DEFAULT_MODEL
    timeout_s: float = DEFAULT_TIMEOUT_S
    default_max_tokens: int = DEFAULT_MAX_TOKENS
    default_temperature: float = DEFAULT_TEMPERATURE
    mock_delay_s: float = 0.0

    @property
    def live_mode(self) -> bool:
        return bool(self.api_key)

    def redacted(self) -> Dict[str, Any]:
        """Settings as a dict with the credential masked."""
        key = self.api_key or ""
        return {
            "api_key": f"{key[:4]}..." if key else None,
            "api_base": self.api_base,
            "model": self.model,
            "timeout_s": self.timeout_s,
            "default_max_tokens": self.default_max_tokens,
            "default_temperature": self.default_temperature,
            "mock_delay_s": self.mock_delay_s,
            "mode": "live" if self.live_mode else "mock",
        }


def resolve_api_key(environ: Mapping[str, str]) -> Optional[str]:
    for name in API_KEY_ENV_VARS:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None


def load_raw_config(config_path: str = "config/config.local.yaml") -> dict:
    """Load the YAML overlay.

    ``config/config.yaml`` is loaded first and ``config.local.yaml`` merged on
    top. Missing files yield an empty mapping.
    """
    repo_root = Path(__file__).resolve().parents[1]

    def _resolve(candidate: str) -> Path:
        path = Path(candidate)
        if path.exists():
            return path
        alt = repo_root / candidate
        if alt.exists():
            return alt
        return path

    def _load_yaml(path: Path) -> dict:
        if not path.exists():
            return {}
        with open(path) as f:
            data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Config file must be a mapping: {path}")
            return data

    def _deep_merge(base: dict, override: dict) -> dict:
        merged = dict(base)
        for key, value in override.items():
            base_value = merged.get(key)
            if isinstance(base_value, dict) and isinstance(value, dict):
                merged[key] = _deep_merge(base_value, value)
            else:
                merged[key] = value
        return merged

    target = _resolve(config_path)
    if Path(config_path).name == "config.local.yaml":
        return _deep_merge(_load_yaml(_resolve("config/config.yaml")), _load_yaml(target))
    return _load_yaml(target)


def expand_placeholder(value: Any, environ: Mapping[str, str]) -> str:
    """Resolve a ``${VAR_NAME}`` placeholder against *environ*; plain values pass through."""
    text = str(value or "").strip()
    if text.startswith("${") and text.endswith("}"):
        return (environ.get(text[2:-1]) or "").strip()
    return text


def settings_from_mapping(raw: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None) -> GenerationSettings:
    """Build settings from a raw YAML mapping plus environment overrides."""
    env = os.environ if environ is None else environ
    settings = GenerationSettings(
        api_key=expand_placeholder(raw.get("api_key"), env) or None,
        api_base=raw.get("api_base") or DEFAULT_API_BASE,
        model=raw.get("model") or DEFAULT_MODEL,
        timeout_s=float(raw.get("timeout_s", DEFAULT_TIMEOUT_S)),
        default_max_tokens=int(raw.get("max_tokens", DEFAULT_MAX_TOKENS)),
        default_temperature=float(raw.get("temperature", DEFAULT_TEMPERATURE)),
        mock_delay_s=float(raw.get("mock_delay_s", 0.0)),
    )

    overrides: Dict[str, Any] = {}
    api_key = resolve_api_key(env)
    if api_key:
        overrides["api_key"] = api_key
    if env.get(ENV_API_BASE):
        overrides["api_base"] = env[ENV_API_BASE].strip()
    if env.get(ENV_MODEL):
        overrides["model"] = env[ENV_MODEL].strip()
    if env.get(ENV_TIMEOUT):
        overrides["timeout_s"] = float(env[ENV_TIMEOUT])
    if env.get(ENV_MOCK_DELAY):
        overrides["mock_delay_s"] = float(env[ENV_MOCK_DELAY])
    return replace(settings, **overrides) if overrides else settings


def load_settings(
    config_path: Optional[str] = "config/config.local.yaml",
    environ: Optional[Mapping[str, str]] = None,
) -> GenerationSettings:
    """Resolve settings once. Pass ``config_path=None`` to skip YAML."""
    raw = load_raw_config(config_path) if config_path else {}
    return settings_from_mapping(raw, environ)
