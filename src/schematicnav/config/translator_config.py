"""Configuration helpers for the natural-language intent translator."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from schematicnav.domains.navigation.errors import ConfigurationError

SUPPORTED_PROVIDERS = ("openai", "anthropic", "ollama")

_DEFAULT_PROVIDER = "openai"
_DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-20250514",
    "ollama": "llama3.1",
}
_API_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}
_DEFAULT_TEMPERATURE = 0.0
_DEFAULT_RETRIES = 1
_ENV_LOADED = False


@dataclass(frozen=True)
class TranslatorConfig:
    """Holds runtime settings for the intent translator."""

    provider: str = _DEFAULT_PROVIDER
    model: str = _DEFAULT_MODELS[_DEFAULT_PROVIDER]
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = _DEFAULT_TEMPERATURE
    retries: int = _DEFAULT_RETRIES

    def with_overrides(
        self,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: Optional[float] = None,
        retries: Optional[int] = None,
    ) -> "TranslatorConfig":
        """Return a copy with the provided overrides applied."""

        cfg = self
        if provider:
            cfg = replace(cfg, provider=provider.lower())
        if model:
            cfg = replace(cfg, model=model)
        if api_key:
            cfg = replace(cfg, api_key=api_key)
        if base_url is not None:
            cfg = replace(cfg, base_url=base_url or None)
        if temperature is not None:
            cfg = replace(cfg, temperature=temperature)
        if retries is not None:
            cfg = replace(cfg, retries=retries)
        return cfg


def load_translator_config(
    *,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    temperature: Optional[float] = None,
    retries: Optional[int] = None,
) -> TranslatorConfig:
    """Load translator configuration from environment variables and overrides.

    Raises:
        ConfigurationError: If the provider is unsupported or has no API key,
            or SCHEMATICNAV_TEMPERATURE is not a number
    """

    _ensure_env_loaded()
    resolved_provider = (
        provider or os.getenv("SCHEMATICNAV_PROVIDER") or _DEFAULT_PROVIDER
    ).strip().lower()
    if resolved_provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"Unsupported provider: {resolved_provider}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    resolved_model = model or os.getenv("SCHEMATICNAV_MODEL") or _DEFAULT_MODELS[resolved_provider]

    resolved_key = api_key or os.getenv("SCHEMATICNAV_API_KEY")
    key_env = _API_KEY_ENV.get(resolved_provider)
    if not resolved_key and key_env:
        resolved_key = os.getenv(key_env, "").strip() or None
    if key_env and not resolved_key:
        raise ConfigurationError(
            f"{key_env} (or SCHEMATICNAV_API_KEY) must be set to translate commands"
        )

    resolved_base_url = base_url
    if resolved_base_url is None:
        resolved_base_url = (os.getenv("SCHEMATICNAV_BASE_URL") or "").strip() or None

    if temperature is None:
        env_temperature = (os.getenv("SCHEMATICNAV_TEMPERATURE") or "").strip()
        try:
            temperature = float(env_temperature) if env_temperature else _DEFAULT_TEMPERATURE
        except ValueError as exc:
            raise ConfigurationError(
                f"SCHEMATICNAV_TEMPERATURE must be a number, got '{env_temperature}'"
            ) from exc

    return TranslatorConfig(
        provider=resolved_provider,
        model=resolved_model,
        api_key=resolved_key,
        base_url=resolved_base_url,
        temperature=temperature,
        retries=retries if retries is not None else _DEFAULT_RETRIES,
    )


def _ensure_env_loaded() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    dotenv_path = Path.cwd() / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path)
    else:
        load_dotenv()  # Fallback to default search
