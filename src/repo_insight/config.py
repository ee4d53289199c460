"""
Runtime settings for repo-insight.
Read from the process environment, falling back to an optional .env file
in the working directory. The process environment is never modified.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import dotenv_values


class ConfigError(ValueError):
    """Settings could not be built from the environment."""


PROVIDERS = ("openai", "ollama")

DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "ollama": "llama3",
}


@dataclass(frozen=True)
class Settings:
    provider: str = "openai"
    openai_api_key: str = ""
    model: str = ""
    ollama_host: str | None = None
    log_level: str = "WARNING"

    @property
    def default_model(self) -> str:
        return self.model or default_model_for(self.provider)

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with command-line overrides applied; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def default_model_for(provider: str) -> str:
    return DEFAULT_MODELS.get(provider, DEFAULT_MODELS["openai"])


def _get(key: str, file_values: dict, default: str = "") -> str:
    return (os.environ.get(key) or file_values.get(key) or default).strip()


def load_settings(env_file: str | Path | None = None, *, provider: str | None = None) -> Settings:
    """
    Build Settings from the environment.
    Looks for env_file if given, otherwise ./.env; a missing file is fine.
    An explicit provider takes precedence over REPO_INSIGHT_PROVIDER.
    Raises ConfigError for an unknown provider.
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    file_values = dotenv_values(env_path) if env_path.is_file() else {}

    provider = (provider or _get("REPO_INSIGHT_PROVIDER", file_values, "openai")).lower()
    if provider not in PROVIDERS:
        raise ConfigError(f"Unknown provider {provider!r}; expected one of {', '.join(PROVIDERS)}")

    return Settings(
        provider=provider,
        openai_api_key=_get("OPENAI_API_KEY", file_values),
        model=_get("REPO_INSIGHT_MODEL", file_values),
        ollama_host=_get("OLLAMA_HOST", file_values) or None,
        log_level=_get("REPO_INSIGHT_LOG_LEVEL", file_values, "WARNING").upper(),
    )
