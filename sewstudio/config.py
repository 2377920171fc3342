"""Runtime configuration loaded from environment variables (and a .env file, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_list(name: str, default: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in os.getenv(name, default).split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """
    Service settings.

    Attributes:
        log_level: Root log level name.
        log_format: "json" for structured stdout logs, "text" for human-readable.
        output_dir: Where CompositorOutput.save() writes when no directory is given.
        cors_origins: Origins allowed by the API's CORS middleware.
        llm_classifier: Use LLMGarmentClassifier for description inference.
        llm_model: Claude model used by the LLM classifier.
        host: Interface the API server binds to.
        port: Port the API server listens on.
    """

    log_level: str = "INFO"
    log_format: str = "json"
    output_dir: str = "output"
    cors_origins: tuple[str, ...] = ("*",)
    llm_classifier: bool = False
    llm_model: str = "claude-haiku-4-5-20251001"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def json_logs(self) -> bool:
        return self.log_format.lower() != "text"


def _build_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        output_dir=os.getenv("SEWSTUDIO_OUTPUT_DIR", "output"),
        cors_origins=_env_list("SEWSTUDIO_CORS_ORIGINS", "*"),
        llm_classifier=_env_bool("SEWSTUDIO_LLM_CLASSIFIER"),
        llm_model=os.getenv("SEWSTUDIO_LLM_MODEL", "claude-haiku-4-5-20251001"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings; call get_settings.cache_clear() to re-read the environment."""
    return _build_settings()
