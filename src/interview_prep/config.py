"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"
API_URL_ENV = "INTERVIEW_PREP_API_URL"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "gemini-2.0-flash"
    timeout: float | None = None  # seconds; None leaves the SDK default

    def __post_init__(self):
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"llm.timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self):
        if not 1 <= self.port <= 65535:
            raise ValueError(f"server.port must be between 1 and 65535, got {self.port}")


@dataclass(frozen=True)
class UIConfig:
    api_url: str = "http://127.0.0.1:8000"
    request_timeout: float = 300.0

    def __post_init__(self):
        if self.request_timeout <= 0:
            raise ValueError(
                f"ui.request_timeout must be positive, got {self.request_timeout}"
            )

    @property
    def resolved_api_url(self) -> str:
        """API base URL, with the environment override applied."""
        return os.environ.get(API_URL_ENV) or self.api_url


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}
            logger.debug("Loaded config from %s", p)

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        server=ServerConfig(**raw.get("server", {})),
        ui=UIConfig(**raw.get("ui", {})),
    )


def get_api_key() -> str | None:
    """Return the Gemini credential from the environment, if set."""
    key = os.environ.get(API_KEY_ENV) or None
    logger.debug("%s present: %s", API_KEY_ENV, bool(key))
    return key
