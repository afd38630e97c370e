"""Runtime settings and the credentials file.

The API key lives in a dotenv file (``.env`` in the working directory by
default) as a single ``API_KEY=...`` entry. The file is created with a
placeholder on first run; ``synthcli -a <key>`` stores the real key.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, set_key

from .client import DEFAULT_BASE_URL
from .exceptions import ConfigError, MissingApiKeyError

logger = logging.getLogger("synthcli")

API_KEY_NAME = "API_KEY"
PLACEHOLDER_API_KEY = "your_api_key_here"
DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_FILE = "application.log"


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _as_float(values: dict, name: str, default: Optional[float]) -> Optional[float]:
    value = values.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}") from None


@dataclass
class Settings:
    api_key: str = PLACEHOLDER_API_KEY
    env_file: Path = field(default_factory=lambda: Path(DEFAULT_ENV_FILE))
    base_url: str = DEFAULT_BASE_URL
    scripts_dir: Path = field(default_factory=lambda: Path("scripts"))
    downloads_dir: Path = field(default_factory=lambda: Path("downloads"))
    log_file: Optional[Path] = field(default_factory=lambda: Path(DEFAULT_LOG_FILE))
    batch_poll_interval: float = 120.0
    script_poll_interval: float = 3.0
    max_wait: Optional[float] = None
    list_limit: int = 100
    timeout: float = 60.0
    debug: bool = False

    @classmethod
    def load(cls, env_file: str | Path = DEFAULT_ENV_FILE) -> "Settings":
        """Build settings from *env_file* and the process environment.

        Values in the process environment win over the file. A missing
        *env_file* is created with a placeholder key.
        """
        env_file = Path(env_file)
        ensure_env_file(env_file)
        values = {**dotenv_values(env_file), **os.environ}

        settings = cls(
            api_key=values.get(API_KEY_NAME) or PLACEHOLDER_API_KEY,
            env_file=env_file,
            base_url=values.get("SYNTHESIA_BASE_URL") or DEFAULT_BASE_URL,
            debug=_as_bool(values.get("SYNTHCLI_DEBUG")),
        )
        if values.get("SYNTHCLI_SCRIPTS_DIR"):
            settings.scripts_dir = Path(values["SYNTHCLI_SCRIPTS_DIR"])
        if values.get("SYNTHCLI_DOWNLOADS_DIR"):
            settings.downloads_dir = Path(values["SYNTHCLI_DOWNLOADS_DIR"])
        if values.get("SYNTHCLI_LOG_FILE"):
            settings.log_file = Path(values["SYNTHCLI_LOG_FILE"])
        settings.batch_poll_interval = _as_float(values, "SYNTHCLI_POLL_INTERVAL", settings.batch_poll_interval)
        settings.max_wait = _as_float(values, "SYNTHCLI_MAX_WAIT", None)
        return settings

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    def require_api_key(self) -> str:
        if not self.has_api_key:
            raise MissingApiKeyError(
                f"Valid API key not found in {self.env_file}. Store one with: synthcli -a <key>"
            )
        return self.api_key


def ensure_env_file(env_file: Path) -> bool:
    """Create *env_file* holding the placeholder key. Returns ``True`` if created."""
    if env_file.exists():
        return False
    logger.info("%s file not found. Creating a new one...", env_file)
    env_file.write_text(f"{API_KEY_NAME}={PLACEHOLDER_API_KEY}\n", encoding="utf-8")
    logger.info("%s file created with placeholder API key", env_file)
    return True


def store_api_key(env_file: Path, api_key: str) -> None:
    """Write *api_key* into *env_file*, replacing any previous value."""
    api_key = api_key.strip()
    if not api_key:
        raise ValueError("API key must not be empty")
    ensure_env_file(env_file)
    set_key(str(env_file), API_KEY_NAME, api_key, quote_mode="never")
    logger.info("API key in %s file updated successfully.", env_file)
