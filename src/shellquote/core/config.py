"""shellquote configuration."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO

import structlog

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from shellquote.core.dialect import Dialect

USER_CONFIG = Path.home() / ".shellquote" / "config.toml"
PROJECT_CONFIG_NAME = ".shellquote.toml"
ENV_CONFIG = "SHELLQUOTE_CONFIG"

# Config scopes in priority order (lowest to highest)
SCOPE_USER = "user"
SCOPE_PROJECT = "project"
SCOPE_ENV = "env"


@dataclass
class Config:
    """Parsed configuration."""

    dialect: Dialect | None = None  # None = not set, Dialect.BASH applies
    log: Path | None = None  # None = no logging
    log_full: bool | None = None  # log the quoted input itself (requires log path)
    source: str | None = None  # file path of the highest layer that was loaded

    @property
    def effective_dialect(self) -> Dialect:
        return self.dialect or Dialect.BASH

    @property
    def effective_log_full(self) -> bool:
        return bool(self.log_full)


# === Config Loading ===


def _find_project_config(cwd: Path) -> Path | None:
    """Walk up from cwd to find .shellquote.toml."""
    current = cwd.resolve()
    while True:
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # reached root
            return None
        current = parent


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Overlay wins if set."""
    return replace(
        base,
        dialect=overlay.dialect if overlay.dialect is not None else base.dialect,
        log=overlay.log if overlay.log is not None else base.log,
        log_full=overlay.log_full if overlay.log_full is not None else base.log_full,
        source=overlay.source if overlay.source is not None else base.source,
    )


def _load_file(path: Path) -> Config:
    try:
        config = parse_config(path.read_text())
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None
    return replace(config, source=str(path))


def load_config(cwd: Path) -> Config:
    """Load config from ~/.shellquote/config.toml, .shellquote.toml and $SHELLQUOTE_CONFIG."""
    config = Config()

    # 1. User config (lowest priority)
    if USER_CONFIG.is_file():
        config = _merge_configs(config, _load_file(USER_CONFIG))

    # 2. Project config (walk up from cwd)
    project_path = _find_project_config(cwd)
    if project_path is not None:
        config = _merge_configs(config, _load_file(project_path))

    # 3. Env override (highest priority)
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        env_config_path = Path(env_path).expanduser()
        if env_config_path.is_file():
            config = _merge_configs(config, _load_file(env_config_path))

    return config


def parse_config(text: str) -> Config:
    """Parse TOML config text into Config object. Raises ValueError on bad input."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"invalid TOML: {e}") from None

    config = Config()
    for key, value in data.items():
        key_normalized = key.replace("-", "_")

        if key_normalized == "dialect":
            if not isinstance(value, str):
                raise ValueError(f"'dialect' must be a string, got {value!r}")
            config.dialect = Dialect.parse(value)

        elif key_normalized == "log":
            if not isinstance(value, str) or not value:
                raise ValueError("'log' requires a path")
            config.log = Path(value).expanduser()

        elif key_normalized == "log_full":
            if not isinstance(value, bool):
                raise ValueError(f"'log_full' must be true or false, got {value!r}")
            config.log_full = value

        else:
            raise ValueError(f"unknown setting '{key}'")

    return config


# === Logging ===

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_full = False
_log_file: IO[str] | None = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings. Call once at startup."""
    global _logger, _log_full, _log_file
    _logger = None
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if config.log is None:
        return

    # Ensure log directory exists
    config.log.parent.mkdir(parents=True, exist_ok=True)

    _log_file = config.log.open("a")

    # JSON lines appended to the configured file
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=structlog.WriteLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()
    _log_full = config.effective_log_full


def log_quote(
    event: str,
    dialect: Dialect,
    size: int,
    data: bytes | None = None,
    error: str | None = None,
) -> None:
    """Log one quoting call. No-op if logging not configured."""
    if _logger is None:
        return

    entry: dict[str, str | int] = {"dialect": dialect.value, "size": size}
    if error is not None:
        entry["error"] = error
    if _log_full and data is not None:
        entry["input"] = repr(bytes(data))

    if error is None:
        _logger.info(event, **entry)
    else:
        _logger.warning(event, **entry)
