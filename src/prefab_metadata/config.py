"""Environment-driven settings for the prefab-metadata tooling.

Only the command line entry point loads a ``.env`` file; importing the
decoder never touches the filesystem.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import dotenv

LOG_LEVEL_ENV = "PREFAB_METADATA_LOG_LEVEL"
LOG_DIR_ENV = "PREFAB_METADATA_LOG_DIR"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    log_dir: Optional[str] = None


def _parse_level(raw: Optional[str]) -> int:
    if not raw:
        return logging.INFO
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for names it does not know
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV} has unknown log level: {raw!r}")
    return level


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Read settings from the environment, optionally seeding it from a .env file."""
    if dotenv_path is not None:
        dotenv.load_dotenv(dotenv_path)
    return Settings(
        log_level=_parse_level(os.getenv(LOG_LEVEL_ENV)),
        log_dir=os.getenv(LOG_DIR_ENV) or None,
    )
