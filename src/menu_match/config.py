"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_CATALOG_PATH = "menu.txt"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


def _parse_log_level(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class MenuMatchConfig:
    catalog_path: str = DEFAULT_CATALOG_PATH
    catalog_encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "MenuMatchConfig":
        return cls(
            catalog_path=os.getenv("MENU_MATCH_CATALOG_PATH", "").strip() or DEFAULT_CATALOG_PATH,
            catalog_encoding=os.getenv("MENU_MATCH_CATALOG_ENCODING", "").strip() or DEFAULT_ENCODING,
            log_level=_parse_log_level(os.getenv("MENU_MATCH_LOG_LEVEL"), DEFAULT_LOG_LEVEL),
        )
