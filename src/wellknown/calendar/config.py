"""Configuration helpers for calendar deep links."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import DEFAULT_PLATFORM_ID
from .errors import PlatformConfigError
from .platforms import BUILTIN_REGISTRY, PlatformConfig, PlatformRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarConfig:
    platforms_file: Optional[Path]
    default_platform: str


def load_config() -> CalendarConfig:
    platforms_file = os.getenv("WELLKNOWN_PLATFORMS_FILE")
    default_platform = os.getenv("WELLKNOWN_DEFAULT_PLATFORM", DEFAULT_PLATFORM_ID).strip()
    return CalendarConfig(
        platforms_file=Path(platforms_file).expanduser() if platforms_file else None,
        default_platform=default_platform or DEFAULT_PLATFORM_ID,
    )


def load_platforms_file(path: Path) -> list[PlatformConfig]:
    """Read extra platform rows from a YAML file.

    The file holds a top-level ``platforms`` mapping keyed by platform id::

        platforms:
          example-calendar:
            base_url: https://calendar.example.com/new
            action_param: CREATE
            time_format: "%Y%m%dT%H%M%SZ"
            field_mapping: {title: name, dates: when}
    """
    if not path.exists():
        raise PlatformConfigError("Platforms file not found", path=str(path))
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PlatformConfigError("Unable to read platforms file", path=str(path)) from exc
    except yaml.YAMLError as exc:
        raise PlatformConfigError("Invalid platforms file format", path=str(path)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PlatformConfigError("Platforms file must contain a mapping", path=str(path))
    platforms = data.get("platforms") or {}
    if not isinstance(platforms, dict):
        raise PlatformConfigError("'platforms' must be a mapping of platform id to settings", path=str(path))

    configs = []
    for platform_id, settings in platforms.items():
        if not isinstance(settings, dict):
            raise PlatformConfigError(f"Settings for platform '{platform_id}' must be a mapping", path=str(path))
        configs.append(PlatformConfig.from_dict(str(platform_id), settings))
    logger.debug("Loaded %d platform(s) from %s", len(configs), path)
    return configs


@lru_cache(maxsize=1)
def default_registry() -> PlatformRegistry:
    config = load_config()
    if config.platforms_file is None:
        return BUILTIN_REGISTRY
    return BUILTIN_REGISTRY.merged(load_platforms_file(config.platforms_file))


def lookup(platform_id: str) -> PlatformConfig:
    return default_registry().lookup(platform_id)
