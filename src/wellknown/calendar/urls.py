"""Deterministic deep link URL construction."""

from __future__ import annotations

import logging
import re
from collections import Counter
from datetime import datetime
from typing import Optional
from urllib.parse import parse_qsl, quote_plus, urlsplit

from .config import default_registry
from .constants import DATE_RANGE_SEPARATOR, FIELD_DATES, FIELD_TITLE, QUERY_PARAM_ACTION
from .event import CalendarEvent, as_utc, validate
from .platforms import PlatformConfig, PlatformRegistry

logger = logging.getLogger(__name__)


# strftime("%Y") is not zero-padded below year 1000 on every platform.
_YEAR_DIRECTIVE = re.compile(r"%%|%Y")


def format_time(value: datetime, time_format: str, field: Optional[str] = None) -> str:
    utc = as_utc(value, field)
    pattern = _YEAR_DIRECTIVE.sub(lambda match: "%%" if match.group() == "%%" else f"{utc.year:04d}", time_format)
    return utc.strftime(pattern)


def _encode_query(params: list[tuple[str, str]]) -> str:
    encoded = [(quote_plus(key, safe=""), quote_plus(value, safe="")) for key, value in params]
    encoded.sort()
    return "&".join(f"{key}={value}" for key, value in encoded)


def build_url(event: CalendarEvent, config: PlatformConfig) -> str:
    """Build the deep link URL for ``event`` on the platform ``config``.

    The event must already be validated; this function does not call
    :func:`validate`. Query parameters are emitted sorted by encoded key, so
    identical events always produce byte-identical URLs.
    """
    if config is None:
        raise TypeError("build_url requires a platform configuration")

    start = format_time(event.start_time, config.time_format, field="start_time")
    end = format_time(event.end_time, config.time_format, field="end_time")

    params = [
        (QUERY_PARAM_ACTION, config.action_param),
        (config.query_key(FIELD_TITLE), event.title),
        (config.query_key(FIELD_DATES), f"{start}{DATE_RANGE_SEPARATOR}{end}"),
    ]
    for name in config.optional_fields:
        value = event.optional_value(name)
        if value:
            params.append((config.query_key(name), value))

    url = f"{config.base_url}?{_encode_query(params)}"
    logger.debug("Built %s URL (%d bytes)", config.platform_id, len(url))
    return url


def generate_url(
    event: CalendarEvent,
    platform_id: str,
    registry: Optional[PlatformRegistry] = None,
) -> str:
    """Validate ``event``, resolve ``platform_id`` and build the URL."""
    validate(event)
    if registry is None:
        registry = default_registry()
    config = registry.lookup(platform_id)
    return build_url(event, config)


def same_url(first: str, second: str) -> bool:
    """Compare two URLs by scheme, host, path and query parameter set."""
    a = urlsplit(first)
    b = urlsplit(second)
    if (a.scheme.lower(), a.netloc.lower(), a.path) != (b.scheme.lower(), b.netloc.lower(), b.path):
        return False
    return Counter(parse_qsl(a.query, keep_blank_values=True)) == Counter(
        parse_qsl(b.query, keep_blank_values=True)
    )
