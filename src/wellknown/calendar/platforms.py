"""Per-platform deep link configuration and the read-only registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from .constants import FIELD_DATES, FIELD_TITLE, GOOGLE_CALENDAR, GOOGLE_CALENDAR_ID, OPTIONAL_EVENT_FIELDS
from .errors import PlatformConfigError, UnknownPlatformError


@dataclass(frozen=True)
class PlatformConfig:
    """How one target service expects its deep link URL to be shaped.

    ``field_mapping`` maps semantic field names (``title``, ``dates``,
    ``location``, ``description``) to the platform's query keys. It is copied
    on construction and exposed as a read-only mapping. Platform ids are
    stored lower-case.
    """

    platform_id: str
    base_url: str
    action_param: str
    time_format: str
    field_mapping: Mapping[str, str] = field(hash=False)
    optional_fields: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        platform_id = (self.platform_id or "").strip().lower()
        if not platform_id:
            raise PlatformConfigError("Platform id is required")
        object.__setattr__(self, "platform_id", platform_id)
        if not self.base_url:
            raise PlatformConfigError(f"Platform '{self.platform_id}' is missing a base URL")
        mapping = dict(self.field_mapping)
        for required in (FIELD_TITLE, FIELD_DATES):
            if not mapping.get(required):
                raise PlatformConfigError(f"Platform '{self.platform_id}' has no query key for '{required}'")
        optional = frozenset(self.optional_fields)
        unknown = optional.difference(OPTIONAL_EVENT_FIELDS)
        if unknown:
            raise PlatformConfigError(
                f"Platform '{self.platform_id}' lists unsupported optional fields: {', '.join(sorted(unknown))}"
            )
        unmapped = [name for name in optional if not mapping.get(name)]
        if unmapped:
            raise PlatformConfigError(
                f"Platform '{self.platform_id}' has no query key for optional fields: {', '.join(sorted(unmapped))}"
            )
        object.__setattr__(self, "field_mapping", MappingProxyType(mapping))
        object.__setattr__(self, "optional_fields", optional)

    def query_key(self, semantic_field: str) -> str:
        return self.field_mapping[semantic_field]

    @classmethod
    def from_dict(cls, platform_id: str, data: Mapping[str, Any]) -> "PlatformConfig":
        try:
            return cls(
                platform_id=platform_id,
                base_url=str(data["base_url"]),
                action_param=str(data["action_param"]),
                time_format=str(data["time_format"]),
                field_mapping={str(k): str(v) for k, v in dict(data["field_mapping"]).items()},
                optional_fields=frozenset(str(name) for name in data.get("optional_fields") or ()),
            )
        except KeyError as exc:
            raise PlatformConfigError(f"Platform '{platform_id}' is missing setting {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise PlatformConfigError(f"Platform '{platform_id}' has an invalid setting") from exc


class PlatformRegistry:
    """Read-only lookup table of platform configurations."""

    def __init__(self, configs: Iterable[PlatformConfig] = ()) -> None:
        entries: dict[str, PlatformConfig] = {}
        for config in configs:
            entries[config.platform_id] = config
        self._entries: Mapping[str, PlatformConfig] = MappingProxyType(entries)

    def lookup(self, platform_id: str) -> PlatformConfig:
        try:
            return self._entries[platform_id]
        except KeyError:
            raise UnknownPlatformError(platform_id) from None

    def platform_ids(self) -> list[str]:
        return sorted(self._entries)

    def merged(self, configs: Iterable[PlatformConfig]) -> "PlatformRegistry":
        return PlatformRegistry([*self._entries.values(), *configs])

    def __contains__(self, platform_id: object) -> bool:
        return platform_id in self._entries

    def __iter__(self) -> Iterator[PlatformConfig]:
        return iter([self._entries[key] for key in self.platform_ids()])

    def __len__(self) -> int:
        return len(self._entries)


BUILTIN_PLATFORMS = (PlatformConfig.from_dict(GOOGLE_CALENDAR_ID, GOOGLE_CALENDAR),)

BUILTIN_REGISTRY = PlatformRegistry(BUILTIN_PLATFORMS)
