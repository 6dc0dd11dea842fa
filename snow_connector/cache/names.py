"""Host and service name lookups with raw-id fallback."""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)


class NameCache(abc.ABC):
    """Source of host names and service descriptions (the broker cache)."""

    @abc.abstractmethod
    def get_hostname(self, host_id: int) -> str | None:
        """Return the host name, or None if unknown."""

    @abc.abstractmethod
    def get_service_description(self, host_id: int, service_id: int) -> str | None:
        """Return the service description, or None if unknown."""


class StaticNameCache(NameCache):
    """In-memory cache, typically loaded from a YAML export.

    YAML layout::

        hosts:
          1: web01
        services:
          1:
            12: HTTP
    """

    def __init__(
        self,
        hosts: dict[int, str] | None = None,
        services: dict[tuple[int, int], str] | None = None,
    ) -> None:
        self._hosts: dict[int, str] = dict(hosts or {})
        self._services: dict[tuple[int, int], str] = dict(services or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StaticNameCache:
        hosts = {int(k): str(v) for k, v in (data.get("hosts") or {}).items()}
        services: dict[tuple[int, int], str] = {}
        for host_id, by_service in (data.get("services") or {}).items():
            for service_id, description in (by_service or {}).items():
                services[(int(host_id), int(service_id))] = str(description)
        return cls(hosts=hosts, services=services)

    @classmethod
    def from_yaml(cls, path: str | Path) -> StaticNameCache:
        with open(path) as f:
            raw = yaml.safe_load(f)
        return cls.from_dict(raw if isinstance(raw, dict) else {})

    def get_hostname(self, host_id: int) -> str | None:
        return self._hosts.get(host_id)

    def get_service_description(self, host_id: int, service_id: int) -> str | None:
        return self._services.get((host_id, service_id))


def _raw_id(value: int | None) -> str:
    return "" if value is None else str(value)


def resolve_hostname(cache: NameCache, host_id: int | None) -> str:
    """Host name for *host_id*, or the id itself when the cache misses."""
    hostname = cache.get_hostname(host_id) if host_id is not None else None
    if not hostname:
        logger.warning(
            "hostname_not_found",
            host_id=host_id,
            hint="Restarting centengine should fix this.",
        )
        return _raw_id(host_id)
    return hostname


def resolve_service_description(
    cache: NameCache,
    host_id: int | None,
    service_id: int | None,
) -> str:
    """Service description, or the service id itself when the cache misses."""
    description = None
    if host_id is not None and service_id is not None:
        description = cache.get_service_description(host_id, service_id)
    if not description:
        logger.warning(
            "service_description_not_found",
            host_id=host_id,
            service_id=service_id,
            hint="Restarting centengine should fix this.",
        )
        return _raw_id(service_id)
    return description
