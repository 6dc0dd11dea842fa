"""Name resolution for broker host and service ids."""

from snow_connector.cache.names import (
    NameCache,
    StaticNameCache,
    resolve_hostname,
    resolve_service_description,
)

__all__ = [
    "NameCache",
    "StaticNameCache",
    "resolve_hostname",
    "resolve_service_description",
]
