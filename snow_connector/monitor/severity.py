"""Broker state -> ServiceNow severity mapping."""

from __future__ import annotations

from snow_connector.core.types import AlertSeverity, ElementKind
from snow_connector.taxonomy import Category, NebElement

# Service states: 0 ok, 1 warning, 2 critical, 3 unknown.
_SERVICE_SEVERITY: dict[int, AlertSeverity] = {
    0: AlertSeverity.CLEAR,
    1: AlertSeverity.MINOR,
    2: AlertSeverity.CRITICAL,
    3: AlertSeverity.WARNING,
}

DEFAULT_SEVERITY = AlertSeverity.INFO


def element_kind_for(category: int, element: int) -> ElementKind:
    """Only neb/host_status maps as a host; everything else as a service."""
    if category == Category.NEB and element == NebElement.HOST_STATUS:
        return ElementKind.HOST
    return ElementKind.SERVICE


def map_severity(kind: ElementKind | str, current_state: int | None) -> AlertSeverity:
    """Translate a raw current_state into the alerting severity scale.

    Hosts are up (0) or not; any non-zero host state is critical.  A
    missing or unmapped state yields :data:`DEFAULT_SEVERITY`.
    """
    kind = ElementKind(kind)
    if current_state is None:
        return DEFAULT_SEVERITY
    if kind == ElementKind.HOST:
        return AlertSeverity.CLEAR if current_state == 0 else AlertSeverity.CRITICAL
    return _SERVICE_SEVERITY.get(current_state, DEFAULT_SEVERITY)
