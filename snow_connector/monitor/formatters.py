"""Pure functions that convert accepted broker events into NormalizedAlerts."""

from __future__ import annotations

from snow_connector.cache.names import (
    NameCache,
    resolve_hostname,
    resolve_service_description,
)
from snow_connector.core.types import (
    BrokerEvent,
    ElementKind,
    NormalizedAlert,
    format_event_time,
)
from snow_connector.monitor.severity import element_kind_for, map_severity


def format_alert(event: BrokerEvent, names: NameCache) -> NormalizedAlert:
    """Build the alert for an event that already passed the acceptance rules.

    Host status events use the host as resource; every other event is
    reported against its service description.
    """
    hostname = resolve_hostname(names, event.host_id)
    kind = element_kind_for(event.category, event.element)

    if kind == ElementKind.HOST:
        resource = hostname
    else:
        resource = resolve_service_description(names, event.host_id, event.service_id)

    return NormalizedAlert(
        node=hostname,
        resource=resource,
        severity=map_severity(kind, event.current_state),
        description=event.output,
        time_of_event=format_event_time(event.event_time),
    )
