"""Domain types for broker events, verdicts and normalized alerts."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum, StrEnum
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from snow_connector.taxonomy import BamElement, Category, NebElement, StorageElement

logger = structlog.get_logger(__name__)

TIME_OF_EVENT_FORMAT = "%Y-%m-%d %H:%M:%S"


# ── Enums ───────────────────────────────────────────────────────


class ElementKind(StrEnum):
    """Which severity table an event is mapped with."""

    HOST = "host"
    SERVICE = "service"


class AlertSeverity(IntEnum):
    """ServiceNow event severity. Lower is more urgent, 0 clears."""

    CLEAR = 0
    CRITICAL = 1
    MAJOR = 2
    MINOR = 3
    WARNING = 4
    INFO = 5


class RejectionReason(StrEnum):
    """Why an event was not turned into an alert."""

    CATEGORY_NOT_ACCEPTED = "CATEGORY_NOT_ACCEPTED"
    ELEMENT_NOT_ACCEPTED = "ELEMENT_NOT_ACCEPTED"
    CATEGORY_NOT_HANDLED = "CATEGORY_NOT_HANDLED"
    STATUS_NOT_ACCEPTED = "STATUS_NOT_ACCEPTED"
    SOFT_STATE = "SOFT_STATE"
    ACKNOWLEDGED = "ACKNOWLEDGED"
    IN_DOWNTIME = "IN_DOWNTIME"
    ANONYMOUS_HOST = "ANONYMOUS_HOST"
    INVALID_EVENT = "INVALID_EVENT"


# ── Broker events ───────────────────────────────────────────────


class BrokerEvent(BaseModel):
    """A broker event as delivered to the stream connector.

    Used directly for element kinds without a dedicated variant, and as
    the fallback when a payload does not satisfy its variant.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: int
    element: int
    host_id: int | None = None
    service_id: int | None = None
    state: int | None = None
    state_type: int | None = None
    acknowledged: bool = False
    scheduled_downtime_depth: int | None = None
    current_state: int | None = None
    last_check: float | None = None
    ctime: float | None = None
    output: str = ""

    @property
    def is_host_status(self) -> bool:
        return (
            self.category == Category.NEB
            and self.element == NebElement.HOST_STATUS
        )

    @property
    def is_service_status(self) -> bool:
        return (
            self.category == Category.NEB
            and self.element == NebElement.SERVICE_STATUS
        )

    @property
    def event_time(self) -> float | None:
        """Timestamp used for the alert: last check, else creation time."""
        return self.last_check if self.last_check is not None else self.ctime


class HostStatusEvent(BrokerEvent):
    """neb/host_status."""

    host_id: int
    state: int
    state_type: int
    scheduled_downtime_depth: int


class ServiceStatusEvent(BrokerEvent):
    """neb/service_status. ``host_id`` may be missing (anonymous service)."""

    service_id: int
    state: int
    state_type: int
    scheduled_downtime_depth: int


class MetricEvent(BrokerEvent):
    """storage/metric, one perfdata sample."""

    metric_id: int | None = None
    name: str = ""
    value: float | None = None


class BamEvent(BrokerEvent):
    """Any bam element; carries the business activity id when present."""

    ba_id: int | None = None
    kpi_id: int | None = None


_EVENT_MODELS: dict[tuple[int, int], type[BrokerEvent]] = {
    (Category.NEB, NebElement.HOST_STATUS): HostStatusEvent,
    (Category.NEB, NebElement.SERVICE_STATUS): ServiceStatusEvent,
    (Category.STORAGE, StorageElement.METRIC): MetricEvent,
}
_EVENT_MODELS.update(
    {(Category.BAM, member): BamEvent for member in BamElement}
)


def parse_event(payload: BrokerEvent | dict[str, Any]) -> BrokerEvent:
    """Build the event variant matching the payload's (category, element).

    A payload that does not satisfy its variant degrades to a plain
    :class:`BrokerEvent` without the offending fields; the acceptance
    rules then reject it.

    Raises:
        ValidationError: ``category`` or ``element`` is missing or invalid.
    """
    if isinstance(payload, BrokerEvent):
        return payload

    key = (payload.get("category"), payload.get("element"))
    try:
        model = _EVENT_MODELS.get(key, BrokerEvent)  # type: ignore[arg-type]
    except TypeError:
        model = BrokerEvent
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        invalid = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        logger.warning(
            "event_variant_fallback",
            category=key[0],
            element=key[1],
            variant=model.__name__,
            errors=exc.error_count(),
            dropped=sorted(invalid & set(payload)),
        )
        cleaned = {k: v for k, v in payload.items() if k not in invalid}
        return BrokerEvent.model_validate(cleaned)


# ── Verdicts ────────────────────────────────────────────────────


class RuleVerdict(BaseModel):
    """Outcome of a single acceptance predicate."""

    model_config = ConfigDict(frozen=True)

    approved: bool
    reason: RejectionReason | None = None
    detail: str = ""


class EventVerdict(BaseModel):
    """Combined outcome of every predicate applied to one event."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    failures: tuple[RuleVerdict, ...] = ()

    @property
    def reasons(self) -> list[RejectionReason]:
        return [f.reason for f in self.failures if f.reason is not None]


class Rejection(BaseModel):
    """Returned by classification when an event produces no alert."""

    model_config = ConfigDict(frozen=True)

    category: int | None = None
    element: int | None = None
    reasons: tuple[RejectionReason, ...] = ()
    details: tuple[str, ...] = ()


# ── Alerts ──────────────────────────────────────────────────────


def format_event_time(timestamp: float | None) -> str | None:
    """Render a broker timestamp in local time, ServiceNow style."""
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(timestamp).strftime(TIME_OF_EVENT_FORMAT)
    except (OverflowError, OSError, ValueError):
        logger.warning("invalid_event_time", timestamp=timestamp)
        return None


class NormalizedAlert(BaseModel):
    """ServiceNow ``em_event`` payload built from an accepted event."""

    model_config = ConfigDict(frozen=True)

    source: str = "centreon"
    event_class: str = "centreon"
    node: str
    resource: str
    severity: AlertSeverity = AlertSeverity.INFO
    description: str = ""
    time_of_event: str | None = None
