"""ClassificationEngine — the filter/write entry points of the connector."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from snow_connector.cache.names import NameCache
from snow_connector.core.config import FilterConfig
from snow_connector.core.types import (
    BrokerEvent,
    EventVerdict,
    NormalizedAlert,
    Rejection,
    RejectionReason,
    RuleVerdict,
    parse_event,
)
from snow_connector.monitor.channels import AlertSink
from snow_connector.monitor.formatters import format_alert
from snow_connector.monitor.metrics import ClassificationStats
from snow_connector.rules.evaluator import evaluate
from snow_connector.taxonomy import category_accepted, element_accepted

logger = structlog.get_logger(__name__)


def _int_or_none(value: Any) -> int | None:
    return value if isinstance(value, int) else None


class ClassificationEngine:
    """Decides which broker events become ServiceNow alerts.

    The broker calls :meth:`filter` with only the category and element
    ids, before decoding the event, then :meth:`write` with the full
    payload for events that passed.  Configuration is immutable and no
    state is carried from one event to the next, so one engine can be
    shared between threads as long as the name cache and sink allow it.
    """

    def __init__(
        self,
        config: FilterConfig,
        names: NameCache,
        sink: AlertSink | None = None,
        stats: ClassificationStats | None = None,
    ) -> None:
        self._config = config
        self._names = names
        self._sink = sink
        self._stats = stats or ClassificationStats()

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def stats(self) -> ClassificationStats:
        return self._stats

    # ── Stage 1: pre-filter ─────────────────────────────────────

    def pre_filter(self, category: int, element: int) -> bool:
        """Cheap check on (category, element) ids against the accepted sets."""
        passed = category_accepted(
            self._config.accepted_categories, category
        ) and element_accepted(self._config.accepted_elements, category, element)
        self._stats.record_filter(passed)
        if passed:
            logger.debug("event_passed_filter", category=category, element=element)
        return passed

    def filter(self, category: int, element: int) -> bool:
        """Broker-facing name of :meth:`pre_filter`."""
        return self.pre_filter(category, element)

    def filter_reason(self, category: int, element: int) -> RejectionReason | None:
        """Why :meth:`pre_filter` would reject the pair, or None if it passes."""
        if not category_accepted(self._config.accepted_categories, category):
            return RejectionReason.CATEGORY_NOT_ACCEPTED
        if not element_accepted(self._config.accepted_elements, category, element):
            return RejectionReason.ELEMENT_NOT_ACCEPTED
        return None

    # ── Stage 2: rules + normalization ──────────────────────────

    def _parse(self, event: BrokerEvent | dict[str, Any]) -> BrokerEvent | EventVerdict:
        """Parse *event*, or return a rejecting verdict if it cannot be."""
        try:
            return parse_event(event)
        except ValidationError as exc:
            logger.warning("event_invalid", errors=exc.error_count(), detail=str(exc))
            return EventVerdict(
                accepted=False,
                failures=(
                    RuleVerdict(
                        approved=False,
                        reason=RejectionReason.INVALID_EVENT,
                        detail="Event has no valid category/element",
                    ),
                ),
            )

    def evaluate(self, event: BrokerEvent | dict[str, Any]) -> EventVerdict:
        parsed = self._parse(event)
        if isinstance(parsed, EventVerdict):
            return parsed
        return evaluate(self._config, parsed)

    def classify(self, event: BrokerEvent | dict[str, Any]) -> NormalizedAlert | Rejection:
        """Run the acceptance rules and build the alert for accepted events."""
        parsed = self._parse(event)
        if isinstance(parsed, EventVerdict):
            self._stats.record_rejected(parsed.reasons)
            return Rejection(
                category=_int_or_none(event.get("category")),  # type: ignore[union-attr]
                element=_int_or_none(event.get("element")),  # type: ignore[union-attr]
                reasons=tuple(parsed.reasons),
                details=tuple(f.detail for f in parsed.failures),
            )

        verdict = evaluate(self._config, parsed)

        if not verdict.accepted:
            self._stats.record_rejected(verdict.reasons)
            logger.debug(
                "event_rejected",
                category=parsed.category,
                element=parsed.element,
                reasons=[r.value for r in verdict.reasons],
            )
            return Rejection(
                category=parsed.category,
                element=parsed.element,
                reasons=tuple(verdict.reasons),
                details=tuple(f.detail for f in verdict.failures),
            )

        self._stats.record_accepted()
        return format_alert(parsed, self._names)

    def write(self, event: BrokerEvent | dict[str, Any]) -> bool:
        """Classify *event* and hand the alert to the sink.

        Returns True if the event was accepted and the sink (when there is
        one) took the alert.
        """
        result = self.classify(event)
        if isinstance(result, Rejection):
            return False

        logger.info("alert_built", **result.model_dump(mode="json"))
        if self._sink is None:
            return True

        try:
            delivered = self._sink.deliver(result)
        except Exception:
            logger.exception("sink_delivery_error", sink=type(self._sink).__name__)
            delivered = False
        self._stats.record_delivery(delivered)
        if not delivered:
            logger.warning("alert_delivery_failed", node=result.node, resource=result.resource)
        return delivered

    def close(self) -> None:
        if self._sink is not None:
            self._sink.close()
