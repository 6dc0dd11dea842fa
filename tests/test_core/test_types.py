"""Tests for broker event parsing and alert types."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from snow_connector.core.types import (
    AlertSeverity,
    BamEvent,
    BrokerEvent,
    EventVerdict,
    HostStatusEvent,
    MetricEvent,
    NormalizedAlert,
    RejectionReason,
    RuleVerdict,
    ServiceStatusEvent,
    format_event_time,
    parse_event,
)


class TestParseEvent:
    def test_host_status_variant(self) -> None:
        ev = parse_event({
            "category": 1,
            "element": 14,
            "host_id": 3,
            "state": 1,
            "state_type": 1,
            "scheduled_downtime_depth": 0,
        })
        assert isinstance(ev, HostStatusEvent)
        assert ev.is_host_status is True
        assert ev.acknowledged is False

    def test_service_status_variant(self) -> None:
        ev = parse_event({
            "category": 1,
            "element": 24,
            "service_id": 9,
            "state": 2,
            "state_type": 0,
            "scheduled_downtime_depth": 0,
        })
        assert isinstance(ev, ServiceStatusEvent)
        assert ev.host_id is None
        assert ev.is_service_status is True

    def test_metric_variant(self) -> None:
        ev = parse_event({"category": 3, "element": 1, "metric_id": 5, "value": 0.5})
        assert isinstance(ev, MetricEvent)
        assert ev.value == 0.5

    def test_bam_variant(self) -> None:
        ev = parse_event({"category": 6, "element": 1, "ba_id": 4})
        assert isinstance(ev, BamEvent)
        assert ev.ba_id == 4

    def test_unhandled_kind_uses_base(self) -> None:
        ev = parse_event({"category": 1, "element": 17, "output": "log"})
        assert type(ev) is BrokerEvent

    def test_incomplete_variant_falls_back(self) -> None:
        ev = parse_event({"category": 1, "element": 14, "host_id": 3})
        assert type(ev) is BrokerEvent
        assert ev.is_host_status is True
        assert ev.state is None

    def test_invalid_fields_dropped_on_fallback(self) -> None:
        ev = parse_event(
            {"category": 1, "element": 14, "host_id": 3, "state": "abc", "output": None}
        )
        assert type(ev) is BrokerEvent
        assert ev.host_id == 3
        assert ev.state is None
        assert ev.output == ""

    def test_invalid_base_fields_dropped(self) -> None:
        ev = parse_event({"category": 1, "element": 17, "ctime": "yesterday", "output": "log"})
        assert ev.ctime is None
        assert ev.output == "log"

    def test_invalid_identifiers_raise(self) -> None:
        with pytest.raises(ValidationError):
            parse_event({"category": "neb", "element": 14})

    def test_acknowledged_from_int(self) -> None:
        ev = parse_event({"category": 1, "element": 17, "acknowledged": 1})
        assert ev.acknowledged is True

    def test_unknown_fields_ignored(self) -> None:
        ev = parse_event({"category": 1, "element": 17, "flapping": True})
        assert not hasattr(ev, "flapping")

    def test_model_passthrough(self) -> None:
        ev = BrokerEvent(category=3, element=1)
        assert parse_event(ev) is ev


class TestEventTime:
    def test_last_check_preferred(self) -> None:
        ev = BrokerEvent(category=1, element=14, last_check=200.0, ctime=100.0)
        assert ev.event_time == 200.0

    def test_ctime_fallback(self) -> None:
        assert BrokerEvent(category=3, element=1, ctime=100.0).event_time == 100.0

    def test_missing(self) -> None:
        assert BrokerEvent(category=3, element=1).event_time is None

    def test_format(self) -> None:
        expected = datetime.fromtimestamp(1700000000).strftime("%Y-%m-%d %H:%M:%S")
        assert format_event_time(1700000000) == expected
        assert format_event_time(None) is None

    @pytest.mark.parametrize("timestamp", [1e20, -1e20, float("inf"), float("nan")])
    def test_out_of_range(self, timestamp: float) -> None:
        with capture_logs() as logs:
            assert format_event_time(timestamp) is None
        assert logs[0]["event"] == "invalid_event_time"
        assert logs[0]["log_level"] == "warning"


class TestVerdicts:
    def test_reasons(self) -> None:
        v = EventVerdict(
            accepted=False,
            failures=(
                RuleVerdict(approved=False, reason=RejectionReason.SOFT_STATE),
                RuleVerdict(approved=False, reason=RejectionReason.IN_DOWNTIME),
            ),
        )
        assert v.reasons == [RejectionReason.SOFT_STATE, RejectionReason.IN_DOWNTIME]


class TestNormalizedAlert:
    def test_defaults(self) -> None:
        alert = NormalizedAlert(node="web01", resource="web01")
        assert alert.source == "centreon"
        assert alert.event_class == "centreon"
        assert alert.severity == AlertSeverity.INFO == 5
        assert alert.description == ""
        assert alert.time_of_event is None

    def test_json_dump(self) -> None:
        alert = NormalizedAlert(node="web01", resource="HTTP", severity=AlertSeverity.CRITICAL)
        data = alert.model_dump(mode="json")
        assert data["severity"] == 1
        assert data["resource"] == "HTTP"
