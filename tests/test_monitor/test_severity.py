"""Tests for the broker state -> severity table."""

from __future__ import annotations

import pytest

from snow_connector.core.types import AlertSeverity, ElementKind
from snow_connector.monitor.severity import (
    DEFAULT_SEVERITY,
    element_kind_for,
    map_severity,
)


class TestHostSeverity:
    def test_up_clears(self) -> None:
        assert map_severity("host", 0) == 0

    @pytest.mark.parametrize("state", [1, 2])
    def test_down_or_unreachable_is_critical(self, state: int) -> None:
        assert map_severity("host", state) == 1

    def test_any_non_zero_is_critical(self) -> None:
        assert map_severity(ElementKind.HOST, 7) == AlertSeverity.CRITICAL


class TestServiceSeverity:
    @pytest.mark.parametrize(
        ("state", "severity"),
        [(0, 0), (1, 3), (2, 1), (3, 4)],
    )
    def test_table(self, state: int, severity: int) -> None:
        assert map_severity("service", state) == severity

    def test_critical_is_more_urgent_than_warning(self) -> None:
        assert map_severity("service", 2) < map_severity("service", 1)

    def test_unmapped_state(self) -> None:
        assert map_severity("service", 4) == DEFAULT_SEVERITY == 5


class TestMissingState:
    @pytest.mark.parametrize("kind", ["host", "service"])
    def test_default(self, kind: str) -> None:
        assert map_severity(kind, None) == AlertSeverity.INFO

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(ValueError):
            map_severity("router", 0)


class TestElementKind:
    def test_host_status(self) -> None:
        assert element_kind_for(1, 14) == ElementKind.HOST

    def test_service_status(self) -> None:
        assert element_kind_for(1, 24) == ElementKind.SERVICE

    def test_everything_else_maps_as_service(self) -> None:
        assert element_kind_for(3, 1) == ElementKind.SERVICE
        assert element_kind_for(6, 14) == ElementKind.SERVICE
