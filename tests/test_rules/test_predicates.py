"""Tests for acceptance predicates — stateless checks returning RuleVerdict."""

from __future__ import annotations

from snow_connector.core.types import RejectionReason
from snow_connector.rules.predicates import (
    check_acknowledged,
    check_anonymous_host,
    check_downtime,
    check_state_type,
    check_status,
)


class TestStatus:
    def test_state_in_set(self) -> None:
        assert check_status(2, {0, 1, 2}).approved is True

    def test_state_outside_set(self) -> None:
        v = check_status(3, {0, 1, 2})
        assert v.approved is False
        assert v.reason == RejectionReason.STATUS_NOT_ACCEPTED

    def test_missing_state(self) -> None:
        assert check_status(None, {0, 1, 2}).approved is False

    def test_empty_set_rejects_everything(self) -> None:
        assert check_status(0, set()).approved is False


class TestStateType:
    def test_hard_passes_hard_only(self) -> None:
        assert check_state_type(1, 1).approved is True

    def test_soft_fails_hard_only(self) -> None:
        v = check_state_type(0, 1)
        assert v.approved is False
        assert v.reason == RejectionReason.SOFT_STATE

    def test_soft_passes_without_hard_only(self) -> None:
        assert check_state_type(0, 0).approved is True

    def test_missing_state_type(self) -> None:
        assert check_state_type(None, 0).approved is False


class TestAcknowledged:
    def test_not_acknowledged_default_threshold(self) -> None:
        assert check_acknowledged(False, 0).approved is True

    def test_acknowledged_default_threshold(self) -> None:
        v = check_acknowledged(True, 0)
        assert v.approved is False
        assert v.reason == RejectionReason.ACKNOWLEDGED

    def test_acknowledged_allowed(self) -> None:
        assert check_acknowledged(True, 1).approved is True
        assert check_acknowledged(False, 1).approved is True


class TestDowntime:
    def test_no_downtime(self) -> None:
        assert check_downtime(0, 0).approved is True

    def test_in_downtime_default_threshold(self) -> None:
        v = check_downtime(1, 0)
        assert v.approved is False
        assert v.reason == RejectionReason.IN_DOWNTIME

    def test_single_downtime_allowed(self) -> None:
        assert check_downtime(1, 1).approved is True

    def test_nested_downtime_exceeds_threshold(self) -> None:
        assert check_downtime(2, 1).approved is False

    def test_missing_depth(self) -> None:
        assert check_downtime(None, 1).approved is False


class TestAnonymousHost:
    def test_skipped(self) -> None:
        v = check_anonymous_host(None, True)
        assert v.approved is False
        assert v.reason == RejectionReason.ANONYMOUS_HOST

    def test_allowed(self) -> None:
        assert check_anonymous_host(None, False).approved is True

    def test_known_host(self) -> None:
        assert check_anonymous_host(7, True).approved is True
