"""Pure acceptance predicates — each returns a RuleVerdict."""

from __future__ import annotations

from collections.abc import Collection

from snow_connector.core.types import RejectionReason, RuleVerdict


def check_status(state: int | None, accepted: Collection[int]) -> RuleVerdict:
    """Reject if the raw state is not one of the accepted status codes."""
    if state is None or state not in accepted:
        return RuleVerdict(
            approved=False,
            reason=RejectionReason.STATUS_NOT_ACCEPTED,
            detail=f"State {state} not in {sorted(accepted)}",
        )
    return RuleVerdict(approved=True)


def check_state_type(state_type: int | None, hard_only: int) -> RuleVerdict:
    """Reject soft states when only hard states are wanted.

    ``hard_only=1`` lets through state_type 1 (hard) only; ``0`` lets
    through both.  A missing state type never passes.
    """
    if state_type is None or not state_type >= hard_only:
        return RuleVerdict(
            approved=False,
            reason=RejectionReason.SOFT_STATE,
            detail=f"State type {state_type} < {hard_only}",
        )
    return RuleVerdict(approved=True)


def check_acknowledged(acknowledged: bool, threshold: int) -> RuleVerdict:
    """Reject acknowledged events unless the threshold allows them."""
    if not threshold >= int(acknowledged):
        return RuleVerdict(
            approved=False,
            reason=RejectionReason.ACKNOWLEDGED,
            detail="Event is acknowledged",
        )
    return RuleVerdict(approved=True)


def check_downtime(downtime_depth: int | None, threshold: int) -> RuleVerdict:
    """Reject events whose downtime depth exceeds the threshold."""
    if downtime_depth is None or not threshold >= downtime_depth:
        return RuleVerdict(
            approved=False,
            reason=RejectionReason.IN_DOWNTIME,
            detail=f"Downtime depth {downtime_depth} > {threshold}",
        )
    return RuleVerdict(approved=True)


def check_anonymous_host(host_id: int | None, skip_anonymous: bool) -> RuleVerdict:
    """Reject events without a host id when anonymous events are skipped."""
    if host_id is None and skip_anonymous:
        return RuleVerdict(
            approved=False,
            reason=RejectionReason.ANONYMOUS_HOST,
            detail="Event has no host id",
        )
    return RuleVerdict(approved=True)
