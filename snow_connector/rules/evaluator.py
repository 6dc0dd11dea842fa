"""Per-category acceptance evaluation built on the predicates."""

from __future__ import annotations

from snow_connector.core.config import FilterConfig
from snow_connector.core.types import (
    BrokerEvent,
    EventVerdict,
    RejectionReason,
    RuleVerdict,
)
from snow_connector.rules.predicates import (
    check_acknowledged,
    check_anonymous_host,
    check_downtime,
    check_state_type,
    check_status,
)
from snow_connector.taxonomy import Category, category_name


def evaluate_neb_event(config: FilterConfig, event: BrokerEvent) -> EventVerdict:
    """Apply the host/service status rule set.

    State type, acknowledgement and downtime are checked for every neb
    element, not only host_status/service_status.  A log_entry, for
    instance, carries no state_type and is therefore rejected.  Whether
    these three checks should be limited to status elements is still an
    open product question; the uniform behaviour is kept until decided.
    """
    verdicts: list[RuleVerdict] = []

    if event.is_host_status:
        verdicts.append(check_status(event.state, config.host_status_filter))
    elif event.is_service_status:
        anonymous = check_anonymous_host(event.host_id, config.skip_anonymous_events)
        if not anonymous.approved:
            return EventVerdict(accepted=False, failures=(anonymous,))
        verdicts.append(check_status(event.state, config.service_status_filter))

    verdicts.append(check_state_type(event.state_type, config.hard_only))
    verdicts.append(check_acknowledged(event.acknowledged, config.acknowledged))
    verdicts.append(check_downtime(event.scheduled_downtime_depth, config.in_downtime))

    failures = tuple(v for v in verdicts if not v.approved)
    return EventVerdict(accepted=not failures, failures=failures)


def evaluate_storage_event(config: FilterConfig, event: BrokerEvent) -> EventVerdict:
    """Storage events carry no business rules yet."""
    return EventVerdict(accepted=True)


def evaluate_bam_event(config: FilterConfig, event: BrokerEvent) -> EventVerdict:
    """BAM events carry no business rules yet."""
    return EventVerdict(accepted=True)


def evaluate(config: FilterConfig, event: BrokerEvent) -> EventVerdict:
    """Decide whether *event* should become an alert."""
    if event.category == Category.NEB:
        return evaluate_neb_event(config, event)
    if event.category == Category.STORAGE:
        return evaluate_storage_event(config, event)
    if event.category == Category.BAM:
        return evaluate_bam_event(config, event)

    return EventVerdict(
        accepted=False,
        failures=(
            RuleVerdict(
                approved=False,
                reason=RejectionReason.CATEGORY_NOT_HANDLED,
                detail=(
                    f"No rules for category {event.category}"
                    f" ({category_name(event.category) or 'unknown'})"
                ),
            ),
        ),
    )
