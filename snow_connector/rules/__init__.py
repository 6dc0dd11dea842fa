"""Acceptance rules — stateless predicates and their per-category evaluation."""

from snow_connector.rules.evaluator import (
    evaluate,
    evaluate_bam_event,
    evaluate_neb_event,
    evaluate_storage_event,
)
from snow_connector.rules.predicates import (
    check_acknowledged,
    check_anonymous_host,
    check_downtime,
    check_state_type,
    check_status,
)

__all__ = [
    "check_acknowledged",
    "check_anonymous_host",
    "check_downtime",
    "check_state_type",
    "check_status",
    "evaluate",
    "evaluate_bam_event",
    "evaluate_neb_event",
    "evaluate_storage_event",
]
