"""ClassificationStats — counters for the filter and classification stages.

Fed by :class:`~snow_connector.engine.classifier.ClassificationEngine`:
- events seen / passed by the pre-filter
- events accepted / rejected by the rules, with per-reason counts
- alerts delivered / delivery failures
"""

from __future__ import annotations

from collections import Counter

from snow_connector.core.types import RejectionReason


class ClassificationStats:
    """Aggregates classification outcomes.

    Usage::

        stats = ClassificationStats()
        engine = ClassificationEngine(config, names, stats=stats)
        ...
        print(stats.summary())
    """

    def __init__(self) -> None:
        self.filtered_out = 0
        self.filter_passed = 0
        self.accepted = 0
        self.rejected = 0
        self.delivered = 0
        self.delivery_failed = 0
        self._reasons: Counter[RejectionReason] = Counter()

    def record_filter(self, passed: bool) -> None:
        if passed:
            self.filter_passed += 1
        else:
            self.filtered_out += 1

    def record_accepted(self) -> None:
        self.accepted += 1

    def record_rejected(self, reasons: list[RejectionReason]) -> None:
        self.rejected += 1
        self._reasons.update(reasons)

    def record_delivery(self, success: bool) -> None:
        if success:
            self.delivered += 1
        else:
            self.delivery_failed += 1

    def rejection_counts(self) -> dict[str, int]:
        """Rejections per reason, most frequent first."""
        return {reason.value: n for reason, n in self._reasons.most_common()}

    def summary(self) -> dict[str, object]:
        classified = self.accepted + self.rejected
        return {
            "filtered_out": self.filtered_out,
            "filter_passed": self.filter_passed,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "acceptance_rate": self.accepted / classified if classified else 0.0,
            "delivered": self.delivered,
            "delivery_failed": self.delivery_failed,
            "rejections": self.rejection_counts(),
        }
