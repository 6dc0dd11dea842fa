"""Severity mapping, alert formatting, delivery sinks and counters."""

from snow_connector.monitor.channels import AlertSink, LogSink
from snow_connector.monitor.formatters import format_alert
from snow_connector.monitor.metrics import ClassificationStats
from snow_connector.monitor.severity import (
    DEFAULT_SEVERITY,
    element_kind_for,
    map_severity,
)

__all__ = [
    "DEFAULT_SEVERITY",
    "AlertSink",
    "ClassificationStats",
    "LogSink",
    "element_kind_for",
    "format_alert",
    "map_severity",
]
