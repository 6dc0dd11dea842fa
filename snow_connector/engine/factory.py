"""Convenience factory for wiring the classification engine."""

from __future__ import annotations

from snow_connector.cache.names import NameCache
from snow_connector.core.config import Settings
from snow_connector.engine.classifier import ClassificationEngine
from snow_connector.monitor.channels import AlertSink, LogSink
from snow_connector.monitor.metrics import ClassificationStats


def create_engine(
    settings: Settings,
    names: NameCache,
    sink: AlertSink | None = None,
) -> ClassificationEngine:
    """Build an engine from settings; alerts go to the log unless a sink is given."""
    return ClassificationEngine(
        config=settings.filter,
        names=names,
        sink=sink if sink is not None else LogSink(),
        stats=ClassificationStats(),
    )
