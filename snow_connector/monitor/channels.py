"""Alert sinks: where accepted alerts are handed over for delivery."""

from __future__ import annotations

import abc

import structlog

from snow_connector.core.types import NormalizedAlert

logger = structlog.get_logger(__name__)


class AlertSink(abc.ABC):
    """Base class for alert delivery."""

    @abc.abstractmethod
    def deliver(self, alert: NormalizedAlert) -> bool:
        """Hand over one alert. Returns True on success."""

    def close(self) -> None:
        """Release resources. Nothing to do by default."""


class LogSink(AlertSink):
    """Writes alerts to the structured log instead of a remote API."""

    def __init__(self, logger_name: str = "alert_log") -> None:
        self._logger = structlog.get_logger(logger_name)

    def deliver(self, alert: NormalizedAlert) -> bool:
        self._logger.info("alert_ready", **alert.model_dump(mode="json"))
        return True
