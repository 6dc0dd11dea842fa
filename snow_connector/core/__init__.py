"""Core module — config, types, logging, exceptions."""

from snow_connector.core.config import (
    BufferConfig,
    FilterConfig,
    LoggingConfig,
    ServiceNowConfig,
    Settings,
    load_settings,
    settings_from_parameters,
)
from snow_connector.core.exceptions import (
    ConfigurationError,
    ConnectorError,
    MissingParameterError,
)
from snow_connector.core.logging import setup_logging
from snow_connector.core.types import (
    AlertSeverity,
    BamEvent,
    BrokerEvent,
    ElementKind,
    EventVerdict,
    HostStatusEvent,
    MetricEvent,
    NormalizedAlert,
    Rejection,
    RejectionReason,
    RuleVerdict,
    ServiceStatusEvent,
    parse_event,
)

__all__ = [
    "AlertSeverity",
    "BamEvent",
    "BrokerEvent",
    "BufferConfig",
    "ConfigurationError",
    "ConnectorError",
    "ElementKind",
    "EventVerdict",
    "FilterConfig",
    "HostStatusEvent",
    "LoggingConfig",
    "MetricEvent",
    "MissingParameterError",
    "NormalizedAlert",
    "Rejection",
    "RejectionReason",
    "RuleVerdict",
    "ServiceNowConfig",
    "ServiceStatusEvent",
    "Settings",
    "load_settings",
    "parse_event",
    "settings_from_parameters",
    "setup_logging",
]
