"""Pydantic settings loaded from YAML or from flat broker parameters."""

from __future__ import annotations

import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, ValidationInfo, field_validator

from snow_connector.core.exceptions import MissingParameterError
from snow_connector.taxonomy import category_id

logger = structlog.get_logger(__name__)

DEFAULT_LOGFILE = "/var/log/centreon-broker/connector-servicenow.log"

MANDATORY_PARAMETERS = ("instance", "username", "password", "client_id", "client_secret")

# Broker parameter name -> (settings section, field name).
_PARAMETER_MAP: dict[str, tuple[str, str]] = {
    "host_status": ("filter", "host_status_filter"),
    "service_status": ("filter", "service_status_filter"),
    "hard_only": ("filter", "hard_only"),
    "acknowledged": ("filter", "acknowledged"),
    "in_downtime": ("filter", "in_downtime"),
    "element_type": ("filter", "accepted_elements"),
    "category_type": ("filter", "accepted_categories"),
    "skip_anon_events": ("filter", "skip_anonymous_events"),
    "max_buffer_size": ("buffer", "max_buffer_size"),
    "max_buffer_age": ("buffer", "max_buffer_age"),
    "instance": ("servicenow", "instance"),
    "username": ("servicenow", "username"),
    "password": ("servicenow", "password"),
    "client_id": ("servicenow", "client_id"),
    "client_secret": ("servicenow", "client_secret"),
    "logfile": ("logging", "logfile"),
    "log_level": ("logging", "level"),
}

_SECRET_PARAMETERS = frozenset({"password", "client_secret"})


def _split(value: Any) -> list[Any]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (int, float)):
        return [value]
    return list(value)


def _field_default(model: type[BaseModel], info: ValidationInfo) -> Any:
    return model.model_fields[info.field_name].default  # type: ignore[index]


def _invalid_option(model: type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    default = _field_default(model, info)
    logger.warning("invalid_option", option=info.field_name, value=value, default=default)
    return default


class FilterConfig(BaseModel):
    """Which broker events become alerts.

    Thresholds are compared as ``event_value`` vs ``threshold``:
    ``state_type >= hard_only``, ``acknowledged >= int(event.acknowledged)``
    and ``in_downtime >= event.scheduled_downtime_depth``.
    """

    model_config = ConfigDict(frozen=True)

    accepted_categories: frozenset[str] = frozenset({"neb", "storage"})
    accepted_elements: frozenset[str] = frozenset({"metric"})
    host_status_filter: frozenset[int] = frozenset({0, 1, 2})
    service_status_filter: frozenset[int] = frozenset({0, 1, 2, 3})
    hard_only: int = 1
    acknowledged: int = 0
    in_downtime: int = 0
    skip_anonymous_events: bool = True

    @field_validator("accepted_categories", "accepted_elements", mode="before")
    @classmethod
    def _parse_names(cls, value: Any, info: ValidationInfo) -> frozenset[str]:
        if value is None:
            return _invalid_option(cls, value, info)
        return frozenset(str(v).lower() for v in _split(value))

    @field_validator("accepted_categories")
    @classmethod
    def _warn_unknown_categories(cls, value: frozenset[str]) -> frozenset[str]:
        for name in sorted(value):
            if category_id(name) is None:
                logger.warning("unknown_category_configured", category=name)
        return value

    @field_validator("host_status_filter", "service_status_filter", mode="before")
    @classmethod
    def _parse_status_codes(cls, value: Any, info: ValidationInfo) -> frozenset[int]:
        if value is None:
            return _invalid_option(cls, value, info)
        codes: set[int] = set()
        for part in _split(value):
            try:
                codes.add(int(part))
            except (TypeError, ValueError):
                logger.warning(
                    "invalid_status_code_ignored",
                    option=info.field_name,
                    value=part,
                )
        return frozenset(codes)

    @field_validator(
        "hard_only", "acknowledged", "in_downtime", "skip_anonymous_events",
        mode="before",
    )
    @classmethod
    def _check_boolean_option(cls, value: Any, info: ValidationInfo) -> Any:
        """Boolean options must be 0 or 1, anything else falls back to the default."""
        default = _field_default(cls, info)
        try:
            number = int(value)
        except (TypeError, ValueError, OverflowError):
            number = None
        if isinstance(value, float) and number != value:
            number = None
        if number not in (0, 1):
            logger.warning(
                "invalid_boolean_option",
                option=info.field_name,
                value=value,
                default=default,
            )
            return default
        return number


class BufferConfig(BaseModel):
    """Outgoing buffer limits.

    Parsed for compatibility with existing broker configurations; events
    are not batched, every accepted alert is handed over immediately.
    """

    model_config = ConfigDict(frozen=True)

    max_buffer_size: int = 1
    max_buffer_age: float = 5.0

    @field_validator("max_buffer_size", "max_buffer_age", mode="before")
    @classmethod
    def _fallback_number(cls, value: Any, info: ValidationInfo) -> Any:
        default = _field_default(cls, info)
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = -1.0
        if info.field_name == "max_buffer_size" and not number.is_integer():
            number = -1.0
        if not math.isfinite(number) or number < 0:
            logger.warning(
                "invalid_buffer_option",
                option=info.field_name,
                value=value,
                default=default,
            )
            return default
        return int(number) if info.field_name == "max_buffer_size" else number


class ServiceNowConfig(BaseModel):
    """ServiceNow instance credentials, kept for the delivery side."""

    model_config = ConfigDict(frozen=True)

    instance: str = ""
    username: str = ""
    password: SecretStr = SecretStr("")
    client_id: str = ""
    client_secret: SecretStr = SecretStr("")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    format: str = "json"
    logfile: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def _broker_verbosity(cls, value: Any) -> Any:
        """Accept the broker's numeric verbosity (1 = info, 2+ = debug)."""
        text = str(value).strip()
        if text.isdigit():
            return "INFO" if int(text) <= 1 else "DEBUG"
        return text.upper()


class Settings(BaseModel):
    """Root settings container."""

    model_config = ConfigDict(frozen=True)

    filter: FilterConfig = FilterConfig()
    buffer: BufferConfig = BufferConfig()
    servicenow: ServiceNowConfig = ServiceNowConfig()
    logging: LoggingConfig = LoggingConfig()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        path: Path to YAML config. A missing or empty file yields defaults.

    Returns:
        Parsed Settings instance.
    """
    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if config_path.exists():
            with open(config_path) as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

    return Settings(**data)


def settings_from_parameters(
    parameters: Mapping[str, Any],
    require_credentials: bool = True,
) -> Settings:
    """Build settings from the flat key/value parameters of the broker.

    Unknown keys are logged and ignored.  Missing ServiceNow credentials
    abort startup when *require_credentials* is set.

    Raises:
        MissingParameterError: a mandatory parameter is absent or empty.
    """
    if require_credentials:
        missing = [k for k in MANDATORY_PARAMETERS if not parameters.get(k)]
        if missing:
            raise MissingParameterError(missing)

    sections: dict[str, dict[str, Any]] = {
        "filter": {},
        "buffer": {},
        "servicenow": {},
        "logging": {"logfile": DEFAULT_LOGFILE},
    }
    for name, value in parameters.items():
        target = _PARAMETER_MAP.get(name)
        shown = "********" if name in _SECRET_PARAMETERS else value
        if target is None:
            logger.info("parameter_ignored", name=name, value=shown)
            continue
        section, field = target
        sections[section][field] = value
        logger.info("parameter_accepted", name=name, value=shown)

    return Settings(**sections)
