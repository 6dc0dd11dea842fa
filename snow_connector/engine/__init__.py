"""Classification engine — pre-filter and classify/write entry points."""

from snow_connector.engine.classifier import ClassificationEngine
from snow_connector.engine.factory import create_engine

__all__ = ["ClassificationEngine", "create_engine"]
