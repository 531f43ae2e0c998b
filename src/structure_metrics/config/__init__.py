"""Configuration for structure-metrics."""

from .settings import EngineSettings

__all__ = ["EngineSettings"]
