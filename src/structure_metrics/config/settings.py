"""Engine settings, loadable from YAML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigError
from .defaults import DEFAULT_MAX_WORKERS, DEFAULT_PARALLEL_THRESHOLD


def _is_int(value: Any) -> bool:
    # bool is an int subclass; reject it explicitly
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EngineSettings:
    """Execution settings for :class:`~structure_metrics.MetricsEngine`.

    Settings only affect how stages are scheduled, never the computed
    values: a parallel run returns exactly what a sequential run returns.

    Attributes:
        max_workers: Thread pool size for independent stages; 1 disables it
        parallel_threshold: Minimum type count before the pool is used
    """

    max_workers: int = DEFAULT_MAX_WORKERS
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD

    def __post_init__(self) -> None:
        if not _is_int(self.max_workers) or self.max_workers < 1:
            raise ConfigError(
                f"max_workers must be a positive integer, got {self.max_workers!r}",
                {"max_workers": self.max_workers},
            )
        if not _is_int(self.parallel_threshold) or self.parallel_threshold < 0:
            raise ConfigError(
                "parallel_threshold must be a non-negative integer, "
                f"got {self.parallel_threshold!r}",
                {"parallel_threshold": self.parallel_threshold},
            )

    @classmethod
    def load(cls, path: Path) -> EngineSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to YAML settings file

        Returns:
            EngineSettings instance; defaults if the file does not exist

        Raises:
            ConfigError: If the file is not valid YAML or holds invalid values
        """
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid settings file {path}: {e}", {"path": str(path)}) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Settings file {path} must contain a mapping", {"path": str(path)}
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineSettings:
        """Create settings from a dictionary.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {"max_workers", "parallel_threshold"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown settings: {', '.join(unknown)}", {"unknown": unknown}
            )

        return cls(
            max_workers=data.get("max_workers", DEFAULT_MAX_WORKERS),
            parallel_threshold=data.get(
                "parallel_threshold", DEFAULT_PARALLEL_THRESHOLD
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_workers": self.max_workers,
            "parallel_threshold": self.parallel_threshold,
        }

    def save(self, path: Path) -> None:
        """Save settings to a YAML file.

        Args:
            path: Path to save settings
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def use_parallel(self, type_count: int) -> bool:
        """Whether a model with ``type_count`` types should use the pool."""
        return self.max_workers > 1 and type_count >= self.parallel_threshold
