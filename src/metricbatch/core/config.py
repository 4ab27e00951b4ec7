"""Output configuration."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from metricbatch.core.aggregate import HIGH_RESOLUTION, STANDARD_RESOLUTION


def _flag(data: Mapping[str, Any], key: str) -> bool:
    """Read an optional boolean setting, defaulting to False."""
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a bool, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class OutputConfig:
    """Settings for converting and writing metrics.

    Attributes:
        namespace: Target namespace for all datums.
        high_resolution_metrics: Store datums at 1-second resolution.
        write_statistics: Group min/max/sum/count fields into statistic sets.
    """

    namespace: str
    high_resolution_metrics: bool = False
    write_statistics: bool = False

    @property
    def storage_resolution(self) -> int:
        """Storage resolution in seconds (1 or 60)."""
        return HIGH_RESOLUTION if self.high_resolution_metrics else STANDARD_RESOLUTION

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OutputConfig":
        """Build a config from loaded settings, ignoring unknown keys.

        Args:
            data: Settings keyed by namespace, high_resolution_metrics and
                write_statistics.

        Raises:
            KeyError: If namespace is missing.
            TypeError: If a flag is present but not a bool.
        """
        return cls(
            namespace=data["namespace"],
            high_resolution_metrics=_flag(data, "high_resolution_metrics"),
            write_statistics=_flag(data, "write_statistics"),
        )
