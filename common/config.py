from dataclasses import dataclass, field
from pathlib import Path

from common.constants import (
    DEFAULT_DATASET_SIZES,
    DEFAULT_PAYLOAD_SIZES,
    DEFAULT_REFERENCE_WORKERS,
    DEFAULT_WORKER_COUNTS,
)
from common.errors import ConfigError
from common.types import DatasetSize, PayloadSize, WorkerCount


@dataclass(frozen=True, slots=True)
class PrepConfig:
    raw_dir: Path
    out_dir: Path = Path("prepped")
    payload_sizes: tuple[PayloadSize, ...] = DEFAULT_PAYLOAD_SIZES
    worker_counts: tuple[WorkerCount, ...] = DEFAULT_WORKER_COUNTS
    size_to_dataset_size: dict[PayloadSize, DatasetSize] = field(
        default_factory=lambda: dict(DEFAULT_DATASET_SIZES)
    )
    reference_workers: WorkerCount = DEFAULT_REFERENCE_WORKERS
    strict: bool = False

    def dataset_size(self, size: PayloadSize) -> DatasetSize:
        try:
            return self.size_to_dataset_size[size]
        except KeyError:
            raise ConfigError(
                f"Payload size {size} has no dataset size mapping"
            ) from None

    def unused_dataset_sizes(self) -> tuple[PayloadSize, ...]:
        """
        Payload sizes that carry a dataset size mapping but are never iterated.
        """
        iterated = set(self.payload_sizes)
        return tuple(s for s in sorted(self.size_to_dataset_size) if s not in iterated)


@dataclass(frozen=True, slots=True)
class AppConfig:
    cfg: PrepConfig
    plot: bool = False
    open_plot: bool = False
    log_level: str | None = None


def validate_config(cfg: PrepConfig) -> None:
    """
    Fail fast on a grid that the stages could not run consistently.
    """
    if not cfg.payload_sizes:
        raise ConfigError("At least one payload size is required")
    if not cfg.worker_counts:
        raise ConfigError("At least one worker count is required")

    for name, values in (
        ("payload size", cfg.payload_sizes),
        ("worker count", cfg.worker_counts),
    ):
        if len(set(values)) != len(values):
            raise ConfigError(f"Duplicate {name} in {values}")
        bad = [v for v in values if v <= 0]
        if bad:
            raise ConfigError(f"Non-positive {name}: {bad}")

    if cfg.reference_workers <= 0:
        raise ConfigError(f"Non-positive reference workers: {cfg.reference_workers}")

    unmapped = [s for s in cfg.payload_sizes if s not in cfg.size_to_dataset_size]
    if unmapped:
        raise ConfigError(f"Payload sizes without a dataset size mapping: {unmapped}")
