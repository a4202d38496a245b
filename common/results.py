from dataclasses import dataclass, field

import pandas as pd

from analysis.lat_vs_tp import LatVsTp
from common.types import PairKey, PayloadSize, Stage, WorkerCount


@dataclass(frozen=True, slots=True)
class PairFailure:
    """One stage that could not produce output for one (workers, size) pair."""

    stage: Stage
    size: PayloadSize
    workers: WorkerCount | None
    error: Exception

    def describe(self) -> str:
        who = f"size={self.size}"
        if self.workers is not None:
            who = f"workers={self.workers} {who}"
        return f"[{self.stage}] {who}: {self.error}"


@dataclass(frozen=True, slots=True)
class PreparedInputs:
    """Normalized tuples/tc/st tables, keyed by payload size or (workers, size)."""

    tuples: dict[PayloadSize, pd.DataFrame]
    tc: dict[PayloadSize, pd.DataFrame]
    st: dict[PairKey, pd.DataFrame]
    skipped_rows: int = 0


@dataclass(frozen=True, slots=True)
class ScalingCurves:
    latency: dict[WorkerCount, pd.DataFrame]
    throughput: dict[WorkerCount, pd.DataFrame]


@dataclass(frozen=True, slots=True)
class PipelineOutput:
    """Container for all artifacts produced during the run."""

    prepared: PreparedInputs
    lat_vs_tp: dict[PairKey, LatVsTp]
    scaling: ScalingCurves
    failures: tuple[PairFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures
