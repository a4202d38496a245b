from dataclasses import dataclass
from pathlib import Path

from common.types import PairKey, PayloadSize, WorkerCount


@dataclass(frozen=True, slots=True)
class OutputPaths:
    out_dir: Path
    reference_workers: WorkerCount

    # tables
    def tuples_csv(self, size: PayloadSize) -> Path:
        return self.out_dir / f"prepped_tuples_{self.reference_workers}_{size}.csv"

    def tc_csv(self, size: PayloadSize) -> Path:
        return self.out_dir / f"prepped_tc_{self.reference_workers}_{size}.csv"

    def st_csv(self, pair: PairKey) -> Path:
        return self.out_dir / f"prepped_st_{pair.workers}_{pair.size}.csv"

    def lat_vs_tp_csv(self, pair: PairKey) -> Path:
        return self.out_dir / f"prepped_lat_vs_tp_{pair.workers}_{pair.size}.csv"

    def scaling_lat_csv(self, workers: WorkerCount) -> Path:
        return self.out_dir / f"prepped_scaling_lat_{workers}.csv"

    def scaling_tp_csv(self, workers: WorkerCount) -> Path:
        return self.out_dir / f"prepped_scaling_tp_{workers}.csv"

    # plots
    @property
    def scaling_lat_png(self) -> Path:
        return self.out_dir / "scaling_lat.png"

    @property
    def scaling_tp_png(self) -> Path:
        return self.out_dir / "scaling_tp.png"


def build_output_paths(out_dir: Path, reference_workers: WorkerCount) -> OutputPaths:
    return OutputPaths(out_dir=out_dir.resolve(), reference_workers=reference_workers)
