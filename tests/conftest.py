from dataclasses import dataclass, field
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from common.config import PrepConfig

SIZES = (5, 50, 200)
WORKERS = (1, 2)

# key | latency | transactions
ST_ROWS = [(1, 10, 4), (2, 20, 8), (3, 30, 12)]
# per-worker tx (tx / 32) = 100, 400, 900 -> throughput 10, 20, 30
TC_ROWS = [(1, 5, 3200), (2, 5, 12800), (3, 5, 28800)]


def write_raw(path: Path, rows: list[tuple[object, ...]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join("|".join(str(v) for v in r) + "\n" for r in rows))
    return path


@dataclass
class RecordingReporter:
    infos: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def info(self, msg: str) -> None:
        self.infos.append(msg)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def raw_store(tmp_path: Path) -> Path:
    raw = tmp_path / "raw"
    raw.mkdir()

    for size in SIZES:
        write_raw(raw / f"tuples_32_{size}_a.csv", [(2, 0, 1)])
        write_raw(raw / f"tuples_32_{size}_b.csv", [(1, 3, 3)])
        write_raw(raw / f"tc_32_{size}.csv", TC_ROWS)
        for workers in WORKERS:
            write_raw(raw / f"st_{workers}_{size}.csv", ST_ROWS)

    return raw


@pytest.fixture
def prep_config(raw_store: Path, tmp_path: Path) -> PrepConfig:
    return PrepConfig(
        raw_dir=raw_store,
        out_dir=tmp_path / "prepped",
        payload_sizes=SIZES,
        worker_counts=WORKERS,
    )
