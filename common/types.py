from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

type PayloadSize = int
type WorkerCount = int
type DatasetSize = int
type Stage = str


class RawLine(NamedTuple):
    path: Path
    lineno: int
    fields: list[str]


@dataclass(frozen=True, slots=True)
class PairKey:
    workers: WorkerCount
    size: PayloadSize

    def __str__(self) -> str:
        return f"workers={self.workers} size={self.size}"
