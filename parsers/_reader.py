from pathlib import Path
from typing import Callable, Iterable, Protocol

from common.constants import RAW_DELIMITER
from common.errors import MissingInputError
from common.types import PayloadSize, RawLine, WorkerCount

LineHandler = Callable[[RawLine], None]


class RawWalker(Protocol):
    def __call__(self, paths: Iterable[Path], *, on_line: LineHandler) -> None: ...


def tuple_shard_glob(ref_workers: WorkerCount, size: PayloadSize) -> str:
    return f"tuples_{ref_workers}_{size}_*"


def tc_path(raw_dir: Path, ref_workers: WorkerCount, size: PayloadSize) -> Path:
    return raw_dir / f"tc_{ref_workers}_{size}.csv"


def st_path(raw_dir: Path, workers: WorkerCount, size: PayloadSize) -> Path:
    return raw_dir / f"st_{workers}_{size}.csv"


def find_tuple_shards(
    raw_dir: Path, ref_workers: WorkerCount, size: PayloadSize
) -> list[Path]:
    """
    Shard files for one payload size, in the order a shell glob expands them.
    """
    pattern = tuple_shard_glob(ref_workers, size)
    shards = sorted(p for p in raw_dir.glob(pattern) if p.is_file())
    if not shards:
        raise MissingInputError(raw_dir / pattern, "no shard matches")
    return shards


def walk_raw_lines(paths: Iterable[Path], *, on_line: LineHandler) -> None:
    """
    Split every non-blank line of the given files on '|' and hand it to on_line.
    Files are read back to back, as if concatenated.
    """
    for path in paths:
        if not path.is_file():
            raise MissingInputError(path)

        with path.open("r", errors="replace") as f:
            for lineno, line in enumerate(f, start=1):
                text = line.rstrip("\r\n")
                if not text.strip():
                    continue
                on_line(
                    RawLine(
                        path=path, lineno=lineno, fields=text.split(RAW_DELIMITER)
                    )
                )
