from pathlib import Path

from common.types import PayloadSize, WorkerCount
from parsers._reader import RawWalker, st_path, tc_path, walk_raw_lines
from parsers.rows import (
    RAW_SCHEMA,
    ParsedRows,
    RowCollector,
    normalize_measurements,
)


def parse_measurements(
    path: Path,
    *,
    workers: int | None,
    strict: bool = False,
    walker: RawWalker = walk_raw_lines,
) -> ParsedRows:
    """
    Read one tc/st file and return its normalized, sorted rows.
    """
    if workers is None:
        raise ValueError(f"workers is required to prepare {path.name}")

    collector = RowCollector(schema=RAW_SCHEMA, strict=strict)
    walker([path], on_line=collector.on_line)
    return normalize_measurements(collector.finalize(), workers=workers)


def parse_tc(
    raw_dir: Path, size: PayloadSize, *, ref_workers: WorkerCount, strict: bool = False
) -> ParsedRows:
    return parse_measurements(
        tc_path(raw_dir, ref_workers, size), workers=ref_workers, strict=strict
    )


def parse_st(
    raw_dir: Path, workers: WorkerCount, size: PayloadSize, *, strict: bool = False
) -> ParsedRows:
    return parse_measurements(
        st_path(raw_dir, workers, size), workers=workers, strict=strict
    )
