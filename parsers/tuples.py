from pathlib import Path

from common.types import PayloadSize, WorkerCount
from parsers._reader import RawWalker, find_tuple_shards, walk_raw_lines
from parsers.rows import RAW_SCHEMA, ParsedRows, RowCollector, normalize_tuples


def parse_tuples(
    raw_dir: Path,
    size: PayloadSize,
    *,
    ref_workers: WorkerCount,
    strict: bool = False,
    walker: RawWalker = walk_raw_lines,
) -> ParsedRows:
    """
    Concatenate every tuples shard of one payload size and normalize the result.
    """
    shards = find_tuple_shards(raw_dir, ref_workers, size)

    collector = RowCollector(schema=RAW_SCHEMA, strict=strict)
    walker(shards, on_line=collector.on_line)
    return normalize_tuples(collector.finalize())
