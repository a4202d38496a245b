import math
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from analysis import dfkeys as K
from analysis.dfutils import sort_full_row
from common.errors import MalformedRowError
from common.types import RawLine

_INT64 = np.iinfo(np.int64)


@dataclass(frozen=True, slots=True)
class RowSchema:
    """
    Positional layout of a raw file. tuples, tc and st files share one layout.
    """

    name: str
    columns: tuple[str, ...] = (K.KEY, K.LATENCY, K.TX)

    @property
    def field_count(self) -> int:
        return len(self.columns)


RAW_SCHEMA = RowSchema(name="raw")


@dataclass(frozen=True, slots=True)
class ParsedRows:
    frame: pd.DataFrame
    skipped: int = 0


def _to_number(raw: str) -> float | None:
    try:
        x = float(raw.strip())
    except ValueError:
        return None
    return x if math.isfinite(x) else None


def _to_key(raw: str) -> int | float | None:
    """
    Request ids stay exact integers; only non-integral keys go through float.
    """
    try:
        return int(raw.strip())
    except ValueError:
        return _to_number(raw)


def _key_series(keys: list[int | float], name: str) -> pd.Series:
    if not all(isinstance(k, int) for k in keys):
        return pd.Series(keys, dtype="float64", name=name)
    if all(_INT64.min <= k <= _INT64.max for k in keys):
        return pd.Series(keys, dtype="int64", name=name)
    # beyond int64: keep Python ints
    return pd.Series(keys, dtype="object", name=name)


@dataclass(slots=True)
class RowCollector:
    schema: RowSchema
    strict: bool = False
    keys: list[int | float] = field(default_factory=list)
    rows: list[list[float]] = field(default_factory=list)
    skipped: int = 0

    def _reject(self, line: RawLine, reason: str) -> None:
        if self.strict:
            raise MalformedRowError(line.path, line.lineno, reason)
        self.skipped += 1

    def on_line(self, line: RawLine) -> None:
        if len(line.fields) != self.schema.field_count:
            self._reject(
                line,
                f"expected {self.schema.field_count} fields for {self.schema.name}, "
                f"got {len(line.fields)}",
            )
            return

        key = _to_key(line.fields[0])
        values = [_to_number(f) for f in line.fields[1:]]
        if key is None or any(v is None for v in values):
            self._reject(line, "non-numeric field")
            return

        self.keys.append(key)
        self.rows.append([v for v in values if v is not None])

    def finalize(self) -> ParsedRows:
        key_col, *value_cols = self.schema.columns
        if not self.rows:
            frame = pd.DataFrame(columns=value_cols, dtype="float64")
            frame.insert(0, key_col, pd.Series(dtype="int64"))
        else:
            frame = pd.DataFrame(self.rows, columns=value_cols, dtype="float64")
            frame.insert(0, key_col, _key_series(self.keys, key_col))
        return ParsedRows(frame=frame, skipped=self.skipped)


def drop_zero_values(df: pd.DataFrame) -> pd.DataFrame:
    """
    Remove 'no observation' rows, i.e. rows whose second column is 0.
    """
    if df.empty:
        return df
    second = df.iloc[:, 1]
    return df.loc[second != 0].reset_index(drop=True)


def normalize_measurements(parsed: ParsedRows, *, workers: int | None) -> ParsedRows:
    """
    (key, latency, tx) -> (key, latency, tx / workers), zero rows dropped,
    sorted by the full row.
    """
    if workers is None:
        raise ValueError("workers is required to normalize measurement rows")
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")

    df = parsed.frame.copy()
    df[K.PER_WORKER_TX] = df[K.TX] / workers
    df = df.drop(columns=[K.TX])

    df = drop_zero_values(df)
    return ParsedRows(frame=sort_full_row(df), skipped=parsed.skipped)


def normalize_tuples(parsed: ParsedRows) -> ParsedRows:
    """
    Projection only: no per-worker scaling and zero rows are kept.
    """
    df = parsed.frame.loc[:, list(RAW_SCHEMA.columns)]
    return ParsedRows(frame=sort_full_row(df), skipped=parsed.skipped)
