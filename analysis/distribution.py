import math

import numpy as np
import pandas as pd

from analysis import dfkeys as K

DISTRIBUTION_COLS = pd.Index([K.VALUE, K.COUNT, K.CUM_BEFORE])


def build_distribution(values: pd.Series) -> pd.DataFrame:
    """
    Frequency table of values: one (value, count, cum_before) row per distinct
    value, ascending. cum_before is the number of samples strictly smaller
    than value (exclusive running sum of count).
    """
    v = values.dropna()
    if v.empty:
        return pd.DataFrame(
            {
                K.VALUE: pd.Series(dtype="float64"),
                K.COUNT: pd.Series(dtype="int64"),
                K.CUM_BEFORE: pd.Series(dtype="int64"),
            }
        )

    counts = v.value_counts(sort=False).sort_index()

    out = pd.DataFrame(
        {
            K.VALUE: counts.index.to_numpy(),
            K.COUNT: counts.to_numpy(dtype="int64"),
        }
    )
    out[K.CUM_BEFORE] = out[K.COUNT].cumsum() - out[K.COUNT]
    return out.reindex(columns=DISTRIBUTION_COLS)


def total_samples(dist: pd.DataFrame) -> int:
    if dist.empty:
        return 0
    return int(dist[K.COUNT].sum())


def percentile_value(dist: pd.DataFrame, q: float) -> float:
    """
    Value at rank fraction q (0..1) of a distribution, using cum_before as
    the rank index. NaN for an empty distribution.
    """
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"q must be within [0, 1], got {q}")

    n = total_samples(dist)
    if n == 0:
        return float("nan")

    rank = min(math.floor(q * n), n - 1)
    cum = dist[K.CUM_BEFORE].to_numpy()
    pos = int(np.searchsorted(cum, rank, side="right")) - 1
    return float(dist[K.VALUE].iloc[pos])
