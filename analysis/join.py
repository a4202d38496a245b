import numpy as np
import pandas as pd

from analysis.dfutils import column, renumber_columns, safe_div
from analysis.sorted import SortedFrame


def _match_positions(
    left_keys: np.ndarray, right_keys: np.ndarray
) -> tuple[list[int], list[int]]:
    """
    Two-cursor walk over ascending key arrays.
    Returns row positions of every (left, right) pair with equal keys.
    """
    li: list[int] = []
    ri: list[int] = []

    i, j = 0, 0
    n, m = len(left_keys), len(right_keys)

    while i < n and j < m:
        lk = left_keys[i]
        rk = right_keys[j]

        if lk < rk:
            i += 1
            continue
        if rk < lk:
            j += 1
            continue

        # Extent of the equal-key run on each side
        i_end = i
        while i_end < n and left_keys[i_end] == lk:
            i_end += 1
        j_end = j
        while j_end < m and right_keys[j_end] == lk:
            j_end += 1

        for a in range(i, i_end):
            for b in range(j, j_end):
                li.append(a)
                ri.append(b)

        i, j = i_end, j_end

    return li, ri


def merge_join(left: SortedFrame, right: SortedFrame) -> pd.DataFrame:
    """
    Inner equi-join of two sorted frames on their key columns.

    Output columns are all left columns followed by all right columns,
    numbered from 1. Rows sharing a key produce the full cross product,
    ordered by key, then left row order, then right row order.
    """
    li, ri = _match_positions(left.keys(), right.keys())

    lpart = left.frame.iloc[li].reset_index(drop=True)
    rpart = right.frame.iloc[ri].reset_index(drop=True)

    joined = pd.concat([lpart, rpart], axis=1, ignore_index=True)
    return renumber_columns(joined)


def ratio_column(df: pd.DataFrame, *, numerator: int, denominator: int) -> pd.Series:
    """
    Per-row numerator / denominator rounded to the nearest integer (ties to even).
    Rows with a zero denominator are dropped.
    """
    if df.empty:
        return pd.Series(dtype="float64")

    ratio = safe_div(
        column(df, numerator).astype("float64"),
        column(df, denominator).astype("float64"),
    )
    return np.round(ratio.dropna()).reset_index(drop=True)
