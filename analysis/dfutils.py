from typing import Sequence

import numpy as np
import pandas as pd


def column(df: pd.DataFrame, idx: int) -> pd.Series:
    """
    1-based positional column access.
    """
    if idx < 1 or idx > df.shape[1]:
        raise IndexError(f"Column {idx} out of range for {df.shape[1]} columns")
    return df.iloc[:, idx - 1]


def renumber_columns(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out.columns = pd.RangeIndex(1, df.shape[1] + 1)
    return out


def select_columns(df: pd.DataFrame, cols: Sequence[int]) -> pd.DataFrame:
    """
    Project a frame onto the given 1-based columns, renumbering the result.
    """
    for c in cols:
        if c < 1 or c > df.shape[1]:
            raise IndexError(f"Column {c} out of range for {df.shape[1]} columns")
    return renumber_columns(df.iloc[:, [c - 1 for c in cols]])


def sort_full_row(df: pd.DataFrame) -> pd.DataFrame:
    """
    Ascending numeric sort on every column, first column most significant.
    """
    if df.empty or df.shape[1] == 0:
        return df.reset_index(drop=True)
    return df.sort_values(by=list(df.columns), kind="mergesort").reset_index(
        drop=True
    )


def safe_div(numerator: pd.Series, denominator: pd.Series) -> pd.Series:
    """
    Performs division while safely handling divide-by-zero.
    Zero denominators yield NaN instead of inf.
    """
    return numerator / denominator.replace(0.0, np.nan)
