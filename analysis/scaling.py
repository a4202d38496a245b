from dataclasses import dataclass

import pandas as pd

from analysis import dfkeys as K
from analysis.dfutils import column
from common.errors import EmptyInputError
from common.types import DatasetSize

# Positions inside a lat-vs-tp row: (lat value, lat count, rank, tp value, tp count, rank)
LVT_LATENCY_COL = 1
LVT_THROUGHPUT_COL = 4

SCALING_COLS = pd.Index([K.DATASET_SIZE, K.METRIC])


@dataclass(frozen=True, slots=True)
class ScalingPoint:
    dataset_size: DatasetSize
    metric: float


def mean_latency(st_frame: pd.DataFrame) -> float:
    """
    Arithmetic mean of the latency column of a normalized st frame.
    """
    if st_frame.empty:
        raise EmptyInputError("No latency samples to average")
    return float(column(st_frame, 2).mean())


def ratio_of_sums(
    frame: pd.DataFrame, *, numerator: int, denominator: int
) -> int:
    """
    round(sum(numerator column) / sum(denominator column)).

    This weights every row by its denominator; it is not a mean of ratios.
    """
    if frame.empty:
        raise EmptyInputError("No rows to aggregate")

    num = float(column(frame, numerator).sum())
    den = float(column(frame, denominator).sum())
    if den == 0:
        raise EmptyInputError("Denominator column sums to zero")
    return int(round(num / den))


def aggregate_throughput(lat_vs_tp: pd.DataFrame) -> int:
    return ratio_of_sums(
        lat_vs_tp, numerator=LVT_THROUGHPUT_COL, denominator=LVT_LATENCY_COL
    )


def scaling_curve(points: list[ScalingPoint]) -> pd.DataFrame:
    if not points:
        return pd.DataFrame(columns=SCALING_COLS)
    return pd.DataFrame(
        [(p.dataset_size, p.metric) for p in points], columns=SCALING_COLS
    )
