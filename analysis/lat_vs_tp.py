from dataclasses import dataclass

import pandas as pd

from analysis.distribution import build_distribution
from analysis.dfutils import column, select_columns
from analysis.join import merge_join, ratio_column
from analysis.sorted import SortedFrame

# Positions inside an st ⋈ tc row: (key, latency, per_worker_tx) x 2
ST_LATENCY_COL = 2
TC_PER_WORKER_TX_COL = 6

# Distributions are joined on cum_before
RANK_COL = 3


@dataclass(frozen=True, slots=True)
class LatVsTp:
    latency_dist: pd.DataFrame
    throughput_dist: pd.DataFrame
    joined: pd.DataFrame


def throughput_samples(st: SortedFrame, tc: SortedFrame) -> pd.Series:
    """
    Instantaneous throughput per request present in both files:
    round(tc per-worker transactions / st latency).
    """
    joined = merge_join(st, tc)
    pairs = select_columns(joined, [ST_LATENCY_COL, TC_PER_WORKER_TX_COL])
    return ratio_column(pairs, numerator=2, denominator=1)


def compose_lat_vs_tp(st_frame: pd.DataFrame, tc_frame: pd.DataFrame) -> LatVsTp:
    """
    Align latency and throughput percentile-wise for one (workers, size) pair.

    Both inputs are normalized measurement frames; they are stable-sorted on
    key before joining, which leaves already sorted frames unchanged.
    An st/tc pair without common keys yields an empty join, not an error.
    """
    st = SortedFrame.sort(st_frame, key_col=1)
    tc = SortedFrame.sort(tc_frame, key_col=1)

    lat_dist = build_distribution(column(st_frame, ST_LATENCY_COL))
    tp_dist = build_distribution(throughput_samples(st, tc))

    joined = merge_join(
        SortedFrame(lat_dist, key_col=RANK_COL),
        SortedFrame(tp_dist, key_col=RANK_COL),
    )
    return LatVsTp(latency_dist=lat_dist, throughput_dist=tp_dist, joined=joined)
