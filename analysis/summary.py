from typing import Callable

import numpy as np
import pandas as pd

from analysis import dfkeys as K
from analysis.distribution import percentile_value
from analysis.scaling import aggregate_throughput, mean_latency
from common.config import PrepConfig
from common.errors import EmptyInputError
from common.results import PipelineOutput
from common.types import PairKey

SUMMARY_COLS = pd.Index(
    [
        K.WORKERS,
        K.SIZE,
        K.DATASET_SIZE,
        K.MEAN_LATENCY,
        K.P50_LATENCY,
        K.P99_LATENCY,
        K.THROUGHPUT,
    ]
)


def _or_nan(fn: Callable[[pd.DataFrame], float], df: pd.DataFrame) -> float:
    try:
        return float(fn(df))
    except EmptyInputError:
        return np.nan


def build_run_summary(results: PipelineOutput, cfg: PrepConfig) -> pd.DataFrame:
    """
    One row per (workers, size) pair that produced a lat-vs-tp table.
    """
    rows = []
    for workers in cfg.worker_counts:
        for size in cfg.payload_sizes:
            pair = PairKey(workers=workers, size=size)
            lvt = results.lat_vs_tp.get(pair)
            st = results.prepared.st.get(pair)
            if lvt is None or st is None:
                continue

            rows.append(
                {
                    K.WORKERS: workers,
                    K.SIZE: size,
                    K.DATASET_SIZE: cfg.dataset_size(size),
                    K.MEAN_LATENCY: _or_nan(mean_latency, st),
                    K.P50_LATENCY: percentile_value(lvt.latency_dist, 0.50),
                    K.P99_LATENCY: percentile_value(lvt.latency_dist, 0.99),
                    K.THROUGHPUT: _or_nan(aggregate_throughput, lvt.joined),
                }
            )

    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLS)
    return pd.DataFrame(rows).reindex(columns=SUMMARY_COLS)
