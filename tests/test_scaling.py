import pandas as pd
import pytest

from analysis import dfkeys as K
from analysis.scaling import (
    ScalingPoint,
    aggregate_throughput,
    mean_latency,
    ratio_of_sums,
    scaling_curve,
)
from common.errors import EmptyInputError


def test_throughput_is_ratio_of_sums_not_mean_of_ratios():
    # (lat value, lat count, rank, tp value, tp count, rank)
    lvt = pd.DataFrame([[2, 1, 0, 10, 1, 0], [8, 1, 1, 20, 1, 1]])
    lvt.columns = pd.RangeIndex(1, 7)

    assert aggregate_throughput(lvt) == 3
    mean_of_ratios = (10 / 2 + 20 / 8) / 2
    assert aggregate_throughput(lvt) != round(mean_of_ratios)


def test_ratio_of_sums_on_selected_columns():
    frame = pd.DataFrame({"den": [1, 3], "num": [5, 5]})

    assert ratio_of_sums(frame, numerator=2, denominator=1) == 2


def test_ratio_of_sums_rejects_empty_and_zero_denominator():
    with pytest.raises(EmptyInputError):
        ratio_of_sums(pd.DataFrame({"a": [], "b": []}), numerator=1, denominator=2)

    with pytest.raises(EmptyInputError):
        ratio_of_sums(pd.DataFrame({"a": [1], "b": [0]}), numerator=1, denominator=2)


def test_mean_latency_averages_second_column():
    st = pd.DataFrame({K.KEY: [1, 2, 3], K.LATENCY: [10, 20, 45], K.PER_WORKER_TX: [1, 1, 1]})

    assert mean_latency(st) == 25.0


def test_mean_latency_of_empty_frame():
    with pytest.raises(EmptyInputError):
        mean_latency(pd.DataFrame({K.KEY: [], K.LATENCY: []}))


def test_scaling_curve_rows():
    curve = scaling_curve([ScalingPoint(100000, 12.5), ScalingPoint(250000, 14.0)])

    assert list(curve.columns) == [K.DATASET_SIZE, K.METRIC]
    assert curve.values.tolist() == [[100000, 12.5], [250000, 14.0]]
    assert scaling_curve([]).empty
