import pandas as pd

from analysis import dfkeys as K
from analysis.lat_vs_tp import compose_lat_vs_tp, throughput_samples
from analysis.sorted import SortedFrame


def _measurements(rows: list[tuple[float, float, float]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=[K.KEY, K.LATENCY, K.PER_WORKER_TX])


ST = _measurements([(1, 10, 1), (2, 10, 1), (3, 20, 1)])
TC = _measurements([(1, 5, 100), (2, 5, 200), (3, 5, 100), (4, 5, 999)])


def test_throughput_is_tc_transactions_over_st_latency():
    samples = throughput_samples(SortedFrame(ST), SortedFrame(TC))

    assert samples.tolist() == [10.0, 20.0, 5.0]


def test_distributions_are_aligned_on_rank():
    res = compose_lat_vs_tp(ST, TC)

    assert res.latency_dist.values.tolist() == [[10, 2, 0], [20, 1, 2]]
    assert res.throughput_dist.values.tolist() == [[5, 1, 0], [10, 1, 1], [20, 1, 2]]
    assert res.joined.values.tolist() == [
        [10, 2, 0, 5, 1, 0],
        [20, 1, 2, 20, 1, 2],
    ]


def test_no_common_keys_gives_empty_table():
    tc = _measurements([(7, 5, 100)])

    res = compose_lat_vs_tp(ST, tc)

    assert res.throughput_dist.empty
    assert res.joined.empty
    assert not res.latency_dist.empty


def test_composer_sorts_frames_by_key():
    st = ST.iloc[::-1].reset_index(drop=True)
    tc = TC.iloc[[3, 1, 0, 2]].reset_index(drop=True)

    res = compose_lat_vs_tp(st, tc)

    assert res.joined.values.tolist() == compose_lat_vs_tp(ST, TC).joined.values.tolist()
