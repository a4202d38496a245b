from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable

import pandas as pd

from analysis.lat_vs_tp import LatVsTp, compose_lat_vs_tp
from analysis.scaling import (
    ScalingPoint,
    aggregate_throughput,
    mean_latency,
    scaling_curve,
)
from common.config import PrepConfig, validate_config
from common.constants import (
    STAGE_LAT_VS_TP,
    STAGE_SCALING_LAT,
    STAGE_SCALING_TP,
    STAGE_ST,
    STAGE_TC,
    STAGE_TUPLES,
)
from common.errors import DependencyError, MissingInputError, PrepError
from common.reporting import NullReporter, Reporter
from common.results import PairFailure, PipelineOutput, PreparedInputs, ScalingCurves
from common.types import PairKey, PayloadSize, Stage, WorkerCount
from parsers.measurements import parse_st, parse_tc
from parsers.rows import ParsedRows
from parsers.tuples import parse_tuples


@dataclass(slots=True)
class FailureLog:
    """
    Per-pair error boundary: a failing (workers, size) pair is recorded and
    its siblings keep running.
    """

    reporter: Reporter
    failures: list[PairFailure] = field(default_factory=list)

    def _record(
        self, stage: Stage, size: PayloadSize, workers: WorkerCount | None, e: Exception
    ) -> None:
        failure = PairFailure(stage=stage, size=size, workers=workers, error=e)
        self.failures.append(failure)
        self.reporter.warning(failure.describe())

    def guard[T](
        self,
        stage: Stage,
        size: PayloadSize,
        workers: WorkerCount | None,
        fn: Callable[[], T],
    ) -> T | None:
        try:
            return fn()
        except (PrepError, OSError) as e:
            self._record(stage, size, workers, e)
            return None

    def skip(
        self, stage: Stage, size: PayloadSize, workers: WorkerCount | None, missing: str
    ) -> None:
        self._record(stage, size, workers, DependencyError(f"{missing} unavailable"))


def _note_skipped(rep: Reporter, label: str, parsed: ParsedRows) -> int:
    if parsed.skipped:
        rep.warning(f"{label}: skipped {parsed.skipped} malformed row(s)")
    return parsed.skipped


def _prepare_inputs(cfg: PrepConfig, log: FailureLog) -> PreparedInputs:
    """
    Normalizes every raw tuples/tc/st file of the grid.
    """
    rep = log.reporter
    skipped = 0
    ref = cfg.reference_workers

    tuples: dict[PayloadSize, pd.DataFrame] = {}
    for size in cfg.payload_sizes:
        parsed = log.guard(
            STAGE_TUPLES,
            size,
            None,
            partial(parse_tuples, cfg.raw_dir, size, ref_workers=ref, strict=cfg.strict),
        )
        if parsed is not None:
            skipped += _note_skipped(rep, f"tuples size={size}", parsed)
            tuples[size] = parsed.frame

    tc: dict[PayloadSize, pd.DataFrame] = {}
    for size in cfg.payload_sizes:
        parsed = log.guard(
            STAGE_TC,
            size,
            ref,
            partial(parse_tc, cfg.raw_dir, size, ref_workers=ref, strict=cfg.strict),
        )
        if parsed is not None:
            skipped += _note_skipped(rep, f"tc size={size}", parsed)
            tc[size] = parsed.frame

    st: dict[PairKey, pd.DataFrame] = {}
    for size in cfg.payload_sizes:
        for workers in cfg.worker_counts:
            parsed = log.guard(
                STAGE_ST,
                size,
                workers,
                partial(parse_st, cfg.raw_dir, workers, size, strict=cfg.strict),
            )
            if parsed is not None:
                pair = PairKey(workers=workers, size=size)
                skipped += _note_skipped(rep, f"st {pair}", parsed)
                st[pair] = parsed.frame

    return PreparedInputs(tuples=tuples, tc=tc, st=st, skipped_rows=skipped)


def _build_lat_vs_tp(
    cfg: PrepConfig, prepared: PreparedInputs, log: FailureLog
) -> dict[PairKey, LatVsTp]:
    out: dict[PairKey, LatVsTp] = {}

    for size in cfg.payload_sizes:
        tc = prepared.tc.get(size)
        for workers in cfg.worker_counts:
            pair = PairKey(workers=workers, size=size)
            st = prepared.st.get(pair)

            if st is None:
                log.skip(STAGE_LAT_VS_TP, size, workers, "prepped st")
                continue
            if tc is None:
                log.skip(STAGE_LAT_VS_TP, size, workers, "prepped tc")
                continue

            res = log.guard(
                STAGE_LAT_VS_TP, size, workers, partial(compose_lat_vs_tp, st, tc)
            )
            if res is not None:
                out[pair] = res

    return out


def _scaling_latency(
    cfg: PrepConfig, prepared: PreparedInputs, log: FailureLog
) -> dict[WorkerCount, pd.DataFrame]:
    curves: dict[WorkerCount, pd.DataFrame] = {}

    for workers in cfg.worker_counts:
        points: list[ScalingPoint] = []
        for size in cfg.payload_sizes:
            st = prepared.st.get(PairKey(workers=workers, size=size))
            if st is None:
                log.skip(STAGE_SCALING_LAT, size, workers, "prepped st")
                continue

            mean = log.guard(STAGE_SCALING_LAT, size, workers, partial(mean_latency, st))
            if mean is not None:
                points.append(ScalingPoint(cfg.dataset_size(size), mean))

        curves[workers] = scaling_curve(points)

    return curves


def _scaling_throughput(
    cfg: PrepConfig, lat_vs_tp: dict[PairKey, LatVsTp], log: FailureLog
) -> dict[WorkerCount, pd.DataFrame]:
    curves: dict[WorkerCount, pd.DataFrame] = {}

    for workers in cfg.worker_counts:
        points: list[ScalingPoint] = []
        for size in cfg.payload_sizes:
            lvt = lat_vs_tp.get(PairKey(workers=workers, size=size))
            if lvt is None:
                log.skip(STAGE_SCALING_TP, size, workers, "lat-vs-tp table")
                continue

            tp = log.guard(
                STAGE_SCALING_TP,
                size,
                workers,
                partial(aggregate_throughput, lvt.joined),
            )
            if tp is not None:
                points.append(ScalingPoint(cfg.dataset_size(size), tp))

        curves[workers] = scaling_curve(points)

    return curves


def execute_pipeline(cfg: PrepConfig, *, reporter: Reporter | None = None) -> PipelineOutput:
    """
    Orchestrates the prep pipeline: Normalize -> Lat-vs-Tp -> Scaling.

    Raises ConfigError for an unusable grid and MissingInputError when the raw
    directory itself is absent; anything narrower is recorded per pair.
    """
    rep: Reporter = reporter if reporter is not None else NullReporter()

    validate_config(cfg)
    unused = cfg.unused_dataset_sizes()
    if unused:
        rep.warning(
            f"dataset size mapping declares payload size(s) {list(unused)} "
            f"that are not in the iterated sizes {list(cfg.payload_sizes)}"
        )

    if not cfg.raw_dir.is_dir():
        raise MissingInputError(cfg.raw_dir, "raw directory")

    log = FailureLog(reporter=rep)

    rep.info("1. Normalizing raw tuples/tc/st files...")
    prepared = _prepare_inputs(cfg, log)

    rep.info("2. Joining latency and throughput distributions...")
    lat_vs_tp = _build_lat_vs_tp(cfg, prepared, log)

    rep.info("3. Aggregating scaling curves...")
    scaling = ScalingCurves(
        latency=_scaling_latency(cfg, prepared, log),
        throughput=_scaling_throughput(cfg, lat_vs_tp, log),
    )

    return PipelineOutput(
        prepared=prepared,
        lat_vs_tp=lat_vs_tp,
        scaling=scaling,
        failures=tuple(log.failures),
    )
