from pathlib import Path

from common.constants import STAGE_LAT_VS_TP, STAGE_ST, STAGE_TC, STAGE_TUPLES
from common.reporting import NullReporter, Reporter
from common.results import PairFailure, PipelineOutput
from common.types import PairKey
from export.paths import OutputPaths
from export.plot import plot_scaling_curves
from export.writers import write_rows


def save_all_artifacts(
    results: PipelineOutput,
    paths: OutputPaths,
    *,
    plot: bool = False,
    reporter: Reporter | None = None,
) -> Path | None:
    """
    Persist all prepped tables (and optionally the scaling plots).
    Returns the latency plot path if it was generated.
    """
    rep: Reporter = reporter if reporter is not None else NullReporter()

    paths.out_dir.mkdir(parents=True, exist_ok=True)
    rep.info(f"Writing outputs to: {paths.out_dir}")

    _remove_stale(results.failures, paths, rep)
    _write_prepared(results, paths)
    _write_lat_vs_tp(results, paths)
    _write_scaling(results, paths)

    if not plot:
        return None
    return _write_plots(results, paths)


def stale_output(failure: PairFailure, paths: OutputPaths) -> Path | None:
    """
    The per-pair file a failed stage would have produced.
    Scaling files are always rewritten, so they are never stale.
    """
    if failure.stage == STAGE_TUPLES:
        return paths.tuples_csv(failure.size)
    if failure.stage == STAGE_TC:
        return paths.tc_csv(failure.size)
    if failure.workers is None:
        return None

    pair = PairKey(workers=failure.workers, size=failure.size)
    if failure.stage == STAGE_ST:
        return paths.st_csv(pair)
    if failure.stage == STAGE_LAT_VS_TP:
        return paths.lat_vs_tp_csv(pair)
    return None


def _remove_stale(
    failures: tuple[PairFailure, ...], paths: OutputPaths, rep: Reporter
) -> None:
    for failure in failures:
        stale = stale_output(failure, paths)
        if stale is not None and stale.exists():
            stale.unlink()
            rep.info(f"Removed stale output: {stale.name}")


def _write_prepared(results: PipelineOutput, paths: OutputPaths) -> None:
    prep = results.prepared

    for size, df in prep.tuples.items():
        write_rows(df, paths.tuples_csv(size))
    for size, df in prep.tc.items():
        write_rows(df, paths.tc_csv(size))
    for pair, df in prep.st.items():
        write_rows(df, paths.st_csv(pair))


def _write_lat_vs_tp(results: PipelineOutput, paths: OutputPaths) -> None:
    for pair, lvt in results.lat_vs_tp.items():
        write_rows(lvt.joined, paths.lat_vs_tp_csv(pair))


def _write_scaling(results: PipelineOutput, paths: OutputPaths) -> None:
    for workers, curve in results.scaling.latency.items():
        write_rows(curve, paths.scaling_lat_csv(workers))
    for workers, curve in results.scaling.throughput.items():
        write_rows(curve, paths.scaling_tp_csv(workers))


def _write_plots(results: PipelineOutput, paths: OutputPaths) -> Path | None:
    plot_scaling_curves(
        results.scaling.throughput,
        out_path=paths.scaling_tp_png,
        ylabel="Throughput",
        title="Throughput scaling",
    )
    return plot_scaling_curves(
        results.scaling.latency,
        out_path=paths.scaling_lat_png,
        ylabel="Mean latency",
        title="Latency scaling",
    )
