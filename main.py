import logging
import sys

from analysis.summary import build_run_summary
from cli import parse_cli_args
from common.errors import ConfigError, MissingInputError
from common.reporting import LoggingReporter, PrintReporter, Reporter
from export.artifacts import save_all_artifacts
from export.console import SummaryPresenter
from export.open_file import open_file
from export.paths import build_output_paths
from pipeline import execute_pipeline


def _make_reporter(log_level: str | None) -> Reporter:
    if log_level is None:
        return PrintReporter()

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return LoggingReporter()


def main(argv: list[str] | None = None) -> int:
    app = parse_cli_args(argv)
    rep = _make_reporter(app.log_level)
    cfg = app.cfg

    try:
        results = execute_pipeline(cfg, reporter=rep)
    except ConfigError as e:
        rep.warning(f"invalid configuration: {e}")
        return 2
    except MissingInputError as e:
        rep.warning(str(e))
        return 1

    paths = build_output_paths(cfg.out_dir, cfg.reference_workers)
    plot_path = save_all_artifacts(results, paths, plot=app.plot, reporter=rep)

    SummaryPresenter(rep).present(
        build_run_summary(results, cfg),
        results.failures,
        skipped_rows=results.prepared.skipped_rows,
    )

    if plot_path is not None:
        rep.info(f"\nPlot saved to: {plot_path}")
        if app.open_plot:
            open_file(plot_path, reporter=rep)

    return 0 if results.ok else 1


if __name__ == "__main__":
    sys.exit(main())
