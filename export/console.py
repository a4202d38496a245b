import pandas as pd

from analysis import dfkeys as K
from common.reporting import PrintReporter, Reporter
from common.results import PairFailure


class SummaryPresenter:
    """
    Prints text summaries through a Reporter.
    """

    def __init__(self, reporter: Reporter | None = None):
        self.reporter: Reporter = reporter if reporter is not None else PrintReporter()

    def present(
        self,
        summary: pd.DataFrame,
        failures: tuple[PairFailure, ...],
        *,
        skipped_rows: int = 0,
    ) -> None:
        rep = self.reporter
        rep.info("\n" + "=" * 60)
        rep.info("SCALING SUMMARY")
        rep.info("=" * 60)

        if summary.empty:
            rep.info("No data found.")
        else:
            for workers, grp in summary.groupby(K.WORKERS, sort=True):
                rep.info(f"\n--- {workers} worker(s) ---")
                rep.info(grp.drop(columns=[K.WORKERS]).to_string(index=False))

        if skipped_rows:
            rep.info(f"\nSkipped {skipped_rows} malformed raw row(s)")

        self._present_failures(failures)

    def _present_failures(self, failures: tuple[PairFailure, ...]) -> None:
        if not failures:
            return

        self.reporter.info(f"\n--- {len(failures)} failed stage(s) ---")
        for failure in failures:
            self.reporter.info(failure.describe())
