from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from analysis import dfkeys as K
from common.types import WorkerCount


def plot_scaling_curves(
    curves: dict[WorkerCount, pd.DataFrame],
    *,
    out_path: Path,
    ylabel: str,
    title: str = "",
) -> Path | None:
    """
    One line per worker count: dataset size on x, aggregated metric on y.
    Returns None when there is nothing to draw.
    """
    drawable = {w: c for w, c in sorted(curves.items()) if not c.empty}
    if not drawable:
        return None

    fig, ax = plt.subplots(figsize=(10, 6))
    for workers, curve in drawable.items():
        ax.plot(
            curve[K.DATASET_SIZE].to_numpy(),
            curve[K.METRIC].to_numpy(dtype="float64"),
            marker="o",
            label=f"{workers} workers",
        )

    ax.set_xlabel("Dataset size")
    ax.set_ylabel(ylabel)
    ax.set_title(title or f"{ylabel} vs dataset size")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()

    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path)
    finally:
        plt.close(fig)

    return out_path
