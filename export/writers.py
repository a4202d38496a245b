import math
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

from common.constants import OUT_DELIMITER


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def format_number(x: object) -> str:
    """
    awk-style number output: integral values without a decimal point,
    everything else with %.6g.
    """
    if isinstance(x, str):
        return x
    if isinstance(x, (bool, np.bool_)):
        return str(int(x))
    if isinstance(x, (int, np.integer)):
        return str(int(x))

    f = float(x)  # type: ignore[arg-type]
    if math.isfinite(f) and f.is_integer() and abs(f) < 1e16:
        return str(int(f))
    return f"{f:.6g}"


def format_rows(df: pd.DataFrame, *, sep: str = OUT_DELIMITER) -> list[str]:
    return [
        sep.join(format_number(v) for v in row)
        for row in df.itertuples(index=False, name=None)
    ]


def write_lines(lines: Iterable[str], path: Path) -> None:
    ensure_dir(path.parent)
    text = "\n".join(lines)
    if text and not text.endswith("\n"):
        text += "\n"
    path.write_text(text, encoding="utf-8")


def write_rows(df: pd.DataFrame, path: Path, *, sep: str = OUT_DELIMITER) -> None:
    """
    Headerless delimited output; the file is replaced, never appended to.
    """
    write_lines(format_rows(df, sep=sep), path)
