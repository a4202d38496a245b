from dataclasses import dataclass

import numpy as np
import pandas as pd

from analysis.dfutils import column
from common.errors import UnsortedInputError


@dataclass(frozen=True, slots=True)
class SortedFrame:
    """
    A frame that is known to be in ascending order on one 1-based column.

    Construction verifies the order, so a SortedFrame can never hold
    unsorted rows. Use SortedFrame.sort() to build one from arbitrary input.
    """

    frame: pd.DataFrame
    key_col: int = 1

    def __post_init__(self) -> None:
        if self.key_col < 1 or self.key_col > self.frame.shape[1]:
            raise UnsortedInputError(
                f"Key column {self.key_col} out of range for "
                f"{self.frame.shape[1]} columns"
            )

        keys = column(self.frame, self.key_col)
        if not keys.is_monotonic_increasing:
            raise UnsortedInputError(
                f"Rows are not sorted ascending on column {self.key_col}"
            )

    @classmethod
    def sort(cls, frame: pd.DataFrame, key_col: int = 1) -> "SortedFrame":
        """
        Stable sort on key_col, so rows sharing a key keep their input order.
        """
        keys = column(frame, key_col)
        order = np.argsort(keys.to_numpy(), kind="stable")
        return cls(frame=frame.iloc[order].reset_index(drop=True), key_col=key_col)

    def keys(self) -> np.ndarray:
        return column(self.frame, self.key_col).to_numpy()
