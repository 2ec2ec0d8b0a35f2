"""
Read-only protection for loaded reference tables.

Reference data is loaded once per process and shared by every route
generation, so the numeric columns are locked after validation.
"""

import numpy as np
import pandas as pd


def make_immutable(df: pd.DataFrame) -> pd.DataFrame:
    """
    Lock the numpy arrays behind a reference table.

    Sets the writeable flag to False on every numpy-backed column, so an
    in-place write through ``df[col].values`` raises ValueError.
    Zero-copy: the same DataFrame is returned.

    Args:
        df: Validated reference table.

    Returns:
        The same DataFrame with read-only arrays.
    """
    for col in df.columns:
        arr = df[col].values
        if isinstance(arr, np.ndarray) and arr.flags.writeable:
            arr.flags.writeable = False

    return df


def is_immutable(df: pd.DataFrame) -> bool:
    """True if no numpy-backed column of *df* is writeable."""
    for col in df.columns:
        arr = df[col].values
        if isinstance(arr, np.ndarray) and arr.flags.writeable:
            return False
    return True
