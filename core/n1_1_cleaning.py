# notebook 1- 1-cleaning.

from __future__ import annotations

import re
from typing import Any, Optional

import pandas as pd

# ----------------------------------
# Device taxonomy (SSOT)
# ----------------------------------
KEY_DEVICES = ("Mobile", "Desktop")

_LEADING_INT = re.compile(r"^\s*(\d+)")


# ----------------------------------
# 1. Numeric coercion
# ----------------------------------
def to_number(x: Any) -> float:
    """
    Coerce a raw API metric into a float.

    None / NaN / empty / unparseable -> 0.0
    """
    if x is None or isinstance(x, bool):
        return 0.0

    if isinstance(x, float) and pd.isna(x):
        return 0.0

    try:
        return float(x)
    except (TypeError, ValueError):
        return 0.0


def coerce_metric_columns(df: pd.DataFrame, cols: list[str]) -> pd.DataFrame:
    """
    Force metric columns to numeric, missing -> 0.

    Columns absent from df are created as 0.
    """
    df = df.copy()

    for col in cols:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0)
        else:
            df[col] = 0

    return df


# ----------------------------------
# 2. Label cleaning
# ----------------------------------
def clean_label(x: Optional[str]) -> str:
    """
    Strip surrounding whitespace. None -> "".

    Case is preserved: "mobile" is not "Mobile".
    """
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return ""

    return str(x).strip()


def normalize_device(x: Optional[str]) -> Optional[str]:
    """
    Return the device label if it is one of KEY_DEVICES after trimming,
    otherwise None.
    """
    label = clean_label(x)
    return label if label in KEY_DEVICES else None


# -----------------------------------
# 3. Age-group ordering
# -----------------------------------
def age_group_sort_key(label: Optional[str]) -> tuple[int, int]:
    """
    Sort key from the leading integer of an age bucket.

    "18-24" -> (0, 18), "65+" -> (0, 65)
    Labels without a leading integer ("Unknown") sort after every
    numeric label: (1, 0). Combine with a stable sort to keep their
    first-seen order.
    """
    match = _LEADING_INT.match(clean_label(label))
    if match is None:
        return (1, 0)

    return (0, int(match.group(1)))
