from __future__ import annotations
import math
import re
import numpy as np

_STRIP_PAT = re.compile(r"[,$\s]")
_QUOTES_PAT = re.compile(r"^[\"']|[\"']$")

def txt(x):
    return (str(x) if x is not None else '').strip()

def num(x):
    """Parse a feed value into a float; NaN when it is not a number.

    Accepts numbers and strings like "$1,250,000" or "'1,850'". Booleans are
    not numbers here even though Python treats them as ints.
    """
    if x is None or isinstance(x, bool):
        return np.nan
    if isinstance(x, (int, float, np.integer, np.floating)):
        return float(x)
    s = _QUOTES_PAT.sub('', txt(x))
    s = _STRIP_PAT.sub('', s)
    if not s:
        return np.nan
    try:
        return float(s)
    except ValueError:
        return np.nan

def is_missing(x) -> bool:
    return x is None or (isinstance(x, float) and math.isnan(x))

def positive(x):
    """`num(x)` when it is finite and > 0, else NaN."""
    v = num(x)
    if v != v or math.isinf(v) or v <= 0:
        return np.nan
    return v

def round_half_up(x: float) -> int:
    # matches the rounding of the web client (Math.round), not banker's rounding
    return int(math.floor(x + 0.5))

def round_to(x: float, places: int) -> float:
    factor = 10 ** places
    return round_half_up(x * factor) / factor

def pick(override, computed: float) -> float:
    """Agent override when one was entered, otherwise the computed amount."""
    v = num(override)
    return computed if v != v else v

def value_or_none(x):
    # display value for an adjustment line; zero means "not reported"
    return x if x else None
