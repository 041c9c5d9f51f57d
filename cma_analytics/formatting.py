"""Display strings for report tables, chart axes and the filter summary."""
from __future__ import annotations
from typing import Optional

from .utils import is_missing, round_half_up


def format_price(value: Optional[float]) -> str:
    if is_missing(value):
        return 'N/A'
    return f"${round_half_up(abs(value)):,}" if value >= 0 else f"-${round_half_up(abs(value)):,}"


def format_price_short(value: Optional[float]) -> str:
    if is_missing(value):
        return 'N/A'
    if value >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    return f"${round_half_up(value / 1000)}K"


def format_y_axis_price(value: float) -> str:
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    return f"${value / 1000:.0f}K"


def format_adjustment(value: float) -> str:
    formatted = format_price(abs(value))
    if value > 0:
        return f"+{formatted}"
    if value < 0:
        return f"-{formatted}"
    return formatted


def format_filter_value(value, kind: str) -> str:
    if is_missing(value):
        return ''
    if kind == 'price':
        return f"${value:,}"
    if kind == 'sqft':
        return f"{value:,} sqft"
    if kind == 'beds':
        return f"{value} bed{'' if value == 1 else 's'}"
    if kind == 'acres':
        return f"{value} acres"
    return str(value)
