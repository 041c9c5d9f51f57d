"""
cma_analytics package

Comparable statistics, smart search defaults, listing status normalization
and the dollar-adjustment engine behind the CMA report views.
"""

from .defaults import SmartDefaults, compute_smart_defaults, has_custom_filters
from .engine import adjust_all, calculate_adjustments, run
from .formatting import format_adjustment, format_filter_value, format_price, format_price_short
from .io import load_cma, load_cma_from_dict
from .policy import AdjustmentOverrides, AdjustmentPolicy, AdjustmentRates
from .report import build_report
from .statistics import MetricSummary, Statistics, compute_statistics, properties_frame
from .status import NormalizedStatus, StatusKey, normalize_status, status_from_mls

__all__ = [
    "AdjustmentOverrides",
    "AdjustmentPolicy",
    "AdjustmentRates",
    "MetricSummary",
    "NormalizedStatus",
    "SmartDefaults",
    "Statistics",
    "StatusKey",
    "adjust_all",
    "build_report",
    "calculate_adjustments",
    "compute_smart_defaults",
    "compute_statistics",
    "format_adjustment",
    "format_filter_value",
    "format_price",
    "format_price_short",
    "has_custom_filters",
    "load_cma",
    "load_cma_from_dict",
    "normalize_status",
    "properties_frame",
    "run",
    "status_from_mls",
]
