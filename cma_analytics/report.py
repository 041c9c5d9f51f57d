from __future__ import annotations
import logging
import math
from typing import Any, Dict, Mapping, Optional, Sequence

from . import engine, fields
from .defaults import compute_smart_defaults
from .formatting import format_adjustment, format_price
from .policy import AdjustmentOverrides, AdjustmentPolicy, AdjustmentRates
from .statistics import compute_statistics
from .status import record_status, status_color, status_label

logger = logging.getLogger(__name__)


def _clean(value):
    # NaN is not valid JSON
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {k: _clean(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_clean(v) for v in value]
    return value


def _marker(record, is_subject: bool = False) -> Dict[str, Any]:
    status = record_status(record)
    price = fields.list_price(record) if is_subject else fields.price(record)
    return {
        'id': fields.property_id(record),
        'address': fields.property_address(record),
        'price': price,
        'priceLabel': format_price(price),
        'status': status.value,
        'statusLabel': 'Subject Property' if is_subject else status_label(status),
        'color': status_color(status, is_subject),
        'coordinates': fields.coordinates(record),
        'photos': fields.property_photos(record),
    }


def _adjustment_entry(result) -> Dict[str, Any]:
    entry = result.to_dict()
    for line in entry['adjustments']:
        line['label'] = format_adjustment(line['adjustment'])
    entry['totalAdjustmentLabel'] = format_adjustment(entry['totalAdjustment'])
    entry['adjustedPriceLabel'] = format_price(entry['adjustedPrice'])
    return entry


def build_report(subject: Optional[Mapping[str, Any]], comps: Sequence[Mapping[str, Any]],
                 rates: Optional[AdjustmentRates] = None,
                 overrides: Optional[Mapping[str, AdjustmentOverrides]] = None,
                 policy: Optional[AdjustmentPolicy] = None,
                 stats_only: bool = False) -> Dict[str, Any]:
    """Everything the CMA views render, as a JSON-ready dict."""
    report: Dict[str, Any] = {
        'statistics': compute_statistics(comps).to_dict(),
        'smartDefaults': compute_smart_defaults(subject).to_dict(),
        'subject': _marker(subject, is_subject=True) if subject is not None else None,
        'comparables': [_marker(c) for c in comps],
    }
    if stats_only:
        return _clean(report)

    if subject is None:
        logger.info("no subject property; skipping adjustments")
        report['adjustments'] = []
        report['indicatedValue'] = None
        return _clean(report)

    results = engine.adjust_all(subject, comps, rates, overrides, policy)
    _grid, summary = engine.grid_from_results(results)
    report['adjustments'] = [_adjustment_entry(r) for r in results]
    report['adjustmentFeatures'] = engine.unique_features(results)
    indicated = float(summary.iloc[0]['Indicated Value (median of Adjusted Price)'])
    report['indicatedValue'] = indicated if indicated > 0 else None
    report['indicatedValueLabel'] = format_price(report['indicatedValue'])
    return _clean(report)
