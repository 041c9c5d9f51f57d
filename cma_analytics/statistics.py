from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd

from . import fields
from .status import record_status

logger = logging.getLogger(__name__)

METRIC_COLUMNS = ('price', 'price_per_sqft', 'living_area', 'days_on_market', 'bedrooms', 'bathrooms')

_JSON_KEYS = {
    'price': 'price',
    'price_per_sqft': 'pricePerSqFt',
    'living_area': 'livingArea',
    'days_on_market': 'daysOnMarket',
    'bedrooms': 'bedrooms',
    'bathrooms': 'bathrooms',
}


@dataclass(frozen=True)
class MetricSummary:
    average: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'average': self.average,
            'median': self.median,
            'range': {'min': self.min, 'max': self.max},
            'count': self.count,
        }


@dataclass(frozen=True)
class Statistics:
    price: MetricSummary = field(default_factory=MetricSummary)
    price_per_sqft: MetricSummary = field(default_factory=MetricSummary)
    living_area: MetricSummary = field(default_factory=MetricSummary)
    days_on_market: MetricSummary = field(default_factory=MetricSummary)
    bedrooms: MetricSummary = field(default_factory=MetricSummary)
    bathrooms: MetricSummary = field(default_factory=MetricSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {_JSON_KEYS[name]: getattr(self, name).to_dict() for name in METRIC_COLUMNS}


def _to_row(record) -> Dict[str, Any]:
    row = {
        'id': fields.property_id(record),
        'address': fields.property_address(record),
        'status': record_status(record).value,
        'price': fields.price(record),
        'living_area': fields.living_area(record),
        'price_per_sqft': fields.price_per_sqft(record),
        'days_on_market': fields.days_on_market(record),
        'bedrooms': fields.bedrooms(record),
        'bathrooms': fields.bathrooms(record),
    }
    return row


def properties_frame(properties: Iterable[Any]) -> pd.DataFrame:
    """One row per property with every metric already extracted.

    Absent or non-positive values are NaN, so `.dropna()` on a column gives
    exactly the values that take part in the aggregates.
    """
    rows = [_to_row(p) for p in (properties or []) if p is not None]
    frame = pd.DataFrame(rows, columns=['id', 'address', 'status', *METRIC_COLUMNS])
    for col in METRIC_COLUMNS:
        frame[col] = pd.to_numeric(frame[col], errors='coerce').astype(float)
    return frame


def summarize(values: Iterable[float]) -> MetricSummary:
    """Mean, median and range over positive finite values; zeros when none."""
    arr = np.asarray([v for v in values if v is not None], dtype=float)
    arr = arr[np.isfinite(arr) & (arr > 0)]
    if arr.size == 0:
        return MetricSummary()
    return MetricSummary(
        average=float(np.mean(arr)),
        median=float(np.median(arr)),
        min=float(arr.min()),
        max=float(arr.max()),
        count=int(arr.size),
    )


def compute_statistics(properties: Iterable[Any]) -> Statistics:
    frame = properties_frame(properties)
    summaries = {col: summarize(frame[col].dropna()) for col in METRIC_COLUMNS}
    logger.debug(
        "statistics over %d properties: %s",
        len(frame),
        {col: s.count for col, s in summaries.items()},
    )
    return Statistics(**summaries)
