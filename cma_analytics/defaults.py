from __future__ import annotations
import logging
import math
from dataclasses import dataclass, fields as dc_fields
from datetime import date
from typing import Any, Dict, Mapping, Optional, Union

from . import fields
from .utils import round_half_up, round_to

logger = logging.getLogger(__name__)

RADIUS_OPTIONS = (
    {'value': 0.5, 'label': '0.5 mi'},
    {'value': 1, 'label': '1 mi'},
    {'value': 2, 'label': '2 mi'},
    {'value': 5, 'label': '5 mi'},
    {'value': 10, 'label': '10 mi'},
)

SOLD_WITHIN_OPTIONS = (
    {'value': 90, 'label': '3 months'},
    {'value': 180, 'label': '6 months'},
    {'value': 365, 'label': '12 months'},
    {'value': 730, 'label': '24 months'},
)

# compared by has_custom_filters; baths and lot size are left out
CUSTOM_FILTER_KEYS = (
    'min_price', 'max_price',
    'min_sqft', 'max_sqft',
    'min_year_built', 'max_year_built',
    'min_beds', 'max_beds',
)


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


@dataclass
class SmartDefaults:
    """Comparable-search bounds seeded from the subject property.

    None means "no constraint". The search form owns the object after it is
    created and may change any field.
    """
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    min_sqft: Optional[int] = None
    max_sqft: Optional[int] = None
    min_year_built: Optional[int] = None
    max_year_built: Optional[int] = None
    min_beds: Optional[int] = None
    max_beds: Optional[int] = None
    min_baths: Optional[int] = None
    max_baths: Optional[int] = None
    min_lot_acres: Optional[float] = None
    max_lot_acres: Optional[float] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in dc_fields(self))

    def to_dict(self) -> Dict[str, Any]:
        return {
            _camel(f.name): getattr(self, f.name)
            for f in dc_fields(self)
            if getattr(self, f.name) is not None
        }


def _as_count(x: float) -> Union[int, float]:
    return int(x) if float(x).is_integer() else x


def compute_smart_defaults(subject, *, current_year: Optional[int] = None) -> SmartDefaults:
    defaults = SmartDefaults()
    if subject is None:
        return defaults

    price = fields.list_price(subject)
    if price is not None:
        defaults.min_price = round_half_up(price * 0.80)
        defaults.max_price = round_half_up(price * 1.20)

    sqft = fields.living_area(subject)
    if sqft is not None:
        defaults.min_sqft = round_half_up(sqft * 0.75)
        defaults.max_sqft = round_half_up(sqft * 1.25)

    year = fields.year_built(subject)
    if year is not None and year > 1900:
        defaults.min_year_built = int(year) - 10
        defaults.max_year_built = current_year or date.today().year

    beds = fields.bedrooms(subject)
    if beds is not None:
        defaults.min_beds = _as_count(max(1, beds - 1))
        defaults.max_beds = _as_count(beds + 1)

    baths = fields.subject_bathrooms(subject)
    if baths is not None:
        defaults.min_baths = max(1, math.floor(baths - 1))
        defaults.max_baths = math.ceil(baths + 1)

    lot = fields.lot_acres(subject)
    if lot is not None:
        defaults.min_lot_acres = round_to(lot * 0.50, 2)
        defaults.max_lot_acres = round_to(lot * 1.50, 2)

    logger.debug("smart defaults for %s: %s", fields.property_id(subject), defaults.to_dict())
    return defaults


def _lookup(current, key: str):
    if isinstance(current, SmartDefaults):
        return getattr(current, key)
    value = current.get(key)
    if value is None:
        value = current.get(_camel(key))
    return value


def has_custom_filters(current: Union[SmartDefaults, Mapping[str, Any]], subject) -> bool:
    """True when the live filters no longer match the subject's defaults.

    Only keys set on both sides are compared, with exact equality.
    """
    if subject is None or current is None:
        return False
    smart = compute_smart_defaults(subject)
    for key in CUSTOM_FILTER_KEYS:
        current_val = _lookup(current, key)
        default_val = getattr(smart, key)
        if current_val is not None and default_val is not None and current_val != default_val:
            return True
    return False
