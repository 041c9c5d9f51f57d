"""
Field lookups for property records coming from several upstream feeds
(MLS Grid, Repliers, the portal database).

The same concept is stored under different names depending on the feed, so
every read goes through one of the priority tuples below instead of picking
a key at the call site. Records may be plain dicts or pandas Series.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .utils import positive, txt

logger = logging.getLogger(__name__)

PRICE_FIELDS = ('soldPrice', 'closePrice', 'price', 'listPrice')
LIST_PRICE_FIELDS = ('listPrice', 'price', 'closePrice')
SALE_PRICE_FIELDS = ('closePrice', 'soldPrice', 'listPrice')
SQFT_FIELDS = ('livingArea', 'sqft', 'squareFeet', 'sqFt', 'size')
BEDS_FIELDS = ('bedroomsTotal', 'bedrooms', 'beds')
BATHS_FIELDS = ('bathroomsTotal', 'bathroomsTotalInteger', 'bathrooms', 'baths')
# search bounds read whole-bath counts first
SUBJECT_BATHS_FIELDS = ('bathroomsTotalInteger', 'bathrooms', 'bathroomsTotal', 'baths')
DOM_FIELDS = ('daysOnMarket', 'dom', 'cumulativeDaysOnMarket')
YEAR_BUILT_FIELDS = ('yearBuilt',)
LOT_ACRES_FIELDS = ('lotSizeAcres', 'lotSize')
LOT_SQFT_FIELDS = ('lotSizeSquareFeet', 'lotSizeArea')
GARAGE_FIELDS = ('garageSpaces',)
STATUS_FIELDS = ('standardStatus', 'status', 'lastStatus')
ID_FIELDS = ('listingId', 'mlsNumber', 'id')

_COORD_CONTAINERS = (
    ('map', 'latitude', 'longitude'),
    ('coordinates', 'latitude', 'longitude'),
    (None, 'latitude', 'longitude'),
    ('address', 'latitude', 'longitude'),
    ('geo', 'lat', 'lng'),
)


def _get(record: Any, key: str) -> Any:
    if record is None:
        return None
    getter = getattr(record, 'get', None)
    if getter is None:
        return None
    return getter(key)


def first_positive(record: Any, fields: Sequence[str]) -> Optional[float]:
    """First field in `fields` holding a positive number, or None."""
    for field in fields:
        raw = _get(record, field)
        if raw is None:
            continue
        value = positive(raw)
        if value == value:
            return value
        logger.debug("ignoring non-positive %s=%r", field, raw)
    return None


def price(record) -> Optional[float]:
    return first_positive(record, PRICE_FIELDS)

def list_price(record) -> Optional[float]:
    return first_positive(record, LIST_PRICE_FIELDS)

def sale_price(record) -> Optional[float]:
    return first_positive(record, SALE_PRICE_FIELDS)

def living_area(record) -> Optional[float]:
    return first_positive(record, SQFT_FIELDS)

def bedrooms(record) -> Optional[float]:
    return first_positive(record, BEDS_FIELDS)

def bathrooms(record) -> Optional[float]:
    return first_positive(record, BATHS_FIELDS)

def subject_bathrooms(record) -> Optional[float]:
    return first_positive(record, SUBJECT_BATHS_FIELDS)

def days_on_market(record) -> Optional[float]:
    return first_positive(record, DOM_FIELDS)

def year_built(record) -> Optional[float]:
    return first_positive(record, YEAR_BUILT_FIELDS)

def lot_acres(record) -> Optional[float]:
    return first_positive(record, LOT_ACRES_FIELDS)

def lot_sqft(record) -> Optional[float]:
    return first_positive(record, LOT_SQFT_FIELDS)

def garage_spaces(record) -> Optional[float]:
    return first_positive(record, GARAGE_FIELDS)


def price_per_sqft(record) -> Optional[float]:
    """price / living area, only when both are positive."""
    p = price(record)
    s = living_area(record)
    if p is None or s is None:
        return None
    return p / s


def raw_status(record) -> Optional[str]:
    for field in STATUS_FIELDS:
        value = txt(_get(record, field))
        if value:
            return value
    return None


def property_id(record) -> str:
    for field in ID_FIELDS:
        value = txt(_get(record, field))
        if value:
            return value
    return 'unknown'


def property_address(record) -> str:
    street_number = txt(_get(record, 'streetNumber'))
    street_name = txt(_get(record, 'streetName'))
    if street_number and street_name:
        return f"{street_number} {street_name}"

    address = _get(record, 'address')
    if isinstance(address, str) and address.strip():
        return address.split(',')[0].strip()
    if isinstance(address, Mapping):
        number, name = txt(address.get('streetNumber')), txt(address.get('streetName'))
        if number and name:
            return f"{number} {name}"

    street = txt(_get(record, 'streetAddress'))
    city = txt(_get(record, 'city'))
    if street and city:
        return f"{street}, {city}"
    return street or 'Unknown Address'


def property_photos(record) -> List[str]:
    photos = _get(record, 'photos')
    if isinstance(photos, list):
        return [p for p in photos if isinstance(p, str) and p]
    media = _get(record, 'media')
    if isinstance(media, list):
        urls = []
        for m in media:
            url = m.get('url') if isinstance(m, Mapping) else m
            if isinstance(url, str) and url:
                urls.append(url)
        return urls
    return []


def coordinates(record) -> Optional[Dict[str, float]]:
    for container, lat_key, lng_key in _COORD_CONTAINERS:
        source = record if container is None else _get(record, container)
        if not isinstance(source, Mapping) and container is not None:
            continue
        lat = _coordinate(_get(source, lat_key))
        lng = _coordinate(_get(source, lng_key))
        if lat is not None and lng is not None:
            return {'lat': lat, 'lng': lng}
    return None


def _coordinate(value) -> Optional[float]:
    # coordinates are signed; only zero/missing/garbage count as absent
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if f != f or f == 0.0:
        return None
    return f


def has_pool(record) -> bool:
    features = _get(record, 'poolFeatures')
    if not features:
        return False
    if isinstance(features, (list, tuple)):
        return not all(txt(f).lower() in ('none', 'no') for f in features)
    if isinstance(features, str):
        return features.strip().lower() not in ('none', 'no', '', 'null')
    return False
