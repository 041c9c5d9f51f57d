"""
RESO display statuses as the MLS feeds spell them.

Unlike `status.normalize_status`, nothing here collapses statuses into
buckets: an unrecognised value comes back as-is so a listing is never hidden
behind a wrong label.
"""
from __future__ import annotations
from typing import Mapping, Optional

from .utils import txt

ACTIVE = 'Active'
ACTIVE_UNDER_CONTRACT = 'Active Under Contract'
PENDING = 'Pending'
CLOSED = 'Closed'
UNKNOWN = 'Unknown'

STATUS_CODES = (ACTIVE, ACTIVE_UNDER_CONTRACT, PENDING, CLOSED)

STATUS_ABBREVIATIONS = {
    'A': ACTIVE,
    'AU': ACTIVE_UNDER_CONTRACT,
    'P': PENDING,
    'C': CLOSED,
    'S': CLOSED,
    'Lc': ACTIVE_UNDER_CONTRACT,
    'Sc': ACTIVE_UNDER_CONTRACT,
}

_API_VALUES = {
    ACTIVE: 'active',
    ACTIVE_UNDER_CONTRACT: 'under_contract',
    PENDING: 'pending',
    CLOSED: 'closed',
}

_LOWER_ALIASES = {
    'active': ACTIVE,
    'under_contract': ACTIVE_UNDER_CONTRACT,
    'active_under_contract': ACTIVE_UNDER_CONTRACT,
    'active under contract': ACTIVE_UNDER_CONTRACT,
    'undercontract': ACTIVE_UNDER_CONTRACT,
    'pending': PENDING,
    'closed': CLOSED,
    'sold': CLOSED,
}


def to_display_status(raw: Optional[str]) -> str:
    s = txt(raw)
    if not s:
        return UNKNOWN
    if s in STATUS_CODES:
        return s
    if s in STATUS_ABBREVIATIONS:
        return STATUS_ABBREVIATIONS[s]
    return _LOWER_ALIASES.get(s.lower(), s)


def status_to_api_value(raw: str) -> str:
    display = to_display_status(raw)
    if display in _API_VALUES:
        return _API_VALUES[display]
    return '_'.join(txt(raw).lower().split())


def api_value_to_repliers_status(api_value: str) -> str:
    for display, value in _API_VALUES.items():
        if value == txt(api_value).lower():
            return display
    return api_value


def is_active_status(raw: Optional[str]) -> bool:
    return to_display_status(raw) in (ACTIVE, ACTIVE_UNDER_CONTRACT)


def is_closed_status(raw: Optional[str]) -> bool:
    return to_display_status(raw) == CLOSED


def is_under_contract_status(raw: Optional[str]) -> bool:
    return to_display_status(raw) in (ACTIVE_UNDER_CONTRACT, PENDING)


def map_repliers_status(listing: Mapping) -> str:
    """standardStatus first, then the lastStatus code, then the raw status."""
    standard = txt(listing.get('standardStatus'))
    if standard:
        display = to_display_status(standard)
        if display != UNKNOWN:
            return display

    last = txt(listing.get('lastStatus'))
    if last in STATUS_ABBREVIATIONS:
        return STATUS_ABBREVIATIONS[last]

    status = txt(listing.get('status'))
    if status:
        return to_display_status(status)
    return UNKNOWN
