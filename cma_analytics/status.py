"""
Listing status normalization and the color/label tables shared by badges,
map markers, chart legends and PDF exports.

Two independent normalizers live here on purpose:

* `normalize_status` - substring rules over raw feed codes and display
  strings, falls back to UNKNOWN. Used by the CMA map and stats views.
* `status_from_mls` - exact matches over RESO display strings, falls back to
  ACTIVE. Used for marker colors and the legacy status badge.

They disagree on unrecognised input; callers pick the one whose fallback they
want.
"""
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional

from . import fields
from .utils import txt


class NormalizedStatus(str, Enum):
    ACTIVE = 'ACTIVE'
    UNDER_CONTRACT = 'UNDER_CONTRACT'
    PENDING = 'PENDING'
    SOLD = 'SOLD'
    LEASING = 'LEASING'
    UNKNOWN = 'UNKNOWN'


class StatusKey(str, Enum):
    SUBJECT = 'subject'
    ACTIVE = 'active'
    UNDER_CONTRACT = 'underContract'
    CLOSED = 'closed'
    PENDING = 'pending'


STATUS_COLORS = MappingProxyType({
    StatusKey.SUBJECT: {'name': 'Subject Property', 'hex': '#3b82f6'},
    StatusKey.ACTIVE: {'name': 'Active', 'hex': '#22c55e'},
    StatusKey.UNDER_CONTRACT: {'name': 'Under Contract', 'hex': '#f97316'},
    StatusKey.CLOSED: {'name': 'Closed', 'hex': '#ef4444'},
    StatusKey.PENDING: {'name': 'Pending', 'hex': '#6b7280'},
})

SUBJECT_COLOR = STATUS_COLORS[StatusKey.SUBJECT]['hex']

CMA_STATUS_COLORS = MappingProxyType({
    NormalizedStatus.ACTIVE: STATUS_COLORS[StatusKey.ACTIVE]['hex'],
    NormalizedStatus.UNDER_CONTRACT: STATUS_COLORS[StatusKey.UNDER_CONTRACT]['hex'],
    NormalizedStatus.PENDING: STATUS_COLORS[StatusKey.PENDING]['hex'],
    NormalizedStatus.SOLD: STATUS_COLORS[StatusKey.CLOSED]['hex'],
    NormalizedStatus.LEASING: '#a855f7',
    NormalizedStatus.UNKNOWN: '#9ca3af',
})

STATUS_LABELS = MappingProxyType({
    NormalizedStatus.ACTIVE: 'Active',
    NormalizedStatus.UNDER_CONTRACT: 'Under Contract',
    NormalizedStatus.PENDING: 'Pending',
    NormalizedStatus.SOLD: 'Closed',
    NormalizedStatus.LEASING: 'Leasing',
    NormalizedStatus.UNKNOWN: 'Unknown',
})

_MLS_EXACT = {
    'active': StatusKey.ACTIVE,
    'active under contract': StatusKey.UNDER_CONTRACT,
    'under contract': StatusKey.UNDER_CONTRACT,
    'closed': StatusKey.CLOSED,
    'sold': StatusKey.CLOSED,
    'pending': StatusKey.PENDING,
}


def normalize_status(raw: Optional[str]) -> NormalizedStatus:
    """Map a raw status string to a NormalizedStatus.

    Rules are checked in order and the first match wins, so "Active Under
    Contract" lands on UNDER_CONTRACT before the plain "active" rule and
    "Closed - Leasing" lands on LEASING.
    """
    s = txt(raw).lower()
    if not s:
        return NormalizedStatus.UNKNOWN
    if s == 'lsd' or 'leasing' in s or 'for rent' in s:
        return NormalizedStatus.LEASING
    if s in ('sld', 'sold') or 'closed' in s:
        return NormalizedStatus.SOLD
    if s == 'sc' or 'pending' in s:
        return NormalizedStatus.PENDING
    if 'under contract' in s or 'active under' in s:
        return NormalizedStatus.UNDER_CONTRACT
    if s == 'a' or 'active' in s:
        return NormalizedStatus.ACTIVE
    return NormalizedStatus.UNKNOWN


def status_from_mls(raw: Optional[str], is_subject: bool = False) -> StatusKey:
    if is_subject:
        return StatusKey.SUBJECT
    return _MLS_EXACT.get(txt(raw).lower(), StatusKey.ACTIVE)


def record_status(record) -> NormalizedStatus:
    return normalize_status(fields.raw_status(record))


def status_color(status: NormalizedStatus, is_subject: bool = False) -> str:
    if is_subject:
        return SUBJECT_COLOR
    return CMA_STATUS_COLORS[NormalizedStatus(status)]


def status_label(status: NormalizedStatus) -> str:
    return STATUS_LABELS[NormalizedStatus(status)]


def status_hex(key: StatusKey) -> str:
    return STATUS_COLORS[StatusKey(key)]['hex']


def status_hex_from_mls(raw: Optional[str], is_subject: bool = False) -> str:
    return status_hex(status_from_mls(raw, is_subject))


def legend_statuses(include_subject: bool = True) -> List[Dict[str, str]]:
    """Entries for map legends and filter chips, in display order."""
    return [
        {'key': key.value, 'name': entry['name'], 'hex': entry['hex']}
        for key, entry in STATUS_COLORS.items()
        if include_subject or key is not StatusKey.SUBJECT
    ]
