from __future__ import annotations
from typing import Optional
from .. import fields
from ..models import AdjustmentLine
from ..policy import AdjustmentRates
from ..utils import pick, value_or_none

def square_feet(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.living_area(subject) or 0.0
    c = fields.living_area(comp) or 0.0
    adj = pick(override, (s - c) * rates.sqft_per_unit)
    if adj == 0:
        return None
    return AdjustmentLine('Square Feet', value_or_none(s), value_or_none(c), adj)

def bedrooms(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.bedrooms(subject) or 0.0
    c = fields.bedrooms(comp) or 0.0
    adj = pick(override, (s - c) * rates.bedroom_value)
    if adj == 0:
        return None
    return AdjustmentLine('Bedrooms', value_or_none(s), value_or_none(c), adj)

def bathrooms(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.bathrooms(subject) or 0.0
    c = fields.bathrooms(comp) or 0.0
    adj = pick(override, (s - c) * rates.bathroom_value)
    if adj == 0:
        return None
    return AdjustmentLine('Bathrooms', value_or_none(s), value_or_none(c), adj)
