from __future__ import annotations
from typing import Optional
from .. import fields
from ..models import AdjustmentLine
from ..policy import AdjustmentRates
from ..utils import pick, value_or_none

def pool(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    # only a presence mismatch is adjusted
    s = fields.has_pool(subject)
    c = fields.has_pool(comp)
    if s == c:
        return None
    adj = pick(override, rates.pool_value if s else -rates.pool_value)
    return AdjustmentLine('Pool', 'Yes' if s else 'No', 'Yes' if c else 'No', adj)

def garage(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.garage_spaces(subject) or 0.0
    c = fields.garage_spaces(comp) or 0.0
    adj = pick(override, (s - c) * rates.garage_per_space)
    if adj == 0:
        return None
    return AdjustmentLine('Garage Spaces', value_or_none(s), value_or_none(c), adj)
