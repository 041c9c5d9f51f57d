from __future__ import annotations
from typing import Optional
from .. import fields
from ..models import AdjustmentLine
from ..policy import AdjustmentRates
from ..utils import pick, round_half_up, value_or_none

# lot differences at or under this many sqft are noise, not an adjustment
LOT_NOISE_SQFT = 500.0

def lot_size(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.lot_sqft(subject) or 0.0
    c = fields.lot_sqft(comp) or 0.0
    d = s - c
    adj = pick(override, d * rates.lot_size_per_sqft)
    if adj == 0 or abs(d) <= LOT_NOISE_SQFT:
        return None
    return AdjustmentLine('Lot Size', value_or_none(s), value_or_none(c), float(round_half_up(adj)))
