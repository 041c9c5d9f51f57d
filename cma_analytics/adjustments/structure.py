from __future__ import annotations
from typing import Optional
from .. import fields
from ..models import AdjustmentLine
from ..policy import AdjustmentRates
from ..utils import pick

def age_year_built(subject, comp, rates: AdjustmentRates, override=None) -> Optional[AdjustmentLine]:
    s = fields.year_built(subject) or 0.0
    c = fields.year_built(comp) or 0.0
    # newer subject than comp -> upward adjustment to the comp
    adj = pick(override, (s - c) * rates.year_built_per_year)
    if adj == 0 or s <= 0 or c <= 0:
        return None
    return AdjustmentLine('Year Built', s, c, adj)
