from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from . import fields
from .models import AdjustmentLine, CompAdjustmentResult
from .policy import AdjustmentOverrides, AdjustmentPolicy, AdjustmentRates
from .adjustments import amenities, rooms_size, site, structure

logger = logging.getLogger(__name__)

FEATURE_ORDER = ('Square Feet', 'Bedrooms', 'Bathrooms', 'Pool', 'Garage Spaces', 'Year Built', 'Lot Size')

def _cap(x: float, base: float, pct: Optional[float]) -> float:
    if pct is None:
        return float(x)
    cap = abs(pct) * (base or 0.0)
    return float(max(-cap, min(cap, x)))

def calculate_adjustments(subject, comp, rates: Optional[AdjustmentRates] = None,
                          overrides: Optional[AdjustmentOverrides] = None,
                          policy: Optional[AdjustmentPolicy] = None) -> CompAdjustmentResult:
    rates = rates or AdjustmentRates()
    o = overrides or AdjustmentOverrides()
    policy = policy or AdjustmentPolicy()
    base = fields.sale_price(comp) or 0.0

    candidates = [
        # --- Size & Rooms
        rooms_size.square_feet(subject, comp, rates, o.sqft),
        rooms_size.bedrooms(subject, comp, rates, o.bedrooms),
        rooms_size.bathrooms(subject, comp, rates, o.bathrooms),
        # --- Amenities
        amenities.pool(subject, comp, rates, o.pool),
        amenities.garage(subject, comp, rates, o.garage),
        # --- Structure & Site
        structure.age_year_built(subject, comp, rates, o.year_built),
        site.lot_size(subject, comp, rates, o.lot_size),
    ]
    lines: List[AdjustmentLine] = [line for line in candidates if line is not None]

    for name, value in o.custom:
        if value != 0:
            lines.append(AdjustmentLine(name, '—', '—', float(value)))

    # cap line items
    if policy.line_cap_pct is not None:
        lines = [
            AdjustmentLine(l.feature, l.subject_value, l.comp_value, _cap(l.adjustment, base, policy.line_cap_pct))
            for l in lines
        ]

    total = _cap(sum(l.adjustment for l in lines), base, policy.total_cap_pct)
    result = CompAdjustmentResult(
        comp_id=fields.property_id(comp),
        comp_address=fields.property_address(comp),
        sale_price=base,
        adjustments=lines,
        total_adjustment=total,
        adjusted_price=base + total,
    )
    logger.debug("comp %s: %d lines, net %.2f", result.comp_id, len(lines), total)
    return result

def unique_features(results: Iterable[CompAdjustmentResult]) -> List[str]:
    """Every feature used by any comparable, canonical ones first."""
    seen = {line.feature for r in results for line in r.adjustments}

    def key(name: str):
        if name in FEATURE_ORDER:
            return (0, FEATURE_ORDER.index(name), '')
        return (1, 0, name)

    return sorted(seen, key=key)

def subject_value(subject, feature: str):
    if feature == 'Square Feet':
        return fields.living_area(subject)
    if feature == 'Bedrooms':
        return fields.bedrooms(subject)
    if feature == 'Bathrooms':
        return fields.bathrooms(subject)
    if feature == 'Pool':
        return 'Yes' if fields.has_pool(subject) else 'No'
    if feature == 'Garage Spaces':
        return fields.garage_spaces(subject)
    if feature == 'Year Built':
        return fields.year_built(subject)
    if feature == 'Lot Size':
        return fields.lot_sqft(subject)
    return '—'

def _overrides_for(comp, overrides: Optional[Mapping[str, AdjustmentOverrides]]) -> Optional[AdjustmentOverrides]:
    if not overrides:
        return None
    return overrides.get(fields.property_id(comp))

def adjust_all(subject, comps: Sequence, rates: Optional[AdjustmentRates] = None,
               overrides: Optional[Mapping[str, AdjustmentOverrides]] = None,
               policy: Optional[AdjustmentPolicy] = None) -> List[CompAdjustmentResult]:
    """`overrides` is keyed by comparable id (listingId / mlsNumber / id)."""
    return [calculate_adjustments(subject, c, rates, _overrides_for(c, overrides), policy)
            for c in (comps or [])]

def run(subject, comps: Sequence, rates: Optional[AdjustmentRates] = None,
        overrides: Optional[Mapping[str, AdjustmentOverrides]] = None,
        policy: Optional[AdjustmentPolicy] = None) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Adjustment grid for every comparable plus the indicated value."""
    return grid_from_results(adjust_all(subject, comps, rates, overrides, policy))

def grid_from_results(results: Sequence[CompAdjustmentResult]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    features = unique_features(results)

    rows: List[Dict] = []
    for r in results:
        by_feature = {l.feature: l.adjustment for l in r.adjustments}
        rows.append({
            'Comparable': r.comp_address,
            'Comp ID': r.comp_id,
            'Base Sale Price': r.sale_price,
            **{f: by_feature.get(f, 0.0) for f in features},
            'Net Adjustment': r.total_adjustment,
            'Adjusted Price': r.adjusted_price,
        })

    grid = pd.DataFrame(rows, columns=['Comparable', 'Comp ID', 'Base Sale Price', *features,
                                       'Net Adjustment', 'Adjusted Price'])
    # comps with no sale price cannot indicate a value
    priced = grid.loc[grid['Base Sale Price'] > 0, 'Adjusted Price'].astype(float)
    indicated = float(np.median(priced)) if len(priced) else 0.0
    summary = pd.DataFrame([{
        'Indicated Value (median of Adjusted Price)': indicated,
        'Comparables Used': int(len(priced)),
    }])
    return grid, summary
