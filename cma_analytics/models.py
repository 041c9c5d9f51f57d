from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Value = Optional[Union[str, float]]


@dataclass(frozen=True)
class AdjustmentLine:
    feature: str
    subject_value: Value
    comp_value: Value
    adjustment: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'feature': self.feature,
            'subjectValue': self.subject_value,
            'compValue': self.comp_value,
            'adjustment': self.adjustment,
        }


@dataclass(frozen=True)
class CompAdjustmentResult:
    comp_id: str
    comp_address: str
    sale_price: float
    adjustments: List[AdjustmentLine] = field(default_factory=list)
    total_adjustment: float = 0.0
    adjusted_price: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'compId': self.comp_id,
            'compAddress': self.comp_address,
            'salePrice': self.sale_price,
            'adjustments': [a.to_dict() for a in self.adjustments],
            'totalAdjustment': self.total_adjustment,
            'adjustedPrice': self.adjusted_price,
        }
