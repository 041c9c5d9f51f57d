from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping, Optional, Tuple

from .utils import num


def _from_camel(cls, data: Optional[Mapping[str, Any]]):
    """Build a dataclass from stored camelCase or snake_case keys."""
    if not data:
        return cls()
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__} must be an object, got {type(data).__name__}")
    kwargs = {}
    for f in fields(cls):
        head, *rest = f.name.split('_')
        camel = head + ''.join(part.title() for part in rest)
        for key in (f.name, camel):
            if key in data and data[key] is not None:
                kwargs[f.name] = data[key]
                break
    return cls(**kwargs)


@dataclass
class AdjustmentRates:
    # Size & rooms
    sqft_per_unit: float = 50.0
    bedroom_value: float = 10000.0
    bathroom_value: float = 7500.0

    # Amenities
    pool_value: float = 25000.0
    garage_per_space: float = 5000.0

    # Structure & site
    year_built_per_year: float = 1000.0
    lot_size_per_sqft: float = 2.0

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "AdjustmentRates":
        rates = _from_camel(cls, data)
        for f in fields(rates):
            value = num(getattr(rates, f.name))
            setattr(rates, f.name, value if value == value else f.default)
        return rates


@dataclass
class AdjustmentOverrides:
    """Agent-entered dollar amounts that replace a computed line."""
    sqft: Optional[float] = None
    bedrooms: Optional[float] = None
    bathrooms: Optional[float] = None
    pool: Optional[float] = None
    garage: Optional[float] = None
    year_built: Optional[float] = None
    lot_size: Optional[float] = None
    custom: List[Tuple[str, float]] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "AdjustmentOverrides":
        overrides = _from_camel(cls, data)
        if not isinstance(overrides.custom, (list, tuple)):
            raise ValueError("'custom' adjustments must be a list")
        custom = []
        for item in overrides.custom:
            if isinstance(item, Mapping):
                name, value = item.get('name'), item.get('value')
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                name, value = item
            else:
                raise ValueError(f"custom adjustment must be {{name, value}}, got {item!r}")
            value = num(value)
            if name and value == value:
                custom.append((str(name), value))
        overrides.custom = custom
        return overrides


@dataclass
class AdjustmentPolicy:
    # fractions of the comparable's sale price; None leaves lines uncapped
    line_cap_pct: Optional[float] = None
    total_cap_pct: Optional[float] = None
