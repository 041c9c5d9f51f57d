from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .policy import AdjustmentOverrides, AdjustmentRates

logger = logging.getLogger(__name__)

def load_cma(path: str | Path) -> Tuple[Optional[Dict[str, Any]], List[Dict[str, Any]]]:
    """Load a CMA payload saved as JSON:
       { 'subject': {...}, 'comparables': [ {...}, ... ] }

       Records are returned as-is; field names are resolved later by
       `cma_analytics.fields`, so feeds with different schemas can be mixed.
    """
    return load_cma_from_dict(read_payload(path))

def read_payload(path: str | Path) -> Any:
    try:
        return json.loads(Path(path).read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: not valid JSON ({e})") from e

def load_cma_from_dict(data: Any) -> Tuple[Optional[Dict[str, Any]], List[Dict[str, Any]]]:
    """Same as load_cma for an already-parsed payload (e.g. a POST body).
       'properties' is accepted in place of 'comparables'.
    """
    if not isinstance(data, Mapping):
        raise ValueError("CMA payload must be a JSON object")

    subject = data.get('subject')
    if subject is not None and not isinstance(subject, Mapping):
        raise ValueError("'subject' must be an object or null")

    comps = data.get('comparables')
    if comps is None:
        comps = data.get('properties', [])
    if not isinstance(comps, list):
        raise ValueError("'comparables' must be a list")

    records = [dict(c) for c in comps if isinstance(c, Mapping)]
    if len(records) != len(comps):
        logger.warning("skipped %d comparable entries that are not objects", len(comps) - len(records))
    return (dict(subject) if subject is not None else None), records

def write_report_json(report: Mapping[str, Any], path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding='utf-8')
    return out

def load_adjustment_config(data: Any) -> Tuple[AdjustmentRates, Dict[str, AdjustmentOverrides]]:
    """Rates and per-comparable overrides stored alongside a CMA:
       { 'adjustmentRates': {...}, 'overrides': { '<comp id>': {...} } }
    """
    if not isinstance(data, Mapping):
        return AdjustmentRates(), {}
    raw_rates = data.get('adjustmentRates')
    if raw_rates is not None and not isinstance(raw_rates, Mapping):
        raise ValueError("'adjustmentRates' must be an object")
    rates = AdjustmentRates.from_mapping(raw_rates)
    raw = data.get('overrides') or {}
    if not isinstance(raw, Mapping):
        raise ValueError("'overrides' must be an object keyed by comparable id")
    overrides = {str(k): AdjustmentOverrides.from_mapping(v) for k, v in raw.items() if isinstance(v, Mapping)}
    return rates, overrides
