"""
Tolerant field lookup for reference records whose column names drifted
between sources (e.g. "district_id" in one export, "DistrictID" in another).
"""

from collections.abc import Mapping
from typing import Any

from bd_geocode.mappers import CANONICAL_FIELDS


def key_signature(key: str) -> str:
    """
    Reduce a key to its lower-cased alphabetic characters.
    Examples:
      "district_id" -> "districtid"
      "DistrictID"  -> "districtid"
      "District Id" -> "districtid"
    """
    return "".join(ch for ch in key.lower() if ch.isalpha())


def resolve_field(record: Any, canonical_name: str) -> Any:
    """
    Look up canonical_name in record, tolerating casing and punctuation drift.

    An exact key wins. Otherwise the first key, in record order, with the same
    key_signature is used. Returns None when no key matches or record is not a
    mapping; callers treat None as "field absent".
    """
    if not isinstance(record, Mapping):
        return None
    if canonical_name in record:
        return record[canonical_name]
    wanted = key_signature(canonical_name)
    for key, value in record.items():
        if isinstance(key, str) and key_signature(key) == wanted:
            return value
    return None


def normalize_record(record: Any, mapping: Mapping[str, tuple[str, ...]]) -> dict[str, Any]:
    """
    Map a raw record onto model field names.

    params:
        record: A flat raw row.
        mapping: {model_field: (canonical_name, ...)}; canonical names are tried
            in order and the first non-None value is kept.

    returns:
        normalized (dict): Only the model fields that could be resolved.

    Raises:
        KeyError: If mapping names a canonical field outside CANONICAL_FIELDS.
    """
    normalized = {}
    for field_name, canonical_names in mapping.items():
        for canonical_name in canonical_names:
            if canonical_name not in CANONICAL_FIELDS:
                raise KeyError(f"Not a canonical reference field: {canonical_name}")
            value = resolve_field(record, canonical_name)
            if value is not None:
                normalized[field_name] = value
                break
    return normalized
