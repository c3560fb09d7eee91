"""Pull source-declared attributes out of raw player payload records."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence


def is_empty(value: Any) -> bool:
    """Falsy values (``None``, blanks, ``0``, ``False``, empty containers) carry nothing."""

    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (bool, int, float, list, tuple, dict, set)):
        return not value
    return False


def extract_fields(raw: Mapping[str, Any], field_names: Sequence[str]) -> Dict[str, Any]:
    """Return the declared fields of ``raw`` that carry a value, in declared order."""

    extracted: Dict[str, Any] = {}
    for field in field_names:
        value = raw.get(field)
        if is_empty(value):
            continue
        extracted[field] = value
    return extracted
