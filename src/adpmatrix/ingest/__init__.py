"""Input adapters that normalize raw ADP payload records."""

from .fields import extract_fields, is_empty
from .names import normalize_name

__all__ = [
    "extract_fields",
    "is_empty",
    "normalize_name",
]
