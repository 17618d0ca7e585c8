"""
Shared utilities and helpers.
"""

import json
import math
import re
from typing import Any, Dict, Optional
from datetime import date, datetime


_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def serialize_for_json(obj: Any) -> Any:
    """Serialize objects that aren't JSON-serializable by default."""
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif hasattr(obj, 'model_dump'):  # Pydantic model
        return obj.model_dump()
    elif hasattr(obj, '__dict__'):
        return obj.__dict__
    return str(obj)


def dict_to_json_string(data: Dict) -> str:
    """Convert dict to JSON string, handling non-serializable types."""
    return json.dumps(data, default=serialize_for_json, indent=2)


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safe division with default value."""
    if denominator == 0:
        return default
    return numerator / denominator


def coerce_numeric(value: Any) -> float:
    """
    Coerce an untyped input value to float, defaulting to 0.0.

    Strings are read permissively: the longest leading number is used, so
    "12.5 kg" gives 12.5 and "1,000" gives 1.0. Booleans, NaN, containers
    and anything without a leading number give 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, float):
        number = value
    elif isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return 0.0
        number = float(match.group())
    else:
        return 0.0

    return 0.0 if math.isnan(number) else number


def numeric_source_text(value: Any) -> Optional[str]:
    """
    Text of a numeric input as it was received, or None when absent.

    Strings are kept verbatim so locale-formatted values like "1.500.000"
    survive; numbers render without a trailing ``.0`` when whole.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the leading integer of a string, or None if there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        # More digits than int() accepts from a string
        return None
