"""Shared field validators for request/response schemas."""

import json
import re
from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import AfterValidator

from app.core.clock import to_local_naive

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("must be a valid email address (local@domain)")
    return value


def parse_date(value: Any) -> Optional[date]:
    """Normalize anything date-like to a date; unparsable input yields None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_local_naive(value).date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    raw = value.strip()
    try:
        return to_local_naive(datetime.fromisoformat(raw.replace("Z", "+00:00"))).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def parse_json_object(value: Any) -> Optional[dict]:
    """Decode a serialized JSON object; anything malformed reads back as None."""
    if value is None or isinstance(value, dict):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if not isinstance(value, str):
        return None
    try:
        decoded = json.loads(value)
    except ValueError:
        return None
    return decoded if isinstance(decoded, dict) else None


EmailAddress = Annotated[str, AfterValidator(validate_email)]
