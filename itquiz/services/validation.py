import re
from typing import Any, List, Mapping, Optional, Union

from ..domain.model import DispatchRequest, FieldError, LookupRequest

INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: Any) -> Optional[int]:
    """Strict integer parsing: numeric strings are accepted, bools and fractions are not."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        # ASCII digits only: no underscores, no full-width digits
        text = value.strip()
        return int(text) if INT_RE.fullmatch(text) else None
    return None


def _check_min(name: str, value: Any, minimum: int, errors: List[FieldError]) -> Optional[int]:
    parsed = parse_int(value)
    if parsed is None:
        errors.append(FieldError(name, f"{name} must be an integer"))
        return None
    if parsed < minimum:
        errors.append(FieldError(name, f"{name} must be greater than or equal to {minimum}"))
    return parsed


def validate_lookup(raw_id: Any, store_size: int) -> Union[LookupRequest, List[FieldError]]:
    errors: List[FieldError] = []
    parsed = _check_min("id", raw_id, 0, errors)
    if parsed is not None and parsed >= store_size:
        errors.append(FieldError("id", f"id must be less than {store_size}"))
    if errors:
        return errors
    return LookupRequest(id=parsed)


def validate_dispatch(raw: Mapping[str, Any]) -> Union[DispatchRequest, List[FieldError]]:
    errors: List[FieldError] = []
    start_id = _check_min("id", raw.get("id"), 0, errors)
    count = _check_min("count", raw.get("count"), 1, errors)

    webhook_url = raw.get("webhookUrl")
    if not isinstance(webhook_url, str) or not webhook_url.strip():
        errors.append(FieldError("webhookUrl", "webhookUrl must be a non-empty string"))

    if errors:
        return errors
    return DispatchRequest(start_id=start_id, count=count, webhook_url=webhook_url.strip())
