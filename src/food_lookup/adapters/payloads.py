"""Helpers for reading loosely typed provider payloads."""

from food_lookup.domain.errors import InvalidResponseError


def require_list(payload: object, key: str, provider: str) -> list[object]:
    """Return ``payload[key]`` as a list or raise on a malformed payload."""
    if not isinstance(payload, dict):
        raise InvalidResponseError(
            f"Expected a JSON object, got {type(payload).__name__}", provider
        )
    items = payload.get(key, [])
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidResponseError(f"Expected '{key}' to be a list", provider)
    return items


def optional_float(value: object) -> float | None:
    """Coerce a numeric-looking value to float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def optional_str(value: object) -> str | None:
    """Return a stripped non-empty string, or None."""
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None
