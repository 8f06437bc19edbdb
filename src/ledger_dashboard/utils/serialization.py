"""Convert report snapshots into JSON-ready payloads."""

from dataclasses import fields, is_dataclass
from decimal import Decimal


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_payload(value):
    """Return a JSON-serializable structure for a report value.

    Dataclass fields become camelCase keys (``start_date`` -> ``startDate``),
    tuples become lists and Decimals become numbers. Fields set to ``None``
    are omitted so optional parts such as ``splits`` only appear when present.

    Args:
        value: Dataclass instance, sequence, mapping, or scalar.

    Returns:
        A structure made of dicts, lists, str, int, float, and bool.
    """
    if is_dataclass(value) and not isinstance(value, type):
        payload = {}
        for item in fields(value):
            field_value = getattr(value, item.name)
            if field_value is None:
                continue
            payload[_camel(item.name)] = to_payload(field_value)
        return payload
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, dict):
        return {str(key): to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


__all__ = ["to_payload"]
