"""Temporal DataConverter for credit_support frozen-dataclass types.

Decimal amounts must survive the wire exactly, so they are encoded as
tagged strings, never JSON numbers. Dataclasses carry a ``__type__`` tag;
enums travel as their value and are rebuilt from the field's type hint.
"""

from __future__ import annotations

import dataclasses
import importlib
import json
from decimal import Decimal
from enum import Enum
from typing import Any, get_type_hints

from temporalio.converter import (
    CompositePayloadConverter,
    DataConverter,
    DefaultPayloadConverter,
    JSONPlainPayloadConverter,
    JSONTypeConverter,
)

# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _to_json(obj: Any) -> Any:
    """Recursively convert credit_support objects to JSON-compatible values."""
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, Decimal):
        return {"__decimal__": str(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        d: dict[str, Any] = {
            "__type__": f"{type(obj).__module__}.{type(obj).__qualname__}",
        }
        for field in dataclasses.fields(obj):
            d[field.name] = _to_json(getattr(obj, field.name))
        return d
    if isinstance(obj, (tuple, list)):
        return [_to_json(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_json(v) for k, v in obj.items()}
    raise TypeError(f"Cannot encode {type(obj).__name__} for Temporal payload")


class CreditSupportJSONEncoder(json.JSONEncoder):
    """JSON encoder using _to_json for Decimal, Enum and dataclass support."""

    def default(self, o: Any) -> Any:
        return _to_json(o)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

# Only classes from these modules are ever instantiated from a payload.
_ALLOWED_MODULES: frozenset[str] = frozenset({
    "credit_support.core.money",
    "credit_support.margin.types",
    "credit_support.workflow.types",
})

_CLASS_CACHE: dict[str, type] = {}


def _resolve_class(fqn: str) -> type | None:
    if fqn in _CLASS_CACHE:
        return _CLASS_CACHE[fqn]
    module_name, _, class_name = fqn.rpartition(".")
    if module_name not in _ALLOWED_MODULES:
        return None
    module = importlib.import_module(module_name)
    cls = getattr(module, class_name, None)
    if isinstance(cls, type):
        _CLASS_CACHE[fqn] = cls
        return cls
    return None


def _enum_type(hint: Any) -> type[Enum] | None:
    """The Enum class named by hint, looking through ``X | None``."""
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint
    for arg in getattr(hint, "__args__", ()):
        if isinstance(arg, type) and issubclass(arg, Enum):
            return arg
    return None


def _from_json(hint: Any, value: Any) -> Any:
    """Recursively convert JSON values back to credit_support types."""
    if value is None:
        return None

    if isinstance(value, dict) and "__type__" in value:
        cls = _resolve_class(value["__type__"])
        if cls is None or not dataclasses.is_dataclass(cls):
            raise TypeError(f"Refusing to decode unknown type {value['__type__']!r}")
        hints = get_type_hints(cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if field.name in value:
                kwargs[field.name] = _from_json(hints.get(field.name, Any), value[field.name])
        return cls(**kwargs)

    if isinstance(value, dict) and "__decimal__" in value:
        return Decimal(value["__decimal__"])

    enum_cls = _enum_type(hint)
    if enum_cls is not None and not isinstance(value, Enum):
        return enum_cls(value)

    if isinstance(value, list):
        return tuple(_from_json(Any, x) for x in value)

    return value


class CreditSupportJSONTypeConverter(JSONTypeConverter):
    """Turn tagged JSON values back into credit_support types."""

    def to_typed_value(self, hint: type, value: Any) -> Any:
        if isinstance(value, dict) and ("__type__" in value or "__decimal__" in value):
            return _from_json(hint, value)
        if hint is Decimal and isinstance(value, (int, str)):
            return Decimal(value)
        return JSONTypeConverter.Unhandled


# ---------------------------------------------------------------------------
# Wire up
# ---------------------------------------------------------------------------


class CreditSupportPayloadConverter(CompositePayloadConverter):
    """Default payload converters with the JSON one swapped for ours."""

    def __init__(self) -> None:
        json_converter = JSONPlainPayloadConverter(
            encoder=CreditSupportJSONEncoder,
            custom_type_converters=[CreditSupportJSONTypeConverter()],
        )
        super().__init__(
            *(
                c
                for c in DefaultPayloadConverter.default_encoding_payload_converters
                if not isinstance(c, JSONPlainPayloadConverter)
            ),
            json_converter,
        )


CREDIT_SUPPORT_DATA_CONVERTER = DataConverter(
    payload_converter_class=CreditSupportPayloadConverter,
)
