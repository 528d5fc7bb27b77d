"""Base data models shared by every request and response type."""

import json
import types
import typing
from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any, TypeVar

from ..exceptions import ValidationError
from ..utils.query import array_to_string, flatten_query

M = TypeVar("M", bound="Model")


def wire(name: str, *, required: bool = False, style: str | None = None) -> Any:
    """Declare a model field bound to its API parameter name.

    Args:
        name: Parameter or JSON key used on the wire (e.g. "InstanceId")
        required: Whether ``validate`` rejects a missing value
        style: Serialize the value as one query string instead of a
            repeat list ("json", "simple", ...)
    """
    return field(
        default=None, metadata={"name": name, "required": required, "style": style}
    )


def _unwrap_optional(hint: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _is_model(hint: Any) -> bool:
    return isinstance(hint, type) and issubclass(hint, Model)


def _convert(hint: Any, value: Any) -> Any:
    """Convert a decoded JSON value into the annotated field type."""
    if value is None:
        return None

    hint = _unwrap_optional(hint)
    if _is_model(hint):
        return hint.from_map(value) if isinstance(value, dict) else value

    origin = typing.get_origin(hint)
    if origin is list and isinstance(value, list):
        args = typing.get_args(hint)
        item_hint = args[0] if args else Any
        return [_convert(item_hint, item) for item in value]
    if origin is dict and isinstance(value, dict):
        args = typing.get_args(hint)
        if len(args) == 2:
            return {key: _convert(args[1], item) for key, item in value.items()}

    # Primitives are passed through as the service sent them
    return value


def _dump(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_map()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _wire_name(model_field: Any) -> str:
    return model_field.metadata.get("name", model_field.name)


@dataclass
class Model:
    """Base class for request, response and nested API structures."""

    def validate(self) -> None:
        """Check that every required field is present.

        Raises:
            ValidationError: If a required field is None
        """
        for model_field in fields(self):
            value = getattr(self, model_field.name)
            if value is None:
                if model_field.metadata.get("required"):
                    raise ValidationError(f"{_wire_name(model_field)} is required.")
                continue

            items = value if isinstance(value, list) else [value]
            for item in items:
                if isinstance(item, Model):
                    item.validate()

    def to_map(self) -> dict[str, Any]:
        """Return the wire representation, skipping unset fields."""
        result: dict[str, Any] = {}
        for model_field in fields(self):
            value = getattr(self, model_field.name)
            if value is not None:
                result[_wire_name(model_field)] = _dump(value)
        return result

    @classmethod
    def from_map(cls: type[M], m: dict[str, Any]) -> M:
        """Build an instance from its wire representation.

        Unknown keys are ignored and missing keys stay None.
        """
        hints = _type_hints(cls)
        values: dict[str, Any] = {}
        for model_field in fields(cls):
            name = _wire_name(model_field)
            if name in m:
                values[model_field.name] = _convert(hints[model_field.name], m[name])
        return cls(**values)

    def to_query(self) -> dict[str, str]:
        """Flatten the set fields into RPC query parameters."""
        plain: dict[str, Any] = {}
        for model_field in fields(self):
            value = getattr(self, model_field.name)
            if value is None:
                continue

            style = model_field.metadata.get("style")
            dumped = _dump(value)
            plain[_wire_name(model_field)] = (
                array_to_string(dumped, style) if style else dumped
            )
        return flatten_query(plain)

    def set(self: M, **values: Any) -> M:
        """Assign fields by attribute name and return self for chaining.

        Raises:
            AttributeError: If a name is not a field of this model
        """
        names = {model_field.name for model_field in fields(self)}
        for name, value in values.items():
            if name not in names:
                raise AttributeError(f"{type(self).__name__} has no field {name!r}")
            setattr(self, name, value)
        return self

    def __str__(self) -> str:
        return json.dumps(self.to_map(), indent=2, ensure_ascii=False, default=str)


@dataclass
class ResponseBody(Model):
    """Fields returned by every operation."""

    code: str | None = wire("Code")
    is_success: bool | None = wire("IsSuccess")
    request_id: str | None = wire("RequestId")


@dataclass
class ApiResponse(Model):
    """Transport envelope: response headers, HTTP status and parsed body."""

    headers: dict[str, str] | None = wire("headers", required=True)
    status_code: int | None = wire("statusCode", required=True)
    body: ResponseBody | None = wire("body", required=True)
