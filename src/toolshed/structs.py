"""Dataclass <-> plain-value conversion used by the JSON helpers."""

from collections.abc import Callable
from dataclasses import MISSING, asdict, fields, is_dataclass
from types import NoneType
from typing import Any, TypeVar, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def to_jsonable(obj: Any) -> Any:
    """`json` ``default=`` hook that serializes dataclass instances as objects.

    Raises:
        TypeError: For any other non-serializable object, matching `json`'s own error.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Recursively build a dataclass instance from a nested dict.

    Args:
        dc_type: The dataclass type to build.
        values: The dict containing the data, typically decoded JSON.

    Returns:
        An instance of dc_type populated with data from values.

    Raises:
        TypeError: If dc_type is not a dataclass type.
        KeyError: If a required field is missing from values.

    Note:
        - Keys in values that are not fields of dc_type are ignored.
        - Nested dataclasses are rebuilt for fields typed ``SomeDataclass``,
          ``SomeDataclass | None`` and ``list[SomeDataclass]``.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        if field.name in values:
            field_type = type_hints.get(field.name, field.type)
            kwargs[field.name] = _convert(field_type, values[field.name])
        elif field.default is not MISSING:
            kwargs[field.name] = field.default
        elif field.default_factory is not MISSING:
            factory = cast(Callable[[], Any], field.default_factory)
            kwargs[field.name] = factory()
        else:
            raise KeyError(f"Missing required field '{field.name}'")
    return cast(D, dc_type(**kwargs))


def _convert(field_type: Any, value: Any) -> Any:
    if isinstance(value, dict):
        if (target := _resolve_dataclass_type(field_type)) is not None:
            return dict_to_dataclass(target, value)
        return value
    if isinstance(value, list) and get_origin(field_type) is list:
        (item_type,) = get_args(field_type) or (Any,)
        return [_convert(item_type, item) for item in value]
    return value


def _resolve_dataclass_type(field_type: Any) -> type[Any] | None:
    origin = get_origin(field_type)
    if origin is None:
        return cast(type[Any], field_type) if is_dataclass(field_type) else None
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    if len(args) == 1 and is_dataclass(args[0]):
        return cast(type[Any], args[0])
    return None
