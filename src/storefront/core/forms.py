"""Binding of posted form fields onto entities.

Only keys present in the form are bound; absent keys leave the entity
untouched. Every value is parsed before anything is assigned, so a
malformed field leaves the entity unchanged.
"""

from collections.abc import Callable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from src.storefront.core.errors import ValidationError

_TRUE_VALUES = {"true", "on", "1", "yes"}
_FALSE_VALUES = {"false", "off", "0", "no", ""}


def parse_str(value: str) -> str:
    return value.strip()


def parse_int(value: str) -> int:
    return int(value.strip())


def parse_optional_int(value: str) -> int | None:
    """Integer, with empty input or ``0`` meaning no value."""
    value = value.strip()
    if not value or value == "0":
        return None
    return int(value)


def parse_decimal(value: str) -> Decimal:
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal {value!r}") from exc
    if not parsed.is_finite():
        raise ValueError(f"decimal {value!r} is not finite")
    return parsed


def parse_bool(value: str) -> bool:
    # HTML checkboxes post "true,false" when ticked alongside their hidden field
    normalized = value.strip().lower().split(",")[0]
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}")


Binding = tuple[str, Callable[[str], Any]]


def bind_form(target: Any, form: Mapping[str, str], bindings: Mapping[str, Binding]) -> set[str]:
    """Assign the recognised form fields onto ``target``.

    ``bindings`` maps a form key to the attribute name and the parser for its
    value. Returns the names of the attributes that were assigned.
    """
    values: dict[str, Any] = {}
    for key, (attribute, parser) in bindings.items():
        if key not in form:
            continue
        try:
            values[attribute] = parser(form[key])
        except ValueError as exc:
            raise ValidationError(f"Invalid value for {key}: {form[key]!r}", field=key) from exc

    for attribute, value in values.items():
        setattr(target, attribute, value)
    return set(values)


def read_int(form: Mapping[str, str], key: str, default: int = 0) -> int:
    """Read one integer field, e.g. the ``productid`` sentinel."""
    if key not in form:
        return default
    try:
        return parse_int(form[key])
    except ValueError as exc:
        raise ValidationError(f"Invalid value for {key}: {form[key]!r}", field=key) from exc
