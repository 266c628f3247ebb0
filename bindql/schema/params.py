"""Parameter types, binding records and placeholder helpers.

A placeholder is a colon followed by one or more word characters
(``:name``, ``:c1``, ``:is_active``).  Positional ``?`` markers are not
recognised.

``add()`` accepts three shapes of value and resolves each placeholder of a
fragment against it:

- a mapping: looked up by placeholder name, then by position in the
  fragment, else ``None``;
- a sequence (list or tuple): looked up by position, else ``None``;
- anything else: broadcast, every placeholder of the fragment gets it.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

#: Matches a named placeholder such as ``:name``.
PLACEHOLDER_PATTERN = re.compile(r":\w+")


class ParamType(str, Enum):
    """Driver-level type a value is bound as."""

    STRING = "STRING"
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"


class Binding(BaseModel):
    """A registered placeholder value and the type it is bound as.

    Attributes:
        value: Scalar value, or ``None``.
        type: Bind type; inferred from ``value`` when not given explicitly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: Any = None
    type: ParamType


class BindingOverride(BaseModel):
    """A replacement value supplied to ``execute()``.

    ``{":name": {"value": "Bob", "type": "STRING"}}`` parses into this model.
    When ``type`` is omitted it is re-inferred from ``value``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: Any = None
    type: ParamType | None = None

    def resolve(self) -> Binding:
        """Return the effective binding for this override."""
        return Binding(value=self.value, type=self.type or infer_type(self.value))


def infer_type(value: Any) -> ParamType:
    """Infer the bind type of ``value`` from its runtime kind.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    Floats and structured values fall back to ``STRING``.
    """
    if value is None:
        return ParamType.NULL
    if isinstance(value, bool):
        return ParamType.BOOLEAN
    if isinstance(value, int):
        return ParamType.INTEGER
    return ParamType.STRING


def find_placeholders(fragment: str) -> list[str]:
    """Return every ``:name`` placeholder in ``fragment``, in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(fragment)


def resolve_values(placeholders: Sequence[str], value: Any) -> list[Any]:
    """Resolve the bound value of each placeholder of one fragment.

    Args:
        placeholders: Placeholders of the fragment, in order of appearance.
        value: The value argument passed to ``add()``.

    Returns:
        One value per placeholder, in the same order.
    """
    if isinstance(value, Mapping):
        return [_lookup(value, name, i) for i, name in enumerate(placeholders)]
    if _is_sequence(value):
        return [value[i] if i < len(value) else None for i in range(len(placeholders))]
    return [value] * len(placeholders)


def to_param_type(type_: ParamType | str | None) -> ParamType | None:
    """Accept a ``ParamType`` or its name (case-insensitive)."""
    if type_ is None or isinstance(type_, ParamType):
        return type_
    return ParamType(type_.upper())


def _lookup(mapping: Mapping[Any, Any], name: str, index: int) -> Any:
    if name in mapping:
        return mapping[name]
    return mapping.get(index)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
