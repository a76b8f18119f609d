# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default scalar value converter backed by pydantic.

Conversion is delegated to ``pydantic.TypeAdapter`` in lax mode, which
already knows how to turn strings into ints, floats, bools, decimals,
dates, UUIDs, enums, paths and ``Optional``/``Literal`` types. Failures
surface as ``pydantic.ValidationError`` and are left to the caller.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import TypeAdapter


class ValueConverter:
    """Convert raw input values to typed values.

    Type adapters are built once per converter instance per target type.

    Example:
        >>> ValueConverter().convert("42", int)
        42
        >>> ValueConverter().convert("yes", bool)
        True
    """

    def __init__(self) -> None:
        self._adapters: dict[object, TypeAdapter[object]] = {}

    def convert(self, raw_value: object, target_type: object) -> object:
        if target_type is object:
            return raw_value
        # YAML/JSON numbers bound to str fields keep their literal spelling
        if target_type is str and isinstance(raw_value, int | float | Decimal):
            if not isinstance(raw_value, bool):
                return str(raw_value)
        return self._adapter(target_type).validate_python(raw_value)

    def _adapter(self, target_type: object) -> TypeAdapter[object]:
        try:
            return self._adapters[target_type]
        except KeyError:
            adapter: TypeAdapter[object] = TypeAdapter(target_type)
            self._adapters[target_type] = adapter
            return adapter
        except TypeError:
            # unhashable type expressions are not memoized
            return TypeAdapter(target_type)


__all__ = ["ValueConverter"]
