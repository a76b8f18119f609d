# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mapping-backed input source.

``MappingInputSource`` wraps a flat, string-keyed mapping. Prefix views
returned by ``sub_scope`` share the underlying mapping and only translate
keys, so scoping is cheap regardless of input size.

Nested documents (parsed YAML/JSON, form trees) are flattened with
``MappingInputSource.from_nested``::

    {"address": {"city": "Oslo"}, "items": [{"sku": "A1"}], "tags": ["x"]}

becomes::

    address.city = Oslo
    items[0].sku = A1
    tags[0]      = x
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from omnibase_binding.models import ModelBindingValue


class MappingInputSource:
    """Flat key/value input source with prefix-scoped views.

    Args:
        data: Flat mapping of fully-qualified keys to raw values.
        source: Name recorded on every ``ModelBindingValue`` read.
        prefix: Key prefix of this view; empty for the root source.
    """

    __slots__ = ("_data", "_prefix", "_source")

    def __init__(
        self,
        data: Mapping[str, object],
        source: str = "mapping",
        prefix: str = "",
    ) -> None:
        self._data = data
        self._source = source
        self._prefix = prefix

    @classmethod
    def from_nested(
        cls,
        data: Mapping[str, object],
        separator: str = ".",
        source: str = "mapping",
    ) -> MappingInputSource:
        """Flatten a nested mapping into a root input source."""
        flat: dict[str, object] = {}
        _flatten(data, "", separator, flat)
        return cls(flat, source=source)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def source(self) -> str:
        return self._source

    def value(self, key: str) -> ModelBindingValue | None:
        raw_key = self._prefix + key
        if raw_key not in self._data:
            return None
        return ModelBindingValue(
            raw_key=raw_key,
            raw_value=self._data[raw_key],
            source=self._source,
        )

    def has(self, key: str) -> bool:
        return self._prefix + key in self._data

    def has_any_prefixed_with(self, prefix: str) -> bool:
        full_prefix = self._prefix + prefix
        return any(key.startswith(full_prefix) for key in self._data)

    def sub_scope(self, prefix: str) -> MappingInputSource:
        return MappingInputSource(
            self._data, source=self._source, prefix=self._prefix + prefix
        )

    def keys(self) -> Iterator[str]:
        """Yield the keys visible in this view, relative to its prefix."""
        offset = len(self._prefix)
        for key in self._data:
            if key.startswith(self._prefix):
                yield key[offset:]

    def __repr__(self) -> str:
        return f"MappingInputSource(source={self._source!r}, prefix={self._prefix!r})"


def _flatten(
    value: object,
    key: str,
    separator: str,
    out: dict[str, object],
) -> None:
    if isinstance(value, Mapping):
        for child_key, child in value.items():
            child_name = str(child_key)
            _flatten(
                child,
                f"{key}{separator}{child_name}" if key else child_name,
                separator,
                out,
            )
    elif isinstance(value, list | tuple):
        for index, child in enumerate(value):
            _flatten(child, f"{key}[{index}]", separator, out)
    else:
        out[key] = value


__all__ = ["MappingInputSource"]
