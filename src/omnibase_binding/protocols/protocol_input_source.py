# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for keyed input sources.

An input source is the external key/value store a bind reads from. It is
treated as immutable for the duration of one bind. Sources support prefix
probes and prefix-scoped views so nested objects and collection elements can
be bound against just the keys that belong to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_binding.models import ModelBindingValue


@runtime_checkable
class ProtocolInputSource(Protocol):
    """Keyed lookup of raw values with prefix probing and scoping.

    Example Implementation:
        class QueryStringSource(ProtocolInputSource):
            def value(self, key: str) -> ModelBindingValue | None:
                if key not in self._params:
                    return None
                return ModelBindingValue(
                    raw_key=key, raw_value=self._params[key], source="query"
                )
            ...
    """

    def value(self, key: str) -> ModelBindingValue | None:
        """Return the raw value stored under ``key``, or None if absent."""
        ...

    def has(self, key: str) -> bool:
        """Return True when a value is present under ``key``."""
        ...

    def has_any_prefixed_with(self, prefix: str) -> bool:
        """Return True when at least one key starts with ``prefix``."""
        ...

    def sub_scope(self, prefix: str) -> ProtocolInputSource:
        """Return a view where lookups of ``k`` read ``prefix + k``."""
        ...


__all__ = ["ProtocolInputSource"]
