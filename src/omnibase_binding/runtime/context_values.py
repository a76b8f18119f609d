# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Context values: naming-aware, converting view over an input source."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from omnibase_binding.models import ModelBindingValue
    from omnibase_binding.protocols import ProtocolInputSource, ProtocolValueConverter
    from omnibase_binding.runtime.registry_naming_strategy import NamingStrategyChain


class ContextValues:
    """Answer "what is the value of property P" for one binding context.

    Each lookup resolves the key through the naming strategy chain, reads the
    raw value from the input source and hands it to the converter. A property
    with no matching key is absent (``None``), never a fault. Converter
    faults propagate to the caller.

    Built lazily by ``BindingContext.values`` and reused for the rest of that
    context's life.
    """

    def __init__(
        self,
        source: ProtocolInputSource,
        naming: NamingStrategyChain,
        converter: ProtocolValueConverter,
    ) -> None:
        self._source = source
        self._naming = naming
        self._converter = converter

    def has(self, property_name: str) -> bool:
        return self._naming.resolve_key(property_name, self._source) is not None

    def raw_value_for(self, property_name: str) -> ModelBindingValue | None:
        key = self._naming.resolve_key(property_name, self._source)
        if key is None:
            return None
        return self._source.value(key)

    def value_for(self, property_name: str, target_type: object = str) -> object | None:
        raw = self.raw_value_for(property_name)
        if raw is None:
            return None
        return self._converter.convert(raw.raw_value, target_type)


__all__ = ["ContextValues"]
