# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Property context handed to property actions by ``BindingContext.for_property``."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from omnibase_binding.models import ModelBindingValue
    from omnibase_binding.runtime.binding_context import BindingContext

T = TypeVar("T")


class PropertyContext:
    """View of one property being bound within a binding context.

    Example:
        >>> def bind_quantity(prop: PropertyContext) -> None:
        ...     if prop.has_value:
        ...         order.quantity = prop.value_for(int)
        >>> context.for_property("quantity", bind_quantity)
    """

    __slots__ = ("_context", "_property_name")

    def __init__(self, context: BindingContext, property_name: str) -> None:
        self._context = context
        self._property_name = property_name

    @property
    def property_name(self) -> str:
        return self._property_name

    @property
    def context(self) -> BindingContext:
        return self._context

    @property
    def owner(self) -> object | None:
        """Object currently being populated."""
        return self._context.current_object

    @property
    def has_value(self) -> bool:
        return self._context.values.has(self._property_name)

    @property
    def raw_value(self) -> ModelBindingValue | None:
        return self._context.values.raw_value_for(self._property_name)

    def value_for(self, target_type: object = str) -> object | None:
        """Convert this property's value to ``target_type``; None when absent."""
        return self._context.values.value_for(self._property_name, target_type)

    def service(self, interface: type[T]) -> T:
        return self._context.service(interface)


__all__ = ["PropertyContext"]
