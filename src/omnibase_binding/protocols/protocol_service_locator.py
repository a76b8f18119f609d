# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for service locators.

The binding context only consults a locator to pick default resolver and
converter implementations at construction time, and to answer explicit
``service()`` requests from property actions.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ProtocolServiceLocator(Protocol):
    """Resolve service instances by interface type."""

    def resolve(self, interface: type[T]) -> T:
        """Return the instance registered for ``interface`` or raise."""
        ...

    def is_registered(self, interface: type) -> bool:
        """Return True when ``interface`` has a registration."""
        ...


__all__ = ["ProtocolServiceLocator"]
