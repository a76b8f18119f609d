# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for scalar value converters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolValueConverter(Protocol):
    """Convert a raw input value into a typed value.

    Converters raise on failure. They never catch their own faults; the
    binding context's property scope turns them into problems.
    """

    def convert(self, raw_value: object, target_type: object) -> object:
        """Convert ``raw_value`` to ``target_type`` or raise."""
        ...


__all__ = ["ProtocolValueConverter"]
