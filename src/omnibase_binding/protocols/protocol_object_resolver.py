# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for object resolvers.

A resolver decides how to instantiate a concrete type and populate it from
a binding context. The binding context invokes it synchronously for every
nested or prefixed bind and merges the problems it returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_binding.models import ModelBindResult
    from omnibase_binding.runtime.binding_context import BindingContext


@runtime_checkable
class ProtocolObjectResolver(Protocol):
    """Instantiate and populate a type from a binding context."""

    def bind(self, target_type: type, context: BindingContext) -> ModelBindResult:
        """Bind ``target_type`` against ``context``.

        Must return before the caller continues (no deferred work). The
        returned problems should include every problem recorded on
        ``context`` during the bind.
        """
        ...


__all__ = ["ProtocolObjectResolver"]
