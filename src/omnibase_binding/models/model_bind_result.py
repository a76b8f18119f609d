# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bind result model.

Returned by object resolvers for every top-level, nested or prefixed bind.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_binding.models.model_binding_problem import ModelBindingProblem


class ModelBindResult(BaseModel):
    """Immutable ``(value, problems)`` pair produced by a bind.

    The value may be partially populated when problems were recorded; the
    problems are in the order they were logged. Use ``if result:`` or
    ``result.succeeded`` to check that no problems occurred.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: object | None = Field(default=None, description="Bound object")
    problems: tuple[ModelBindingProblem, ...] = Field(
        default=(), description="Problems recorded during the bind"
    )

    @property
    def succeeded(self) -> bool:
        """True when the bind recorded no problems."""
        return not self.problems

    def __bool__(self) -> bool:
        return self.succeeded


__all__ = ["ModelBindResult"]
