# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding problem model.

A ``ModelBindingProblem`` is the structured diagnostic recorded whenever a
single property fails to bind. Problems are tied to the object that was
being populated when the fault happened (``item``) and, where known, to the
property and raw value involved.

Problems are only ever constructed through ``BindingContext.log_problem``;
other components route through it rather than building them directly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_binding.models.model_binding_value import ModelBindingValue


class ModelBindingProblem(BaseModel):
    """Immutable record of one binding fault.

    Attributes:
        exception_text: Rendered fault (traceback text or composed message).
        item: Object on top of the object scope stack when the problem was
            recorded, or None if recorded outside any object scope.
        property_name: Property being bound, if any.
        value: Raw value involved, if it could be re-fetched.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    exception_text: str = Field(..., description="Rendered fault text")
    item: object | None = Field(default=None, description="Owning object")
    property_name: str | None = Field(default=None, description="Property name")
    value: ModelBindingValue | None = Field(
        default=None, description="Raw value involved in the fault"
    )

    @property
    def summary(self) -> str:
        """Last non-empty line of the fault text."""
        lines = [line for line in self.exception_text.strip().splitlines() if line]
        return lines[-1].strip() if lines else ""

    def describe(self) -> str:
        """Render the problem as a single line for logs and CLI output.

        Example:
            >>> problem.describe()
            "Order.quantity = 'abc' [quantity]: invalid literal for int()"
        """
        owner = type(self.item).__name__ if self.item is not None else "<none>"
        target = f"{owner}.{self.property_name}" if self.property_name else owner
        if self.value is not None:
            target = f"{target} = {self.value.raw_value!r} [{self.value.raw_key}]"

        return f"{target}: {self.summary}"


__all__ = ["ModelBindingProblem"]
