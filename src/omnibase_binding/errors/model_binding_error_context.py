# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Error Context Configuration Model.

This module defines the configuration model for binding error context,
bundling the common structured fields so error constructors stay small.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelBindingErrorContext(BaseModel):
    """Configuration model for binding error context.

    Attributes:
        operation: Operation being performed (create_context, load_input, ...)
        target_name: Target type, file or interface name
        correlation_id: Correlation ID for tracing a bind across log lines

    Example:
        >>> context = ModelBindingErrorContext(
        ...     operation="load_input",
        ...     target_name="order.yaml",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise InputSourceError("Input file not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target type, file or interface name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        operation: str | None = None,
        target_name: str | None = None,
        correlation_id: UUID | None = None,
    ) -> ModelBindingErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelBindingErrorContext"]
