# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Engine Error Classes.

Error Hierarchy:
    BindingError (base binding engine error)
    ├── BindingConfigurationError
    ├── ServiceResolutionError
    └── InputSourceError

Only construction and input-loading faults are raised as exceptions.
Per-property conversion faults never surface as exceptions; they are
recorded as ``ModelBindingProblem`` entries on the binding context.

All errors:
    - Use EnumBindingErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelBindingErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from omnibase_binding.enums import EnumBindingErrorCode
from omnibase_binding.errors.model_binding_error_context import (
    ModelBindingErrorContext,
)


class BindingError(Exception):
    """Base error class for the binding engine.

    Structured Fields (via ModelBindingErrorContext):
        operation: Operation being performed
        target_name: Target type, file or interface name
        correlation_id: Correlation ID for tracing

    Example:
        >>> context = ModelBindingErrorContext(operation="bind_model")
        >>> raise BindingError("Bind failed", context=context, target="Order")
    """

    def __init__(
        self,
        message: str,
        error_code: EnumBindingErrorCode | None = None,
        context: ModelBindingErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize BindingError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled error context (operation, target_name, ...)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: UUID | None = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumBindingErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        if not self.context:
            return f"[{self.error_code.value}] {self.message}"
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"[{self.error_code.value}] {self.message} ({details})"


class BindingConfigurationError(BindingError):
    """Raised when a binding context or config cannot be constructed.

    Used for missing required collaborators (the logger), invalid
    configuration values and environment overrides that fail validation.

    Example:
        >>> raise BindingConfigurationError(
        ...     "logger is required",
        ...     context=ModelBindingErrorContext(operation="create_context"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelBindingErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class ServiceResolutionError(BindingError):
    """Raised when the service locator has no registration for an interface.

    Example:
        >>> raise ServiceResolutionError(
        ...     "No service registered",
        ...     interface="ProtocolObjectResolver",
        ... )
    """

    def __init__(
        self,
        message: str,
        interface: str | None = None,
        context: ModelBindingErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        if interface is not None:
            extra_context["interface"] = interface
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.SERVICE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class InputSourceError(BindingError):
    """Raised when an input file cannot be loaded into an input source.

    Used for missing files, files over the size limit, syntax errors and
    documents whose top level is not a mapping.
    """

    def __init__(
        self,
        message: str,
        context: ModelBindingErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBindingErrorCode.INPUT_SOURCE_ERROR,
            context=context,
            **extra_context,
        )


__all__ = [
    "BindingConfigurationError",
    "BindingError",
    "InputSourceError",
    "ServiceResolutionError",
]
