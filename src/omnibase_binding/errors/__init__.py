# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Errors Module.

Exports:
    ModelBindingErrorContext: Configuration model for bundled error context
    BindingError: Base binding engine error class
    BindingConfigurationError: Construction and configuration faults
    ServiceResolutionError: Missing service locator registrations
    InputSourceError: Input file loading failures

Error Policy:
    Exceptions are reserved for faults that happen before or around a bind
    (constructing a context, loading an input file, resolving services).
    Faults raised while binding an individual property are converted into
    ``ModelBindingProblem`` records and never propagate.

    Example::

        from omnibase_binding.errors import BindingConfigurationError

        try:
            context = BindingContext(source, logger=None)
        except BindingConfigurationError as e:
            print(e.error_code)  # EnumBindingErrorCode.INVALID_CONFIGURATION
"""

from omnibase_binding.errors.binding_errors import (
    BindingConfigurationError,
    BindingError,
    InputSourceError,
    ServiceResolutionError,
)
from omnibase_binding.errors.model_binding_error_context import (
    ModelBindingErrorContext,
)

__all__: list[str] = [
    # Configuration model
    "ModelBindingErrorContext",
    # Error classes
    "BindingError",
    "BindingConfigurationError",
    "ServiceResolutionError",
    "InputSourceError",
]
