# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Error Code Enumeration.

Defines the canonical error codes carried by ``BindingError`` and its
subclasses. Used for error classification in logs and CLI output.
"""

from enum import Enum


class EnumBindingErrorCode(str, Enum):
    """Error codes for binding engine failures.

    Attributes:
        OPERATION_FAILED: Generic failure, default for ``BindingError``
        INVALID_CONFIGURATION: Construction-time or configuration fault
        SERVICE_NOT_FOUND: Locator has no registration for an interface
        INPUT_SOURCE_ERROR: Input file could not be read or parsed
    """

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    SERVICE_NOT_FOUND = "service_not_found"
    INPUT_SOURCE_ERROR = "input_source_error"


__all__ = ["EnumBindingErrorCode"]
