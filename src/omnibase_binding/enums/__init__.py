# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding Enumerations Module.

Exports:
    EnumBindingErrorCode: Error classification for binding engine errors
"""

from omnibase_binding.enums.enum_binding_error_code import EnumBindingErrorCode

__all__: list[str] = [
    "EnumBindingErrorCode",
]
