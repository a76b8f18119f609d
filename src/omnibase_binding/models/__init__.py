# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding models.

Exports:
    ModelBindingValue: Raw value read from an input source
    ModelBindingProblem: Structured diagnostic for one binding fault
    ModelBindResult: Value and problems produced by a bind
    ModelBindingConfig: Engine configuration with environment overrides
"""

from omnibase_binding.models.model_bind_result import ModelBindResult
from omnibase_binding.models.model_binding_config import (
    DEFAULT_ENV_PREFIX,
    ModelBindingConfig,
)
from omnibase_binding.models.model_binding_problem import ModelBindingProblem
from omnibase_binding.models.model_binding_value import ModelBindingValue

__all__: list[str] = [
    "DEFAULT_ENV_PREFIX",
    "ModelBindResult",
    "ModelBindingConfig",
    "ModelBindingProblem",
    "ModelBindingValue",
]
