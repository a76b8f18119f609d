# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Binding - fault-isolating data binding engine.

Converts flat or prefix-scoped key/value input into populated object graphs.
A fault while binding one property is recorded as a structured problem and
never aborts binding of the remaining properties.

Key Components:
    - BindingContext: per-bind orchestrator (problems, object scopes,
      nested and prefixed sub-binds)
    - NamingStrategyChain: ordered key spellings tried for each field
    - ObjectResolver / bind_model: default resolver for dataclasses and
      pydantic models
    - MappingInputSource / load_input_source: input sources from mappings,
      YAML and JSON files
"""

from omnibase_binding.models import (
    ModelBindingConfig,
    ModelBindingProblem,
    ModelBindingValue,
    ModelBindResult,
)
from omnibase_binding.runtime import (
    BindingContext,
    MappingInputSource,
    NamingStrategyChain,
    NamingStrategyChainBuilder,
    ObjectResolver,
    bind_model,
    load_input_source,
    register_naming_strategy,
)

__all__: list[str] = [
    "BindingContext",
    "MappingInputSource",
    "ModelBindResult",
    "ModelBindingConfig",
    "ModelBindingProblem",
    "ModelBindingValue",
    "NamingStrategyChain",
    "NamingStrategyChainBuilder",
    "ObjectResolver",
    "bind_model",
    "load_input_source",
    "register_naming_strategy",
]
