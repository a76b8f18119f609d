# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding runtime.

Exports:
    BindingContext: Orchestrator for one bind (problems, scopes, sub-binds)
    PropertyContext: View of one property handed to property actions
    ContextValues: Naming-aware, converting view over an input source
    NamingStrategyChain: Immutable ordered naming strategies
    NamingStrategyChainBuilder: Builder for custom chains
    register_naming_strategy: Append to the process-wide naming registry
    ObjectResolver: Default resolver for dataclasses and pydantic models
    bind_model: Top-level bind entry point
    ValueConverter: Default pydantic-backed scalar converter
    ServiceRegistry: Type-keyed service locator
    MappingInputSource: Flat mapping input source with prefix views
    load_input_source: Load a YAML/JSON file into an input source
"""

from omnibase_binding.runtime.binding_context import BindingContext, BindingLogger
from omnibase_binding.runtime.context_values import ContextValues
from omnibase_binding.runtime.input_source_loader import (
    MAX_INPUT_SIZE_BYTES,
    load_input_source,
)
from omnibase_binding.runtime.input_source_mapping import MappingInputSource
from omnibase_binding.runtime.object_resolver import (
    DEFAULT_BINDING_LOGGER_NAME,
    ObjectResolver,
    bind_model,
)
from omnibase_binding.runtime.property_context import PropertyContext
from omnibase_binding.runtime.registry_naming_strategy import (
    DEFAULT_NAMING_STRATEGIES,
    NamingStrategy,
    NamingStrategyChain,
    NamingStrategyChainBuilder,
    RegistryNamingStrategy,
    bracket_strategy,
    dash_strategy,
    identity_strategy,
    register_naming_strategy,
)
from omnibase_binding.runtime.service_registry import ServiceRegistry
from omnibase_binding.runtime.value_converter import ValueConverter

__all__: list[str] = [
    "DEFAULT_BINDING_LOGGER_NAME",
    "DEFAULT_NAMING_STRATEGIES",
    "MAX_INPUT_SIZE_BYTES",
    "BindingContext",
    "BindingLogger",
    "ContextValues",
    "MappingInputSource",
    "NamingStrategy",
    "NamingStrategyChain",
    "NamingStrategyChainBuilder",
    "ObjectResolver",
    "PropertyContext",
    "RegistryNamingStrategy",
    "ServiceRegistry",
    "ValueConverter",
    "bind_model",
    "bracket_strategy",
    "dash_strategy",
    "identity_strategy",
    "load_input_source",
    "register_naming_strategy",
]
