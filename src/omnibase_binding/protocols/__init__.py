# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding collaborator protocols.

Exports:
    ProtocolInputSource: Keyed raw-value store with prefix scoping
    ProtocolObjectResolver: Instantiates and populates types
    ProtocolValueConverter: Converts raw values to typed values
    ProtocolServiceLocator: Resolves services by interface type
"""

from omnibase_binding.protocols.protocol_input_source import ProtocolInputSource
from omnibase_binding.protocols.protocol_object_resolver import (
    ProtocolObjectResolver,
)
from omnibase_binding.protocols.protocol_service_locator import (
    ProtocolServiceLocator,
)
from omnibase_binding.protocols.protocol_value_converter import (
    ProtocolValueConverter,
)

__all__: list[str] = [
    "ProtocolInputSource",
    "ProtocolObjectResolver",
    "ProtocolServiceLocator",
    "ProtocolValueConverter",
]
