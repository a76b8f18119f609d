# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type-keyed service registry.

Minimal service locator used to supply default collaborators (resolver,
converter) to binding contexts and to serve ``PropertyContext.service()``
lookups from property actions.

Example:
    >>> registry = ServiceRegistry()
    >>> registry.register_instance(ProtocolValueConverter, MyConverter())
    >>> context = BindingContext(source, logger=logger, locator=registry)
"""

from __future__ import annotations

import logging
import threading
from typing import TypeVar, cast

from omnibase_binding.errors import ModelBindingErrorContext, ServiceResolutionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceRegistry:
    """Registry of service instances keyed by interface type.

    Thread Safety:
        Registration and lookup are protected by a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._instances: dict[type, object] = {}

    def register_instance(self, interface: type[T], instance: T) -> None:
        """Register ``instance`` for ``interface``, replacing any previous one."""
        with self._lock:
            replaced = interface in self._instances
            self._instances[interface] = instance
        logger.debug(
            "Registered service instance",
            extra={
                "interface": interface.__name__,
                "implementation": type(instance).__name__,
                "replaced": replaced,
            },
        )

    def resolve(self, interface: type[T]) -> T:
        """Return the instance registered for ``interface``.

        Raises:
            ServiceResolutionError: If nothing is registered for ``interface``.
        """
        with self._lock:
            if interface in self._instances:
                return cast(T, self._instances[interface])
        raise ServiceResolutionError(
            f"No service registered for {interface.__name__}",
            interface=interface.__name__,
            context=ModelBindingErrorContext(
                operation="resolve_service",
                target_name=interface.__name__,
            ),
        )

    def is_registered(self, interface: type) -> bool:
        with self._lock:
            return interface in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)


__all__ = ["ServiceRegistry"]
