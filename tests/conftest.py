"""Pytest configuration and shared fixtures for omnibase_binding tests."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from omnibase_binding.models import ModelBindResult
from omnibase_binding.runtime import BindingContext, registry_naming_strategy
from omnibase_binding.runtime.registry_naming_strategy import RegistryNamingStrategy

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.

    Example:
        >>> assert_has_methods(
        ...     source,
        ...     ["value", "has", "has_any_prefixed_with", "sub_scope"],
        ...     protocol_name="ProtocolInputSource",
        ... )
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        if not method_name.startswith("__"):
            assert callable(
                getattr(obj, method_name)
            ), f"{name}.{method_name} must be callable"


# =============================================================================
# Test Doubles
# =============================================================================


class RecordingResolver:
    """Resolver double that records every call and returns canned results.

    Attributes:
        calls: ``(target_type, context)`` for every ``bind`` call.
    """

    def __init__(
        self,
        value: object | None = None,
        problems_factory: Callable[[BindingContext], None] | None = None,
    ) -> None:
        self.calls: list[tuple[type, BindingContext]] = []
        self._value = value
        self._problems_factory = problems_factory

    def bind(self, target_type: type, context: BindingContext) -> ModelBindResult:
        self.calls.append((target_type, context))
        if self._problems_factory is not None:
            self._problems_factory(context)
        return ModelBindResult(value=self._value, problems=context.problems)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def binding_logger() -> logging.Logger:
    """Logger passed to binding contexts under test."""
    return logging.getLogger("tests.omnibase_binding")


@pytest.fixture
def recording_resolver_factory() -> type[RecordingResolver]:
    """Expose the RecordingResolver class to tests."""
    return RecordingResolver


@pytest.fixture
def isolated_naming_registry(
    monkeypatch: pytest.MonkeyPatch,
) -> RegistryNamingStrategy:
    """Replace the process-wide naming registry with a fresh one.

    Strategies registered during a test never leak into other tests.
    """
    registry = RegistryNamingStrategy()
    monkeypatch.setattr(registry_naming_strategy, "_registry", registry)
    return registry
