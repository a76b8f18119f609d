# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding context: orchestrator for one bind operation.

The BindingContext owns everything a single bind needs:

- the input source being read
- the problem list (append-only, never cleared or deduplicated)
- the object scope stack (object currently being populated)
- lazily-built ``ContextValues`` (naming chain + converter over the source)
- the resolver used for nested and prefixed sub-binds

Fault Isolation:
    ``for_property`` runs one property's binding action and converts any
    exception it raises into a ``ModelBindingProblem``. One bad property
    never aborts binding of its siblings. The only exception that escapes
    the context is the construction fault raised when no logger is given.

Object Scopes:
    ``object_scope`` / ``for_object`` push the object being populated and
    pop it on every exit path, including faulting ones, so problem
    ownership stays correct for the rest of the bind.

Greedy Prefixed Binding:
    ``bind_prefixed`` probes the source for any key under the prefix before
    invoking the resolver. Absent children and collection elements cost one
    probe instead of a full recursive bind.

Thread Safety:
    Not thread-safe. One instance serves exactly one bind and its
    synchronous sub-binds.

Example:
    >>> context = BindingContext(
    ...     MappingInputSource({"first-name": "Ada"}),
    ...     logger=logging.getLogger("binding"),
    ... )
    >>> context.values.value_for("first_name")
    'Ada'
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

from omnibase_binding.errors import (
    BindingConfigurationError,
    ModelBindingErrorContext,
)
from omnibase_binding.models import (
    ModelBindingConfig,
    ModelBindingProblem,
    ModelBindingValue,
)
from omnibase_binding.protocols import ProtocolObjectResolver, ProtocolValueConverter
from omnibase_binding.runtime.context_values import ContextValues
from omnibase_binding.runtime.property_context import PropertyContext
from omnibase_binding.runtime.registry_naming_strategy import NamingStrategyChain
from omnibase_binding.runtime.value_converter import ValueConverter

if TYPE_CHECKING:
    from omnibase_binding.protocols import ProtocolInputSource, ProtocolServiceLocator

T = TypeVar("T")

BindingLogger = logging.Logger | logging.LoggerAdapter


class BindingContext:
    """Orchestrates one bind over an input source.

    Args:
        input_source: Source of raw values for this bind.
        logger: Logger receiving bind diagnostics. Required.
        locator: Optional service locator; consulted once, at construction,
            for a default resolver and converter, and for ``service()``.
        resolver: Object resolver for nested and prefixed binds. Defaults to
            the locator's ``ProtocolObjectResolver`` or ``ObjectResolver``.
        converter: Value converter. Defaults to the locator's
            ``ProtocolValueConverter`` or ``ValueConverter``.
        naming: Naming strategy chain. Defaults to a snapshot of the
            process-wide registry taken now.
        config: Engine configuration shared with child contexts.

    Raises:
        BindingConfigurationError: If ``logger`` is None.
    """

    def __init__(
        self,
        input_source: ProtocolInputSource,
        logger: BindingLogger | None,
        *,
        locator: ProtocolServiceLocator | None = None,
        resolver: ProtocolObjectResolver | None = None,
        converter: ProtocolValueConverter | None = None,
        naming: NamingStrategyChain | None = None,
        config: ModelBindingConfig | None = None,
    ) -> None:
        if logger is None:
            raise BindingConfigurationError(
                "BindingContext requires a logger",
                context=ModelBindingErrorContext(operation="create_binding_context"),
                parameter="logger",
            )

        self._source = input_source
        self._logger = logger
        self._locator = locator
        self._config = config or ModelBindingConfig()
        self._naming = naming if naming is not None else NamingStrategyChain.default()
        self._resolver = resolver or self._default_resolver()
        self._converter = converter or self._default_converter()
        self._problems: list[ModelBindingProblem] = []
        self._object_stack: list[object] = []
        self._values: ContextValues | None = None

    # -------------------------------------------------------------------------
    # Collaborators
    # -------------------------------------------------------------------------

    def _default_resolver(self) -> ProtocolObjectResolver:
        if self._locator is not None and self._locator.is_registered(
            ProtocolObjectResolver
        ):
            return self._locator.resolve(ProtocolObjectResolver)

        from omnibase_binding.runtime.object_resolver import ObjectResolver

        return ObjectResolver()

    def _default_converter(self) -> ProtocolValueConverter:
        if self._locator is not None and self._locator.is_registered(
            ProtocolValueConverter
        ):
            return self._locator.resolve(ProtocolValueConverter)
        return ValueConverter()

    @property
    def input_source(self) -> ProtocolInputSource:
        return self._source

    @property
    def logger(self) -> BindingLogger:
        return self._logger

    @property
    def config(self) -> ModelBindingConfig:
        return self._config

    @property
    def naming(self) -> NamingStrategyChain:
        return self._naming

    @property
    def resolver(self) -> ProtocolObjectResolver:
        return self._resolver

    @property
    def converter(self) -> ProtocolValueConverter:
        return self._converter

    @property
    def values(self) -> ContextValues:
        """Naming-aware, converting view over the input source (built once)."""
        if self._values is None:
            self._values = ContextValues(self._source, self._naming, self._converter)
        return self._values

    def service(self, interface: type[T]) -> T:
        """Resolve ``interface`` through the service locator.

        Raises:
            BindingConfigurationError: If the context has no locator.
            ServiceResolutionError: If the locator has no registration.
        """
        if self._locator is None:
            raise BindingConfigurationError(
                f"No service locator available to resolve {interface.__name__}",
                context=ModelBindingErrorContext(
                    operation="resolve_service",
                    target_name=interface.__name__,
                ),
            )
        return self._locator.resolve(interface)

    # -------------------------------------------------------------------------
    # Problems
    # -------------------------------------------------------------------------

    @property
    def problems(self) -> tuple[ModelBindingProblem, ...]:
        return tuple(self._problems)

    def log_problem(
        self,
        error: BaseException | str,
        value: ModelBindingValue | None = None,
        property_name: str | None = None,
    ) -> ModelBindingProblem:
        """Record a problem owned by the current object.

        Accepts either a caught exception, rendered to text, or a
        pre-composed message. Every problem in the context is built here.
        """
        if isinstance(error, BaseException):
            exception_text = self._render_exception(error)
        else:
            exception_text = error

        problem = ModelBindingProblem(
            exception_text=exception_text,
            item=self.current_object,
            property_name=property_name,
            value=value,
        )
        self._problems.append(problem)

        self._logger.debug(
            "Recorded binding problem: %s",
            problem.describe(),
            extra={
                "property_name": property_name,
                "owner_type": type(problem.item).__name__
                if problem.item is not None
                else None,
                "raw_key": value.raw_key if value is not None else None,
            },
        )
        return problem

    def _render_exception(self, error: BaseException) -> str:
        if not isinstance(error, ValidationError):
            if self._config.include_tracebacks:
                return "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                )
            return f"{type(error).__name__}: {error}"

        # Pydantic's str() ends with a documentation link, not the message.
        messages = "; ".join(
            detail["msg"] for detail in error.errors(include_url=False)
        )
        summary = f"{type(error).__name__}: {messages}"
        if self._config.include_tracebacks:
            stack = "".join(traceback.format_tb(error.__traceback__))
            return f"Traceback (most recent call last):\n{stack}{summary}\n"
        return summary

    # -------------------------------------------------------------------------
    # Scopes
    # -------------------------------------------------------------------------

    def for_property(
        self,
        property_name: str,
        action: Callable[[PropertyContext], None],
    ) -> None:
        """Run ``action`` for one property; faults become problems."""
        try:
            action(PropertyContext(self, property_name))
        except Exception as e:
            self.log_problem(e, self._refetch_raw_value(property_name), property_name)

    def _refetch_raw_value(self, property_name: str) -> ModelBindingValue | None:
        try:
            return self.values.raw_value_for(property_name)
        except Exception:
            self._logger.debug(
                "Could not re-fetch raw value for failed property",
                extra={"property_name": property_name},
                exc_info=True,
            )
            return None

    @contextmanager
    def object_scope(self, obj: object) -> Iterator[object]:
        """Make ``obj`` the current object for the duration of the block."""
        self._object_stack.append(obj)
        try:
            yield obj
        finally:
            self._object_stack.pop()

    def for_object(self, obj: object, action: Callable[[], None]) -> None:
        with self.object_scope(obj):
            action()

    @property
    def current_object(self) -> object | None:
        return self._object_stack[-1] if self._object_stack else None

    # -------------------------------------------------------------------------
    # Nested / prefixed binding
    # -------------------------------------------------------------------------

    def _child(self, input_source: ProtocolInputSource) -> BindingContext:
        return BindingContext(
            input_source,
            self._logger,
            locator=self._locator,
            resolver=self._resolver,
            converter=self._converter,
            naming=self._naming,
            config=self._config,
        )

    def bind_nested(
        self,
        input_source: ProtocolInputSource,
        target_type: type,
        continuation: Callable[[object | None], None],
    ) -> None:
        """Bind ``target_type`` against an explicit sub-source.

        The resolver's problems are appended to this context's problems and
        ``continuation`` receives the bound value, synchronously and exactly
        once.
        """
        result = self._resolver.bind(target_type, self._child(input_source))
        self._problems.extend(result.problems)
        self._logger.debug(
            "Bound nested %s",
            target_type.__name__,
            extra={"problem_count": len(result.problems)},
        )
        continuation(result.value)

    def bind_prefixed(self, prefix: str, target_type: type) -> object | None:
        """Bind ``target_type`` from the keys under ``prefix``.

        Returns None without invoking the resolver when no key starts with
        ``prefix``.
        """
        if not self._source.has_any_prefixed_with(prefix):
            return None

        result = self._resolver.bind(
            target_type, self._child(self._source.sub_scope(prefix))
        )
        self._problems.extend(result.problems)
        self._logger.debug(
            "Bound %s under prefix %r",
            target_type.__name__,
            prefix,
            extra={"prefix": prefix, "problem_count": len(result.problems)},
        )
        return result.value


__all__ = ["BindingContext", "BindingLogger"]
