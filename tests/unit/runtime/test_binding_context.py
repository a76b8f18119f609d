# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for BindingContext.

Test Coverage:
- Construction fault when the logger is missing
- Property scope fault isolation and best-effort raw value re-fetch
- Object scope push/pop on normal and faulting exits, nested scopes
- Problem logging from exceptions and composed messages
- Greedy prefixed binding (probe before resolve) and problem merging
- Nested binding with synchronous continuation
- Lazy, memoized context values
- Default collaborator selection through the service locator
"""

from __future__ import annotations

import logging

import pytest

from omnibase_binding.errors import BindingConfigurationError
from omnibase_binding.models import ModelBindingConfig, ModelBindingValue
from omnibase_binding.protocols import ProtocolObjectResolver, ProtocolValueConverter
from omnibase_binding.runtime import (
    BindingContext,
    MappingInputSource,
    NamingStrategyChainBuilder,
    ObjectResolver,
    PropertyContext,
    ServiceRegistry,
    ValueConverter,
)


class Owner:
    """Plain object used as an object-scope target."""


@pytest.fixture
def source() -> MappingInputSource:
    return MappingInputSource(
        {
            "name": "widget",
            "quantity": "not-a-number",
            "items[0].sku": "A1",
            "items[1].sku": "B2",
        }
    )


@pytest.fixture
def context(
    source: MappingInputSource, binding_logger: logging.Logger
) -> BindingContext:
    return BindingContext(source, binding_logger)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for construction-time faults and defaults."""

    def test_missing_logger_raises_immediately(
        self, source: MappingInputSource
    ) -> None:
        """A None logger is a construction fault, not a runtime one."""
        with pytest.raises(BindingConfigurationError) as exc_info:
            BindingContext(source, None)

        assert exc_info.value.context["parameter"] == "logger"

    def test_missing_logger_builds_no_state(
        self, source: MappingInputSource, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """No problem list or object stack exists after the failed construction."""
        created: list[BindingContext] = []
        original_init = BindingContext.__init__

        def tracking_init(self: BindingContext, *args: object, **kwargs: object) -> None:
            created.append(self)
            original_init(self, *args, **kwargs)  # type: ignore[arg-type]

        monkeypatch.setattr(BindingContext, "__init__", tracking_init)

        with pytest.raises(BindingConfigurationError):
            BindingContext(source, None)

        assert len(created) == 1
        assert not hasattr(created[0], "_problems")
        assert not hasattr(created[0], "_object_stack")

    def test_defaults_without_locator(self, context: BindingContext) -> None:
        assert isinstance(context.resolver, ObjectResolver)
        assert isinstance(context.converter, ValueConverter)
        assert context.config == ModelBindingConfig()
        assert context.problems == ()
        assert context.current_object is None

    def test_defaults_come_from_locator_when_registered(
        self, source: MappingInputSource, binding_logger: logging.Logger
    ) -> None:
        resolver = ObjectResolver()
        converter = ValueConverter()
        locator = ServiceRegistry()
        locator.register_instance(ProtocolObjectResolver, resolver)
        locator.register_instance(ProtocolValueConverter, converter)

        context = BindingContext(source, binding_logger, locator=locator)

        assert context.resolver is resolver
        assert context.converter is converter

    def test_explicit_collaborators_win_over_locator(
        self, source: MappingInputSource, binding_logger: logging.Logger
    ) -> None:
        locator = ServiceRegistry()
        locator.register_instance(ProtocolValueConverter, ValueConverter())
        explicit = ValueConverter()

        context = BindingContext(
            source, binding_logger, locator=locator, converter=explicit
        )

        assert context.converter is explicit

    def test_logger_adapter_is_accepted(
        self, source: MappingInputSource, binding_logger: logging.Logger
    ) -> None:
        adapter = logging.LoggerAdapter(binding_logger, {"bind": "orders"})

        context = BindingContext(source, adapter)

        assert context.logger is adapter


# =============================================================================
# Property Scope
# =============================================================================


class TestPropertyScope:
    """Tests for fault isolation in for_property."""

    def test_faulting_action_records_exactly_one_problem(
        self, context: BindingContext
    ) -> None:
        def explode(prop: PropertyContext) -> None:
            raise ValueError("boom")

        context.for_property("quantity", explode)

        assert len(context.problems) == 1
        problem = context.problems[0]
        assert problem.property_name == "quantity"
        assert "ValueError: boom" in problem.exception_text

    def test_fault_does_not_abort_siblings(self, context: BindingContext) -> None:
        bound: dict[str, object] = {}

        def bind_int(prop: PropertyContext) -> None:
            bound[prop.property_name] = prop.value_for(int)

        def bind_str(prop: PropertyContext) -> None:
            bound[prop.property_name] = prop.value_for(str)

        context.for_property("quantity", bind_int)
        context.for_property("name", bind_str)

        assert bound == {"name": "widget"}
        assert [p.property_name for p in context.problems] == ["quantity"]

    def test_problem_carries_raw_value(self, context: BindingContext) -> None:
        context.for_property("quantity", lambda prop: prop.value_for(int))

        value = context.problems[0].value
        assert value == ModelBindingValue(
            raw_key="quantity", raw_value="not-a-number", source="mapping"
        )

    def test_problem_owned_by_current_object(self, context: BindingContext) -> None:
        owner = Owner()

        with context.object_scope(owner):
            context.for_property("quantity", lambda prop: prop.value_for(int))

        assert context.problems[0].item is owner

    def test_problem_outside_object_scope_has_no_owner(
        self, context: BindingContext
    ) -> None:
        context.for_property("quantity", lambda prop: prop.value_for(int))

        assert context.problems[0].item is None

    def test_failed_refetch_yields_problem_without_value(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
    ) -> None:
        """A naming strategy that raises during re-fetch never causes a second fault."""

        def broken(name: str) -> str:
            raise RuntimeError("strategy failure")

        naming = NamingStrategyChainBuilder.empty().append(broken).build()
        context = BindingContext(source, binding_logger, naming=naming)

        context.for_property("quantity", lambda prop: prop.value_for(int))

        assert len(context.problems) == 1
        assert context.problems[0].value is None
        assert "strategy failure" in context.problems[0].exception_text

    def test_absent_property_is_not_a_problem(self, context: BindingContext) -> None:
        seen: list[object] = []

        context.for_property("missing", lambda prop: seen.append(prop.value_for(int)))

        assert seen == [None]
        assert context.problems == ()


# =============================================================================
# Object Scope
# =============================================================================


class TestObjectScope:
    """Tests for balanced push/pop of the object scope stack."""

    def test_nested_scopes_restore_outer(self, context: BindingContext) -> None:
        outer, inner = Owner(), Owner()
        during: list[object | None] = []
        after_inner: list[object | None] = []

        def outer_action() -> None:
            context.for_object(inner, lambda: during.append(context.current_object))
            after_inner.append(context.current_object)

        context.for_object(outer, outer_action)

        assert during == [inner]
        assert after_inner == [outer]
        assert context.current_object is None

    def test_faulting_inner_scope_still_pops(self, context: BindingContext) -> None:
        outer, inner = Owner(), Owner()

        def failing() -> None:
            assert context.current_object is inner
            raise RuntimeError("inner failure")

        with context.object_scope(outer):
            with pytest.raises(RuntimeError, match="inner failure"):
                context.for_object(inner, failing)
            assert context.current_object is outer

        assert context.current_object is None

    def test_object_scope_yields_object(self, context: BindingContext) -> None:
        owner = Owner()

        with context.object_scope(owner) as scoped:
            assert scoped is owner
            assert context.current_object is owner


# =============================================================================
# Problem Logging
# =============================================================================


class TestLogProblem:
    """Tests for the single problem construction point."""

    def test_message_problem(self, context: BindingContext) -> None:
        owner = Owner()
        with context.object_scope(owner):
            problem = context.log_problem("custom message", property_name="name")

        assert problem.exception_text == "custom message"
        assert problem.item is owner
        assert context.problems == (problem,)

    def test_exception_problem_includes_traceback(
        self, context: BindingContext
    ) -> None:
        try:
            raise KeyError("missing")
        except KeyError as e:
            problem = context.log_problem(e)

        assert problem.exception_text.startswith("Traceback")
        assert "KeyError: 'missing'" in problem.exception_text

    def test_exception_problem_without_traceback(
        self, source: MappingInputSource, binding_logger: logging.Logger
    ) -> None:
        context = BindingContext(
            source,
            binding_logger,
            config=ModelBindingConfig(include_tracebacks=False),
        )

        problem = context.log_problem(ValueError("short"))

        assert problem.exception_text == "ValueError: short"

    def test_problems_accumulate_in_order_without_dedup(
        self, context: BindingContext
    ) -> None:
        context.log_problem("same")
        context.log_problem("same")
        context.log_problem("other")

        assert [p.exception_text for p in context.problems] == ["same", "same", "other"]

    def test_problem_is_logged(
        self, context: BindingContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="tests.omnibase_binding"):
            context.log_problem("visible", property_name="name")

        assert any("visible" in record.getMessage() for record in caplog.records)
        assert caplog.records[-1].property_name == "name"


# =============================================================================
# Prefixed / Nested Binding
# =============================================================================


class TestBindPrefixed:
    """Tests for greedy prefixed binding."""

    def test_no_matching_prefix_skips_resolver(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        resolver = recording_resolver_factory(value=Owner())
        context = BindingContext(source, binding_logger, resolver=resolver)

        assert context.bind_prefixed("orders", Owner) is None
        assert resolver.calls == []

    def test_matching_prefix_binds_against_sub_scope(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        bound = Owner()
        resolver = recording_resolver_factory(value=bound)
        context = BindingContext(source, binding_logger, resolver=resolver)

        assert context.bind_prefixed("items", Owner) is bound

        assert len(resolver.calls) == 1
        target_type, child = resolver.calls[0]
        assert target_type is Owner
        assert child is not context
        assert child.input_source.prefix == "items"
        assert child.input_source.has("[0].sku")

    def test_child_problems_are_merged(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        def record(child: BindingContext) -> None:
            child.log_problem("child problem one")
            child.log_problem("child problem two")

        resolver = recording_resolver_factory(value=None, problems_factory=record)
        context = BindingContext(source, binding_logger, resolver=resolver)
        context.log_problem("parent problem")

        assert context.bind_prefixed("items", Owner) is None

        assert [p.exception_text for p in context.problems] == [
            "parent problem",
            "child problem one",
            "child problem two",
        ]

    def test_child_shares_collaborators(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        resolver = recording_resolver_factory(value=Owner())
        config = ModelBindingConfig(prefix_separator="/")
        context = BindingContext(
            source, binding_logger, resolver=resolver, config=config
        )

        context.bind_prefixed("items", Owner)

        child = resolver.calls[0][1]
        assert child.logger is binding_logger
        assert child.resolver is resolver
        assert child.converter is context.converter
        assert child.naming is context.naming
        assert child.config is config
        assert child.problems == ()
        assert child.current_object is None


class TestBindNested:
    """Tests for continuation-style nested binding."""

    def test_continuation_invoked_once_with_value(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        bound = Owner()
        resolver = recording_resolver_factory(value=bound)
        context = BindingContext(source, binding_logger, resolver=resolver)
        received: list[object | None] = []
        sub_source = source.sub_scope("items[0].")

        context.bind_nested(sub_source, Owner, received.append)

        assert received == [bound]
        assert resolver.calls[0][1].input_source is sub_source

    def test_problems_merged_even_when_value_is_none(
        self,
        source: MappingInputSource,
        binding_logger: logging.Logger,
        recording_resolver_factory: type,
    ) -> None:
        resolver = recording_resolver_factory(
            value=None, problems_factory=lambda child: child.log_problem("nested")
        )
        context = BindingContext(source, binding_logger, resolver=resolver)
        received: list[object | None] = []

        context.bind_nested(source, Owner, received.append)

        assert received == [None]
        assert [p.exception_text for p in context.problems] == ["nested"]


# =============================================================================
# Context Values and Services
# =============================================================================


class TestValuesAndServices:
    """Tests for memoized values and service lookup."""

    def test_values_are_memoized(self, context: BindingContext) -> None:
        assert context.values is context.values

    def test_service_without_locator_raises(self, context: BindingContext) -> None:
        with pytest.raises(BindingConfigurationError):
            context.service(ValueConverter)

    def test_service_resolves_through_locator(
        self, source: MappingInputSource, binding_logger: logging.Logger
    ) -> None:
        converter = ValueConverter()
        locator = ServiceRegistry()
        locator.register_instance(ValueConverter, converter)
        context = BindingContext(source, binding_logger, locator=locator)
        resolved: list[object] = []

        context.for_property("name", lambda prop: resolved.append(prop.service(ValueConverter)))

        assert resolved == [converter]


class TestPropertyContext:
    """Tests for the view handed to property actions."""

    def test_exposes_property_state(self, context: BindingContext) -> None:
        owner = Owner()
        seen: list[PropertyContext] = []

        with context.object_scope(owner):
            context.for_property("name", seen.append)

        (prop,) = seen
        assert prop.property_name == "name"
        assert prop.context is context
        assert prop.has_value
        assert prop.raw_value == ModelBindingValue(raw_key="name", raw_value="widget")
        assert prop.value_for() == "widget"

    def test_owner_is_current_object(self, context: BindingContext) -> None:
        owner = Owner()
        owners: list[object | None] = []

        with context.object_scope(owner):
            context.for_property("name", lambda prop: owners.append(prop.owner))

        assert owners == [owner]
