# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default object resolver and the top-level ``bind_model`` entry point.

ObjectResolver instantiates a target type and populates its fields from a
binding context. Supported targets:

- dataclasses (including frozen ones)
- pydantic models (built with ``model_construct``, no validation)
- plain classes with a no-argument constructor and annotated attributes

Field Resolution
----------------
For each field, in declaration order:

1. ``Optional[T]`` unwraps to ``T``.
2. Nested dataclass / pydantic model -> ``bind_prefixed(name + separator)``.
3. ``list[T]``, ``tuple[T, ...]``, ``set[T]``, ``frozenset[T]`` -> greedy
   loop over ``name[0]``, ``name[1]``, ... stopping at the first index with
   no data or at ``max_collection_items``.
4. Anything else is a scalar converted through ``ContextValues``.

Naming strategies apply to scalar keys only. Nested and collection prefixes
use the field name as declared, so ``home_address.city`` binds but
``home-address.city`` does not.

Absent values leave the field at its default. Required fields with no
default start as None, so a bind with missing data yields a partially
populated object plus problems rather than an exception.

Thread Safety
-------------
``ObjectResolver`` is stateless and can be shared across contexts.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Final, get_args, get_origin

from pydantic import BaseModel

from omnibase_binding.models import ModelBindResult
from omnibase_binding.runtime.binding_context import BindingContext

if TYPE_CHECKING:
    from omnibase_binding.models import ModelBindingConfig
    from omnibase_binding.protocols import (
        ProtocolInputSource,
        ProtocolObjectResolver,
        ProtocolServiceLocator,
        ProtocolValueConverter,
    )
    from omnibase_binding.runtime.binding_context import BindingLogger
    from omnibase_binding.runtime.property_context import PropertyContext
    from omnibase_binding.runtime.registry_naming_strategy import NamingStrategyChain

logger = logging.getLogger(__name__)

DEFAULT_BINDING_LOGGER_NAME: Final[str] = "omnibase_binding.binding"

_COLLECTION_FACTORIES: Final[dict[object, type]] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    Sequence: list,
}


class ObjectResolver:
    """Instantiate a type and bind its fields from a ``BindingContext``.

    Example:
        >>> context = BindingContext(source, logger=logging.getLogger("bind"))
        >>> result = ObjectResolver().bind(Order, context)
        >>> result.value.customer.name
        'Ada'
    """

    def bind(self, target_type: type, context: BindingContext) -> ModelBindResult:
        try:
            instance = _instantiate(target_type)
            fields = _field_types(target_type)
        except Exception as e:
            context.log_problem(e)
            return ModelBindResult(value=None, problems=context.problems)

        with context.object_scope(instance):
            for name, annotation in fields.items():
                self._bind_field(instance, name, annotation, context)

        return ModelBindResult(value=instance, problems=context.problems)

    def _bind_field(
        self,
        instance: object,
        name: str,
        annotation: object,
        context: BindingContext,
    ) -> None:
        field_type = _unwrap_optional(annotation)

        if _is_bindable(field_type):
            prefix = name + context.config.prefix_separator

            def bind_child(prop: PropertyContext) -> None:
                child = context.bind_prefixed(prefix, typing.cast(type, field_type))
                if child is not None:
                    _assign(instance, name, child)

            context.for_property(name, bind_child)
            return

        factory = _COLLECTION_FACTORIES.get(get_origin(field_type))
        element_args = [arg for arg in get_args(field_type) if arg is not Ellipsis]
        if factory is not None and len(element_args) == 1:
            element_type = element_args[0]

            def bind_collection(prop: PropertyContext) -> None:
                items = self._bind_elements(name, element_type, context)
                if items:
                    _assign(instance, name, factory(items))

            context.for_property(name, bind_collection)
            return

        def bind_scalar(prop: PropertyContext) -> None:
            if prop.has_value:
                _assign(instance, name, prop.value_for(annotation))

        context.for_property(name, bind_scalar)

    def _bind_elements(
        self,
        name: str,
        element_type: object,
        context: BindingContext,
    ) -> list[object]:
        items: list[object] = []
        limit = context.config.max_collection_items
        element_class = _unwrap_optional(element_type)
        bindable = _is_bindable(element_class)
        separator = context.config.prefix_separator

        def element_present(index: int) -> bool:
            key = f"{name}[{index}]"
            if bindable:
                return context.input_source.has_any_prefixed_with(key + separator)
            return context.values.has(key)

        for index in range(limit):
            key = f"{name}[{index}]"
            if bindable:
                element = context.bind_prefixed(
                    key + separator, typing.cast(type, element_class)
                )
                if element is None:
                    return items
                items.append(element)
            else:
                if not context.values.has(key):
                    return items

                def bind_element(prop: PropertyContext) -> None:
                    items.append(prop.value_for(element_type))

                context.for_property(key, bind_element)

        if element_present(limit):
            context.log_problem(
                f"Collection '{name}' exceeds max_collection_items ({limit}); "
                "remaining elements were not bound",
                property_name=name,
            )
        return items


def bind_model(
    target_type: type,
    input_source: ProtocolInputSource,
    *,
    logger: BindingLogger | None = None,
    locator: ProtocolServiceLocator | None = None,
    resolver: ProtocolObjectResolver | None = None,
    converter: ProtocolValueConverter | None = None,
    naming: NamingStrategyChain | None = None,
    config: ModelBindingConfig | None = None,
) -> ModelBindResult:
    """Bind ``target_type`` from ``input_source`` in a fresh binding context.

    Uses the ``omnibase_binding.binding`` logger when none is given.

    Returns:
        ``ModelBindResult`` with the (possibly partially populated) value and
        every problem recorded during the bind, in order.

    Example:
        >>> result = bind_model(Order, MappingInputSource.from_nested(data))
        >>> if not result:
        ...     for problem in result.problems:
        ...         print(problem.describe())
    """
    bind_logger = logger if logger is not None else logging.getLogger(
        DEFAULT_BINDING_LOGGER_NAME
    )
    context = BindingContext(
        input_source,
        bind_logger,
        locator=locator,
        resolver=resolver,
        converter=converter,
        naming=naming,
        config=config,
    )
    result = context.resolver.bind(target_type, context)
    bind_logger.debug(
        "Bound %s",
        target_type.__name__,
        extra={"problem_count": len(result.problems)},
    )
    return result


# =============================================================================
# Type introspection helpers
# =============================================================================


def _is_bindable(field_type: object) -> bool:
    return isinstance(field_type, type) and (
        dataclasses.is_dataclass(field_type) or issubclass(field_type, BaseModel)
    )


def _unwrap_optional(annotation: object) -> object:
    if get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _field_types(target_type: type) -> dict[str, object]:
    if isinstance(target_type, type) and issubclass(target_type, BaseModel):
        return {
            name: field.annotation for name, field in target_type.model_fields.items()
        }

    hints = typing.get_type_hints(target_type)
    if dataclasses.is_dataclass(target_type):
        return {
            field.name: hints.get(field.name, field.type)
            for field in dataclasses.fields(target_type)
            if field.init
        }
    return {
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and get_origin(hint) is not ClassVar
    }


def _instantiate(target_type: type) -> object:
    if issubclass(target_type, BaseModel):
        missing = {
            name: None
            for name, field in target_type.model_fields.items()
            if field.is_required()
        }
        return target_type.model_construct(**missing)

    if dataclasses.is_dataclass(target_type):
        instance = object.__new__(target_type)
        for field in dataclasses.fields(target_type):
            if field.default is not dataclasses.MISSING:
                value: object = field.default
            elif field.default_factory is not dataclasses.MISSING:
                value = field.default_factory()
            else:
                value = None
            object.__setattr__(instance, field.name, value)
        return instance

    return target_type()


def _assign(instance: object, name: str, value: object) -> None:
    target_type = type(instance)
    frozen = False
    if dataclasses.is_dataclass(target_type):
        frozen = target_type.__dataclass_params__.frozen  # type: ignore[attr-defined]
    elif isinstance(instance, BaseModel):
        frozen = bool(target_type.model_config.get("frozen"))

    if frozen:
        object.__setattr__(instance, name, value)
    else:
        setattr(instance, name, value)


__all__ = ["DEFAULT_BINDING_LOGGER_NAME", "ObjectResolver", "bind_model"]
