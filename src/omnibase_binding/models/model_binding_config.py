# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding engine configuration model.

Configuration can be supplied directly or read from environment variables
following the pattern ``{prefix}_{FIELD}``::

    BINDING_PREFIX_SEPARATOR=__
    BINDING_MAX_COLLECTION_ITEMS=250
    BINDING_INCLUDE_TRACEBACKS=false

Environment values override the defaults only; explicit keyword overrides
passed to ``from_env`` win over both.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnibase_binding.errors import (
    BindingConfigurationError,
    ModelBindingErrorContext,
)

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX: Final[str] = "BINDING"

# Maps from environment variable field name (uppercase) to model field name
_ENV_OVERRIDE_FIELDS: Final[dict[str, str]] = {
    "PREFIX_SEPARATOR": "prefix_separator",
    "MAX_COLLECTION_ITEMS": "max_collection_items",
    "INCLUDE_TRACEBACKS": "include_tracebacks",
}


class ModelBindingConfig(BaseModel):
    """Immutable configuration shared by a binding context and its children.

    Attributes:
        prefix_separator: Joins a nested field name to its children's keys
            (``address`` + ``.`` + ``city``).
        max_collection_items: Upper bound on elements bound by a greedy
            collection loop.
        include_tracebacks: Render full traceback text into problems rather
            than only ``ExceptionType: message``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix_separator: str = Field(
        default=".",
        min_length=1,
        description="Separator between a nested field name and its children",
    )
    max_collection_items: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Maximum elements bound for one collection field",
    )
    include_tracebacks: bool = Field(
        default=True,
        description="Render full traceback text into problems",
    )

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_ENV_PREFIX,
        **overrides: object,
    ) -> ModelBindingConfig:
        """Build a config from ``{prefix}_{FIELD}`` environment variables.

        Args:
            prefix: Environment variable prefix.
            **overrides: Field values that take precedence over the environment.

        Raises:
            BindingConfigurationError: If a value fails validation.
        """
        values: dict[str, object] = {}
        for env_field, model_field in _ENV_OVERRIDE_FIELDS.items():
            env_name = f"{prefix}_{env_field}"
            env_value = os.environ.get(env_name)
            if env_value is not None:
                values[model_field] = env_value
                logger.debug(
                    "Applied binding config override from environment",
                    extra={"env_var": env_name, "field": model_field},
                )
        values.update(overrides)

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise BindingConfigurationError(
                f"Invalid binding configuration: {e.error_count()} error(s)",
                context=ModelBindingErrorContext.with_correlation(
                    operation="load_binding_config",
                    target_name=prefix,
                ),
                fields=sorted(
                    str(error["loc"][0]) for error in e.errors() if error["loc"]
                ),
            ) from e


__all__ = ["DEFAULT_ENV_PREFIX", "ModelBindingConfig"]
