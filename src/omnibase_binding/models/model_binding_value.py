# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Raw binding value model.

Holds a value exactly as it was read from an input source, before any
conversion, together with the fully-qualified key it was found under.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelBindingValue(BaseModel):
    """Immutable pre-conversion value read from an input source."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw_key: str = Field(..., description="Fully-qualified key in the root source")
    raw_value: object = Field(..., description="Value before conversion")
    source: str = Field(default="mapping", description="Name of the input source")


__all__ = ["ModelBindingValue"]
