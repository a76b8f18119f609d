# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Input source file loader.

Loads a YAML or JSON document from disk and flattens it into a
``MappingInputSource``.

The loader validates:
- File existence
- File size (max 10 MB)
- YAML/JSON syntax validity
- Top-level structure (must be a mapping)

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Size is checked before the file is read
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final

import yaml

from omnibase_binding.errors import InputSourceError, ModelBindingErrorContext
from omnibase_binding.runtime.input_source_mapping import MappingInputSource

logger = logging.getLogger(__name__)

MAX_INPUT_SIZE_BYTES: Final[int] = 10 * 1024 * 1024

_YAML_SUFFIXES: Final[frozenset[str]] = frozenset({".yaml", ".yml"})
_JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})


def load_input_source(
    path: str | Path,
    separator: str = ".",
) -> MappingInputSource:
    """Load a YAML or JSON file into a flattened input source.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file.
        separator: Separator used when flattening nested mappings.

    Returns:
        Root ``MappingInputSource`` named after the file.

    Raises:
        InputSourceError: If the file is missing, too large, unreadable, not
            UTF-8, has an unsupported suffix, fails to parse, or is not a
            mapping.

    Example:
        >>> source = load_input_source("fixtures/order.yaml")
        >>> source.value("customer.name").raw_value
        'Ada'
    """
    input_path = Path(path)

    def _context() -> ModelBindingErrorContext:
        return ModelBindingErrorContext.with_correlation(
            operation="load_input_source",
            target_name=str(input_path),
        )

    suffix = input_path.suffix.lower()
    if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
        raise InputSourceError(
            f"Unsupported input file type: {suffix or '<none>'}",
            context=_context(),
        )

    if not input_path.is_file():
        raise InputSourceError(f"Input file not found: {path}", context=_context())

    file_size = input_path.stat().st_size
    if file_size > MAX_INPUT_SIZE_BYTES:
        raise InputSourceError(
            f"Input file too large: {file_size} bytes (max {MAX_INPUT_SIZE_BYTES})",
            context=_context(),
        )

    try:
        with input_path.open(encoding="utf-8") as f:
            if suffix in _JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InputSourceError(
            f"Invalid {suffix.lstrip('.').upper()} in input file: {e}",
            context=_context(),
        ) from e
    except UnicodeDecodeError as e:
        raise InputSourceError(
            f"Input file is not valid UTF-8: {e}", context=_context()
        ) from e
    except OSError as e:
        raise InputSourceError(
            f"Cannot read input file: {e}", context=_context()
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InputSourceError(
            f"Input document must be a mapping, got {type(data).__name__}",
            context=_context(),
        )

    source = MappingInputSource.from_nested(
        data, separator=separator, source=input_path.name
    )
    logger.debug(
        "Loaded input source",
        extra={
            "input_path": str(input_path),
            "top_level_keys": len(data),
            "flattened_keys": sum(1 for _ in source.keys()),
        },
    )
    return source


__all__ = ["MAX_INPUT_SIZE_BYTES", "load_input_source"]
