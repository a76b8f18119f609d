# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the binding runtime (context, resolver, input sources, naming)."""
