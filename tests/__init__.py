# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test suite for omnibase_binding."""
