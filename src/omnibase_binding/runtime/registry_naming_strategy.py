# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Naming strategy chain and process-wide naming strategy registry.

A naming strategy is a pure function that maps a canonical field name to a
candidate lookup key. Strategies are tried in registration order and the
first candidate present in the input source wins, so earlier strategies take
priority over later ones.

Default strategies, in order:
    1. identity               ``first_name`` -> ``first_name``
    2. underscore-to-dash     ``first_name`` -> ``first-name``
    3. bracket wrapping       ``first_name`` -> ``[first_name]``

Registry vs. chain:
    The process-wide registry is append-only: ``register_naming_strategy``
    adds a strategy after the existing ones and never removes or reorders
    anything. Binding contexts never read the registry during a bind; each
    one takes an immutable ``NamingStrategyChain`` snapshot when it is
    constructed, so registering a strategy only affects contexts created
    afterward.

Example:
    >>> chain = (
    ...     NamingStrategyChainBuilder()
    ...     .append(lambda name: name.upper())
    ...     .build()
    ... )
    >>> list(chain.candidates("first_name"))
    ['first_name', 'first-name', '[first_name]', 'FIRST_NAME']
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from omnibase_binding.protocols import ProtocolInputSource

logger = logging.getLogger(__name__)

NamingStrategy = Callable[[str], str]


def identity_strategy(name: str) -> str:
    return name


def dash_strategy(name: str) -> str:
    return name.replace("_", "-")


def bracket_strategy(name: str) -> str:
    return f"[{name}]"


DEFAULT_NAMING_STRATEGIES: Final[tuple[NamingStrategy, ...]] = (
    identity_strategy,
    dash_strategy,
    bracket_strategy,
)


class NamingStrategyChain:
    """Immutable, ordered sequence of naming strategies.

    Thread Safety:
        Instances are immutable and can be shared across contexts.
    """

    __slots__ = ("_strategies",)

    def __init__(self, strategies: tuple[NamingStrategy, ...]) -> None:
        self._strategies = tuple(strategies)

    @classmethod
    def default(cls) -> NamingStrategyChain:
        """Return a snapshot of the process-wide registry."""
        return _registry.snapshot()

    @property
    def strategies(self) -> tuple[NamingStrategy, ...]:
        return self._strategies

    def candidates(self, name: str) -> Iterator[str]:
        """Yield candidate keys for ``name`` in priority order, without repeats."""
        seen: set[str] = set()
        for strategy in self._strategies:
            key = strategy(name)
            if key not in seen:
                seen.add(key)
                yield key

    def resolve_key(self, name: str, source: ProtocolInputSource) -> str | None:
        """Return the first candidate key present in ``source``, else None."""
        for key in self.candidates(name):
            if source.has(key):
                return key
        return None

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        names = ", ".join(
            getattr(strategy, "__name__", repr(strategy)) for strategy in self._strategies
        )
        return f"NamingStrategyChain([{names}])"


class NamingStrategyChainBuilder:
    """Assemble a ``NamingStrategyChain`` from the defaults plus extensions."""

    def __init__(
        self, strategies: tuple[NamingStrategy, ...] = DEFAULT_NAMING_STRATEGIES
    ) -> None:
        self._strategies: list[NamingStrategy] = list(strategies)

    @classmethod
    def empty(cls) -> NamingStrategyChainBuilder:
        return cls(strategies=())

    def append(self, strategy: NamingStrategy) -> NamingStrategyChainBuilder:
        if not callable(strategy):
            raise TypeError(
                f"Naming strategy must be callable, got {type(strategy).__name__}"
            )
        self._strategies.append(strategy)
        return self

    def build(self) -> NamingStrategyChain:
        return NamingStrategyChain(tuple(self._strategies))


class RegistryNamingStrategy:
    """Append-only, process-wide registry of naming strategies.

    Registration is protected by a lock so concurrent ``register`` calls
    cannot lose entries; snapshots are taken under the same lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._strategies: list[NamingStrategy] = list(DEFAULT_NAMING_STRATEGIES)

    def register(self, strategy: NamingStrategy) -> None:
        if not callable(strategy):
            raise TypeError(
                f"Naming strategy must be callable, got {type(strategy).__name__}"
            )
        with self._lock:
            self._strategies.append(strategy)
            count = len(self._strategies)
        logger.debug(
            "Registered naming strategy",
            extra={
                "strategy": getattr(strategy, "__name__", repr(strategy)),
                "strategy_count": count,
            },
        )

    def snapshot(self) -> NamingStrategyChain:
        with self._lock:
            return NamingStrategyChain(tuple(self._strategies))

    def __len__(self) -> int:
        with self._lock:
            return len(self._strategies)


_registry = RegistryNamingStrategy()


def register_naming_strategy(strategy: NamingStrategy) -> None:
    """Append ``strategy`` to the process-wide registry.

    Affects only binding contexts created after this call.
    """
    _registry.register(strategy)


__all__ = [
    "DEFAULT_NAMING_STRATEGIES",
    "NamingStrategy",
    "NamingStrategyChain",
    "NamingStrategyChainBuilder",
    "RegistryNamingStrategy",
    "bracket_strategy",
    "dash_strategy",
    "identity_strategy",
    "register_naming_strategy",
]
