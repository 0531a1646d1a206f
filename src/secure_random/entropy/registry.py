"""Entropy source registry with entry-point auto-discovery.

Built-in sources are registered at module import time via the
``@register_entropy_source`` decorator. Third-party sources from other
packages are discovered lazily on the first :meth:`EntropySourceRegistry.get`
call via the ``secure_random.entropy_sources`` entry-point group.

:func:`acquire_entropy_source` is the single acquisition point used by the
samplers: it resolves the configured name, instantiates a fresh handle and
refuses hosts that cannot provide it.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

from secure_random.exceptions import EntropySourceUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from secure_random.config import SecureRandomConfig
    from secure_random.entropy.base import EntropySource

logger = logging.getLogger("secure_random")

_ENTRY_POINT_GROUP = "secure_random.entropy_sources"


class EntropySourceRegistry:
    """Maps configured source names to EntropySource classes.

    Names registered in-process win over entry points of the same name.
    Entry points are read at most once, when a name is first missing.
    """

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator to register a source class under a string key.

        Args:
            name: Unique identifier for the source (e.g., ``'system'``).

        Returns:
            The original class, unmodified.
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Look up a source class by name.

        Loads entry points on the first call if not already loaded.

        Args:
            name: Registered identifier for the source.

        Returns:
            The entropy source class (not an instance).

        Raises:
            KeyError: If *name* is not found after loading entry points.
        """
        if name in cls._registry:
            return cls._registry[name]

        if not cls._entry_points_loaded:
            cls._load_entry_points()
            if name in cls._registry:
                return cls._registry[name]

        available = ", ".join(sorted(cls._registry.keys())) or "(none)"
        raise KeyError(f"Unknown entropy source: {name!r}. Available: {available}")

    @classmethod
    def _load_entry_points(cls) -> None:
        """Discover and register sources from the entry-point group.

        Errors during individual entry-point loading are logged as warnings
        but do not prevent other sources from loading.
        """
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:  # broken distribution metadata
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                # In-process registration wins.
                continue
            try:
                source_cls = ep.load()
                cls._registry[ep.name] = source_cls
                logger.debug("Loaded entropy source %r from entry point", ep.name)
            except Exception:  # skip this plugin, keep the rest
                logger.warning(
                    "Failed to load entropy source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )

    @classmethod
    def _reset(cls) -> None:
        """Forget every registered source and entry-point discovery (tests only)."""
        cls._registry.clear()
        cls._entry_points_loaded = False


# Convenience alias used as a decorator in source modules.
register_entropy_source = EntropySourceRegistry.register


def acquire_entropy_source(config: SecureRandomConfig) -> EntropySource:
    """Acquire a fresh entropy source handle as configured.

    Args:
        config: Configuration naming the source via ``entropy_source_type``.

    Returns:
        A new, open EntropySource owned by the caller.

    Raises:
        EntropySourceUnavailableError: If the source is unknown or the host
            cannot provide it.
    """
    try:
        source_cls = EntropySourceRegistry.get(config.entropy_source_type)
    except KeyError as exc:
        raise EntropySourceUnavailableError(str(exc.args[0])) from exc

    source = source_cls()
    if not source.is_available:
        source.close()
        raise EntropySourceUnavailableError(
            f"Entropy source {config.entropy_source_type!r} is not available on this host"
        )
    logger.debug("Acquired entropy source %r", source.name)
    return source
