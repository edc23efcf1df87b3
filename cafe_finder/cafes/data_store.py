from __future__ import annotations

import logging

from .config import DEFAULT_CAFE_CONFIG, CafeConfig
from .registry import CityRegistry, default_registry, load_registry_csv

logger = logging.getLogger(__name__)

_registry: CityRegistry | None = None


def _load(config: CafeConfig) -> CityRegistry:
    if config.data_path is not None:
        registry = load_registry_csv(config.data_path)
        source = str(config.data_path)
    else:
        registry = default_registry()
        source = "built-in dataset"
    logger.info("Loaded cafe registry from %s (%d cities)", source, len(registry))
    return registry


def get_registry() -> CityRegistry:
    """Return the process-wide café registry, loading it on first call."""
    global _registry
    if _registry is None:
        _registry = _load(DEFAULT_CAFE_CONFIG)
    return _registry


def clear_registry() -> None:
    """Forget the loaded registry so the next call reloads it."""
    global _registry
    _registry = None
