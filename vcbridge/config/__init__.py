"""
Runtime Configuration Module

Provides configuration loading and management for the bridge.
"""

from .runtime import (
    BridgeConfig,
    HierarchicalConfig,
    PaddingConfig,
    build_padding_scheme,
    get_default_config,
    set_default_config,
)

__all__ = [
    "BridgeConfig",
    "HierarchicalConfig",
    "PaddingConfig",
    "build_padding_scheme",
    "get_default_config",
    "set_default_config",
]
