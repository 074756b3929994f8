"""
Runtime Configuration

Central configuration for padding scheme selection and codec parameters.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional

from dotenv import load_dotenv

from vcbridge.codec.padding import BlockPadder, ChunkSplitScheme, LengthPaddingScheme

load_dotenv()

SchemeName = Literal["length_padding", "hierarchical"]
SUPPORTED_SCHEMES: tuple[str, ...] = ("length_padding", "hierarchical")


@dataclass
class PaddingConfig:
    """Configuration for single-block length padding."""
    block_size: int = 64

    def __post_init__(self):
        if self.block_size < 16 or self.block_size % 4 != 0:
            raise ValueError(
                f"block_size must be a multiple of 4 and at least 16, got {self.block_size}"
            )


@dataclass
class HierarchicalConfig:
    """Configuration for chunked hash-of-hashes."""
    chunk_count: int = 4
    arity: int = 16
    element_unit: Literal["byte", "word"] = "byte"

    def __post_init__(self):
        if self.chunk_count <= 0:
            raise ValueError(f"chunk_count must be positive, got {self.chunk_count}")
        if self.arity <= 0:
            raise ValueError(f"arity must be positive, got {self.arity}")
        if self.element_unit not in ("byte", "word"):
            raise ValueError(f"element_unit must be 'byte' or 'word', got {self.element_unit!r}")


@dataclass
class BridgeConfig:
    """
    Complete configuration for the bridge.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    scheme: SchemeName = "length_padding"
    padding: PaddingConfig = field(default_factory=PaddingConfig)
    hierarchical: HierarchicalConfig = field(default_factory=HierarchicalConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.scheme not in SUPPORTED_SCHEMES:
            raise ValueError(
                f"Unknown scheme {self.scheme!r}; expected one of {', '.join(SUPPORTED_SCHEMES)}"
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - VCBRIDGE_SCHEME: length_padding or hierarchical
        - VCBRIDGE_BLOCK_SIZE: length-padding block size in bytes
        - VCBRIDGE_CHUNK_COUNT: hierarchical chunk count
        - VCBRIDGE_LOG_LEVEL: log level name
        """
        overrides: dict[str, Any] = {}

        if os.getenv("VCBRIDGE_SCHEME"):
            overrides["scheme"] = os.getenv("VCBRIDGE_SCHEME")
        if os.getenv("VCBRIDGE_BLOCK_SIZE"):
            overrides.setdefault("padding", {})["block_size"] = int(os.getenv("VCBRIDGE_BLOCK_SIZE"))
        if os.getenv("VCBRIDGE_CHUNK_COUNT"):
            overrides.setdefault("hierarchical", {})["chunk_count"] = int(
                os.getenv("VCBRIDGE_CHUNK_COUNT")
            )
        if os.getenv("VCBRIDGE_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("VCBRIDGE_LOG_LEVEL", "INFO").upper()

        return overrides

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "BridgeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BridgeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        padding_data = data.get("padding", {})
        hierarchical_data = data.get("hierarchical", {})

        return cls(
            scheme=data.get("scheme", "length_padding"),
            padding=PaddingConfig(**padding_data) if padding_data else PaddingConfig(),
            hierarchical=(
                HierarchicalConfig(**hierarchical_data)
                if hierarchical_data else HierarchicalConfig()
            ),
            log_level=data.get("log_level", "INFO"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "BridgeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        data = self.to_dict()
        for key, value in overrides.items():
            if isinstance(value, dict):
                data.setdefault(key, {}).update(value)
            else:
                data[key] = value
        return self.from_dict(copy.deepcopy(data))

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "scheme": self.scheme,
            "padding": {
                "block_size": self.padding.block_size,
            },
            "hierarchical": {
                "chunk_count": self.hierarchical.chunk_count,
                "arity": self.hierarchical.arity,
                "element_unit": self.hierarchical.element_unit,
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }


def build_padding_scheme(config: BridgeConfig) -> BlockPadder:
    """Select the BlockPadder policy named by the configuration."""
    if config.scheme == "hierarchical":
        return ChunkSplitScheme(config.hierarchical.chunk_count)
    return LengthPaddingScheme(config.padding.block_size)


# Global default configuration
_default_config: Optional[BridgeConfig] = None


def get_default_config() -> BridgeConfig:
    """Get the default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = BridgeConfig.from_env()
    return _default_config


def set_default_config(config: BridgeConfig) -> None:
    """Set the default configuration."""
    global _default_config
    _default_config = config
