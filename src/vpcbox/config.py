"""Configuration management for vpcbox.

Supports loading configuration from:
1. Environment variables (VPCBOX_*)
2. Config file (~/.vpcbox/config.yaml)
3. Default values

Example config file (~/.vpcbox/config.yaml):
    decode:
      layout: "versioned"     # or "legacy"
      strict: false           # abort on the first bad vpcC box
    output:
      format: "text"          # "text", "json" or "quiet"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from vpcbox.models.record import RecordLayout

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".vpcbox" / "config.yaml",
    Path.home() / ".config" / "vpcbox" / "config.yaml",
    Path(".vpcbox.yaml"),
]

OUTPUT_FORMATS = ("text", "json", "quiet")


@dataclass
class DecodeConfig:
    """Decode configuration."""

    layout: str = RecordLayout.VERSIONED.value
    strict: bool = False


@dataclass
class OutputConfig:
    """Output configuration."""

    format: str = "text"


@dataclass
class VpcboxConfig:
    """Main configuration for vpcbox."""

    decode: DecodeConfig = field(default_factory=DecodeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            with open(config_path) as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid config file {config_path}: {e}") from e
                return data if data else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with VPCBOX_ prefix."""
    return os.environ.get(f"VPCBOX_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def load_config() -> VpcboxConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (VPCBOX_*)
    2. Config file (~/.vpcbox/config.yaml)
    3. Default values

    Raises:
        ValueError: Unknown layout or output format
    """
    file_config = _load_yaml_config()

    # Decode config
    decode_config = file_config.get("decode") or {}
    layout = _get_env("LAYOUT") or decode_config.get("layout", RecordLayout.VERSIONED.value)
    strict_env = _get_env("STRICT")
    decode = DecodeConfig(
        layout=RecordLayout(str(layout).lower()).value,
        strict=(
            bool(_parse_bool(strict_env))
            if strict_env
            else bool(decode_config.get("strict", False))
        ),
    )

    # Output config
    output_config = file_config.get("output") or {}
    output_format = str(_get_env("OUTPUT_FORMAT") or output_config.get("format", "text")).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {output_format}")
    output = OutputConfig(format=output_format)

    return VpcboxConfig(decode=decode, output=output)


# Global config instance (lazy loaded)
_config: VpcboxConfig | None = None


def get_config() -> VpcboxConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
