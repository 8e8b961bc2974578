"""Configuration loading and validation.

This package provides:
- Pydantic schema models for configuration files and layer payloads
- Loaders that turn files or dictionaries into validated models
- ConfigError, carrying categorized, path-annotated error details

Example:
    >>> from pathlib import Path
    >>> from perimeters.application.config import load_config
    >>> config = load_config(Path("walls.json"))
    >>> config.walls.sequence
    <WallSequence.MIDDLE_OUT_OUTER_INNER: 'middle-out/outer-inner'>
"""

from perimeters.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_layer,
)
from perimeters.application.config.schema import (
    MAX_WALLS,
    SUPPORTED_VERSIONS,
    IslandPayload,
    LayerPayload,
    PerimeterConfiguration,
    WallPayload,
    WallsConfig,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_layer",
    # Schema
    "MAX_WALLS",
    "SUPPORTED_VERSIONS",
    "IslandPayload",
    "LayerPayload",
    "PerimeterConfiguration",
    "WallPayload",
    "WallsConfig",
]
