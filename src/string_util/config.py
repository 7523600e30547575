"""YAML/dict config loader for string-util.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    string_util:
      random_length: 32        # default for random()
      pad_block_size: 16       # default for pad_null()
      chunk_length: 64         # default for chunkify()
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidArgument, check_int
from .randomness import DEFAULT_LENGTH, RandomSource, get_default_source
from .toolkit import StringToolkit

DEFAULTS: dict[str, int] = {
    "random_length": DEFAULT_LENGTH,
    "pad_block_size": 16,
    "chunk_length": 16,
}


def _require_mapping(data: Any) -> dict[str, Any]:
    data = data or {}
    if not isinstance(data, dict):
        raise InvalidArgument(f"config must be a mapping, got {type(data).__name__}")
    return data


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = _require_mapping(data)
    # Support nested under "string_util" key or flat
    if "string_util" in data:
        data = _require_mapping(data["string_util"])

    cfg = {key: data.get(key, default) for key, default in DEFAULTS.items()}
    check_int("random_length", cfg["random_length"], 0)
    check_int("pad_block_size", cfg["pad_block_size"], 1)
    check_int("chunk_length", cfg["chunk_length"], 1)
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path, encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def create_toolkit(
    config: dict[str, Any] | None = None,
    *,
    source: RandomSource | None = None,
) -> StringToolkit:
    """Create a toolkit from a config dict, on the default source unless given one."""
    cfg = load_config(config)
    return StringToolkit(
        source=source if source is not None else get_default_source(),
        **cfg,
    )
