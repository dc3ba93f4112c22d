from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

import yaml


@dataclass
class ApiConfig:
    host: str = "localhost"
    port: int = 8000
    log_level: str = "INFO"


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping. An empty file gives an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> ApiConfig:
    """Defaults, then the YAML file (if any), then non-None overrides. Unknown keys raise TypeError."""
    cfg: Dict[str, Any] = asdict(ApiConfig())
    if path is not None:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    return ApiConfig(**cfg)
