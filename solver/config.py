from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS: Dict[str, Any] = {
    "empty_char": "_",
    "output": "text",  # or "json"
    "quiet": False,
    "log_stats": True,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    unknown = set(cfg) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
    if cfg.output not in ("text", "json"):
        raise ValueError(f"output must be 'text' or 'json', got {cfg.output!r}")
    if not isinstance(cfg.empty_char, str) or len(cfg.empty_char) != 1:
        raise ValueError("empty_char must be a single character")
    return cfg
