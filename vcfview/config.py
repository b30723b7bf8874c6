

import os
from typing import Any, Dict, Optional

import yaml
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"
LOCAL_CONFIG_PATH = Path("./local.yaml")


def _load_yaml(path) -> Dict[str, Any]:
    with open(path) as f:
        cfg = yaml.safe_load(f)
    return cfg or {}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def get_config(path: Optional[str] = None, default: bool = False) -> Dict[str, Any]:
    """Load settings, layered over the packaged defaults.

    An explicit path must exist. Without one, ./local.yaml is used when
    present.
    """
    cfg = _load_yaml(DEFAULT_CONFIG_PATH)

    if default:
        return cfg

    if path:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")
        return _merge(cfg, _load_yaml(path))

    if LOCAL_CONFIG_PATH.exists():
        return _merge(cfg, _load_yaml(LOCAL_CONFIG_PATH))

    return cfg
