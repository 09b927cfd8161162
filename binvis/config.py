# binvis/config.py
import copy
import os
from pathlib import Path

import yaml

from binvis.errors import ConfigError

DEFAULTS = {
    "analysis": {"workers": 1},
    "output": {"progress": False, "compress_level": 6},
}

def _merge(base: dict, over: dict) -> dict:
    out = copy.deepcopy(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out

def cfg_get(cfg: dict, key: str, default=None):
    """Dot-path getter: cfg_get(cfg, 'analysis.workers', 1)"""
    cur = cfg
    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def load_config(cfg_path=None) -> dict:
    """Defaults, overlaid with the YAML file at cfg_path when one is given."""
    if cfg_path is None:
        return _merge(DEFAULTS, {})

    p = Path(os.path.normpath(str(cfg_path)))
    try:
        with open(p, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"{p}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{p}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p}: top level must be a mapping")

    cfg = _merge(DEFAULTS, raw)

    # ----- validate -----
    workers = cfg_get(cfg, "analysis.workers")
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ConfigError(f"{p}: analysis.workers must be a positive integer, got {workers!r}")
    progress = cfg_get(cfg, "output.progress")
    if not isinstance(progress, bool):
        raise ConfigError(f"{p}: output.progress must be true/false, got {progress!r}")
    level = cfg_get(cfg, "output.compress_level")
    if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 9:
        raise ConfigError(f"{p}: output.compress_level must be 0..9, got {level!r}")
    return cfg
