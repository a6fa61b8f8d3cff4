"""Utilities for resolving project-relative paths robustly."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


SENTINELS = ("pyproject.toml", ".git", "config.yaml")


def find_project_root(start: Optional[Path] = None) -> Path:
    """Locate the project root by walking up from a start path.

    Recognition: presence of one of SENTINELS.
    Honors ASSET_TRACKER_ROOT if set.
    """
    env_root = os.getenv("ASSET_TRACKER_ROOT")
    if env_root:
        p = Path(env_root).expanduser().resolve()
        if p.exists():
            return p

    candidates = []
    if start is not None:
        candidates.append(Path(start).resolve())
    candidates.append(Path.cwd())
    candidates.append(Path(__file__).resolve())

    seen = set()
    for c in candidates:
        for p in [c] + list(c.parents):
            if p in seen:
                continue
            seen.add(p)
            for s in SENTINELS:
                if (p / s).exists():
                    return p
    # Fallback
    return Path.cwd()


def find_config_file(name: str = "config.yaml") -> Optional[Path]:
    """Find the configuration file to use when none was given explicitly.

    ASSET_TRACKER_CONFIG wins; otherwise ``name`` in the working directory,
    then in the project root. Returns None when nothing exists.
    """
    env_cfg = os.getenv("ASSET_TRACKER_CONFIG")
    if env_cfg:
        return Path(env_cfg).expanduser()

    local = Path(name)
    if local.exists():
        return local

    candidate = find_project_root() / name
    if candidate.exists():
        return candidate
    return None
