from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import InstallError

# Keys a --config file may set; everything else is a command-line flag.
CONFIG_KEYS = {"platform", "arch", "root", "log"}


@dataclass(frozen=True)
class InstallConfig:
    platform: str
    arch: str
    root: Path = Path(".")
    clean_only: bool = False
    dry_run: bool = False
    debug: bool = False
    verify: bool = False
    log_path: Optional[str] = None


def load_config_file(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise InstallError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise InstallError(f"Config file {path} is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise InstallError(f"Config file {path} must contain a mapping/object")

    unknown = set(raw) - CONFIG_KEYS
    if unknown:
        raise InstallError(f"Unknown keys in {path}: {', '.join(sorted(map(str, unknown)))}")

    return {k: (str(v) if v is not None else None) for k, v in raw.items()}
