from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..errors import InstallError

DIST_DIR = "_dist"

# darwin ships fat binaries; those install next to the requested arch.
UNIVERSAL_ARCH = "universal"
UNIVERSAL_PLATFORMS = {"darwin"}


def host_platform() -> str:
    return platform.system()


def host_arch() -> str:
    return platform.machine()


def normalize_platform(raw: str | None) -> str:
    value = (raw or "").strip().lower()
    if not value:
        raise InstallError("You must specify a platform to install for (--platform).")
    return value


def normalize_arch(raw: str | None) -> str:
    value = (raw or "").strip().lower()
    if not value:
        raise InstallError("You must specify a processor architecture to install for (--arch).")
    return value


def accepted_architectures(platform_name: str, arch: str) -> List[str]:
    archs = [arch]
    if platform_name in UNIVERSAL_PLATFORMS:
        archs.insert(0, UNIVERSAL_ARCH)
    out: List[str] = []
    for a in archs:
        if a not in out:
            out.append(a)
    return out


@dataclass(frozen=True)
class PlatformLayout:
    """Where a platform's distributions live and where they install to."""

    root: Path
    platform: str
    arch: str
    archs: tuple[str, ...]

    @property
    def platform_dir(self) -> Path:
        return self.root / self.platform

    @property
    def dist_dir(self) -> Path:
        return self.platform_dir / DIST_DIR

    @property
    def target_dir(self) -> Path:
        return self.platform_dir / self.arch


def resolve_layout(root: Path, platform_name: str | None, arch: str | None) -> PlatformLayout:
    """Normalize platform/arch and check the distribution directory exists.

    Platform and arch are asserted first because every path below is built
    from them.
    """

    p = normalize_platform(platform_name)
    a = normalize_arch(arch)
    layout = PlatformLayout(root=root, platform=p, arch=a, archs=tuple(accepted_architectures(p, a)))

    if not layout.dist_dir.is_dir():
        raise InstallError(
            f'Platform directory "{p}" does not contain a distribution directory "{DIST_DIR}".'
        )
    return layout
