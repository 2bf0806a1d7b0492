from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from ..errors import SkipDistribution

logger = logging.getLogger(__name__)

INCLUDE_DIR = "include"
LIB_DIR = "lib"

DEBUG_TYPE = "debug"
RELEASE_TYPE = "release"

# build type suffix -> subdirectory of the arch target dir
TYPE_DIRS = {
    DEBUG_TYPE: "debug",
    RELEASE_TYPE: "release",
    "": "common",
}

SKIP_UNCLASSIFIABLE = "unclassifiable"
SKIP_UNSUPPORTED_ARCH = "unsupported_arch"
SKIP_INVALID_TYPE = "invalid_type"
SKIP_UNHANDLED = "unhandled"
SKIP_COPY_FAILED = "copy_failed"


@dataclass(frozen=True)
class Distribution:
    path: Path
    dependency: str
    arch: str
    build_type: str

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def target_subdir(self) -> str:
        return TYPE_DIRS[self.build_type]

    @property
    def include_dir(self) -> Path:
        return self.path / INCLUDE_DIR

    @property
    def lib_dir(self) -> Path:
        return self.path / LIB_DIR


def scan_distributions(dist_root: Path) -> List[Path]:
    """Immediate subdirectories of *dist_root*, sorted by name."""

    out: List[Path] = []
    for child in sorted(dist_root.iterdir(), key=lambda c: c.name):
        if child.is_symlink() or not child.is_dir():
            continue
        out.append(child)
    return out


def split_name(name: str) -> tuple[str, str, str]:
    """Split ``<dep>-<arch>[-<type>]`` into (dep, arch, type).

    The type is empty when the name carries no debug/release suffix; a trailing
    ``-`` also means "no type". Raises ValueError when there is no ``-`` at all.
    """

    tokens = name.split("-")
    if len(tokens) < 2:
        raise ValueError(f"no '-<arch>' suffix in {name!r}")

    last = tokens[-1].lower()
    if last in (DEBUG_TYPE, RELEASE_TYPE) or last == "":
        return "-".join(tokens[:-2]), tokens[-2].lower(), last
    return "-".join(tokens[:-1]), last, ""


def classify(path: Path, accepted_archs: Sequence[str]) -> Distribution:
    """Classify a distribution directory for the accepted architectures.

    Raises SkipDistribution when the directory does not install here.
    """

    name = path.name
    try:
        dep, arch, build_type = split_name(name)
    except ValueError as e:
        raise SkipDistribution(
            name,
            SKIP_UNCLASSIFIABLE,
            f'Dependency "{path}" is not named <name>-<arch>[-<type>]; skipping.',
        ) from e

    logger.debug('Trying to install "%s": arch=%s, type=%s', name, arch, build_type)

    if arch not in accepted_archs:
        tokens = name.split("-")
        if len(tokens) >= 3 and tokens[-2].lower() in accepted_archs:
            raise SkipDistribution(
                name,
                SKIP_INVALID_TYPE,
                f'Dependency "{path}" has an invalid type "{tokens[-1]}". Maybe the filename is incorrect?',
            )
        raise SkipDistribution(
            name,
            SKIP_UNSUPPORTED_ARCH,
            f'{name} is not from a supported architecture: "{arch}".',
        )

    return Distribution(path=path, dependency=dep, arch=arch, build_type=build_type)
