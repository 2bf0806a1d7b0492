from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import SkipDistribution
from .distributions import INCLUDE_DIR, LIB_DIR, SKIP_COPY_FAILED, SKIP_UNHANDLED, Distribution
from .fs import Confirm, copy_item, ensure_dir, list_children

logger = logging.getLogger(__name__)


def _copy_payload(src: Path, dst: Path, *, confirm: Optional[Confirm]) -> List[str]:
    """Copy every child of *src*; returns the names that failed to copy."""
    failed: List[str] = []
    for item in list_children(src):
        try:
            copy_item(item, dst, confirm=confirm)
        except OSError as e:
            logger.warning("    failed to copy %s: %s", item, e)
            failed.append(item.name)
    return failed


def install_distribution(
    dist: Distribution,
    arch_target_dir: Path,
    *,
    confirm: Optional[Confirm] = None,
    dry_run: bool = False,
) -> Path:
    """Copy a classified distribution's include/ and lib/ into its type dir.

    Returns the type target directory (``<arch>/<debug|release|common>``).
    """

    target = arch_target_dir / dist.target_subdir
    logger.info("Installing %s to %s ...", dist.path, target)

    if dry_run:
        return target

    target_include = target / INCLUDE_DIR
    target_lib = target / LIB_DIR
    ensure_dir(target_include)
    ensure_dir(target_lib)

    handled_any = False
    failed: List[str] = []

    if dist.include_dir.is_dir():
        failed += _copy_payload(dist.include_dir, target_include, confirm=confirm)
        handled_any = True
    else:
        logger.info('    directory "%s" does not exist; skipping includes.', dist.include_dir)

    if dist.lib_dir.is_dir():
        failed += _copy_payload(dist.lib_dir, target_lib, confirm=confirm)
        handled_any = True
    else:
        logger.info('    directory "%s" does not exist; skipping libs.', dist.lib_dir)

    if not handled_any:
        raise SkipDistribution(
            dist.name,
            SKIP_UNHANDLED,
            f'Declared, but unhandled dependency: "{dist.name}"',
        )
    if failed:
        raise SkipDistribution(
            dist.name,
            SKIP_COPY_FAILED,
            f'Dependency "{dist.name}" was only partly installed; failed to copy: {", ".join(failed)}',
        )
    return target
