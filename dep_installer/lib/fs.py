from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

logger = logging.getLogger(__name__)

Confirm = Callable[[Path], bool]


def prompt_overwrite(path: Path) -> bool:
    """Interactive overwrite check used by --verify. EOF on stdin means no."""
    try:
        answer = input(f"overwrite {path}? [y/N] ")
    except EOFError:
        logger.info("    no answer on stdin; keeping %s", path)
        return False
    return answer.strip().lower() in {"y", "yes"}


def list_children(path: Path) -> List[Path]:
    """Immediate children of *path*, hidden entries included, sorted by name."""
    return sorted(path.iterdir(), key=lambda c: c.name)


def remove_tree(path: Path, *, dry_run: bool = False) -> None:
    """Remove a directory tree, or just the link when *path* is a symlink."""
    if dry_run:
        logger.info("Would remove %s", path)
        return
    if path.is_symlink():
        path.unlink()
        return
    shutil.rmtree(path)


def ensure_dir(path: Path) -> None:
    if path.is_dir():
        return
    logger.debug("    creating %s", path)
    path.mkdir(parents=True, exist_ok=True)


def _make_dir(path: Path) -> None:
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"{path} exists and is not a directory")
    path.mkdir(parents=True, exist_ok=True)


def _copy_file(src: Path, dst: Path, confirm: Optional[Confirm]) -> None:
    # copy2 into an existing directory would nest the file as dst/name.
    if dst.is_dir():
        raise IsADirectoryError(f"{dst} is a directory; cannot install file {src}")
    if confirm is not None and dst.exists() and not confirm(dst):
        logger.info("    not overwriting %s", dst)
        return
    # copy2 follows symlinks: installed trees never contain links back into _dist.
    shutil.copy2(src, dst)
    logger.debug("    %s -> %s", src, dst)


def copy_item(
    src: Path,
    dst_dir: Path,
    *,
    confirm: Optional[Confirm] = None,
) -> None:
    """Copy a file or directory into *dst_dir*, merging directories.

    Mirrors ``cp -L [-R] [-i] src dst_dir``. A file/directory clash with an
    existing entry raises an OSError subclass; symlink loops are not followed.
    """

    out = dst_dir / src.name
    if not src.is_dir():
        _copy_file(src, out, confirm)
        return

    # (st_dev, st_ino) of every directory above the one being walked
    ancestors: Dict[str, FrozenSet[Tuple[int, int]]] = {}
    for dirpath, dirnames, filenames in os.walk(src, followlinks=True):
        st = os.stat(dirpath)
        key = (st.st_dev, st.st_ino)
        above = ancestors.pop(dirpath, frozenset())
        if key in above:
            logger.warning("    symlink loop at %s; not descending", dirpath)
            dirnames[:] = []
            continue

        dirnames.sort()
        for d in dirnames:
            ancestors[os.path.join(dirpath, d)] = above | {key}
        here = out / Path(dirpath).relative_to(src)
        _make_dir(here)
        for name in sorted(filenames):
            _copy_file(Path(dirpath) / name, here / name, confirm)
