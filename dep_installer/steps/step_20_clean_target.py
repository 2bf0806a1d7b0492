from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import InstallConfig
from ..errors import InstallError
from ..lib.fs import remove_tree
from ..lib.platforms import PlatformLayout

logger = logging.getLogger(__name__)


class CleanTargetStep:
    step_id = "20_clean_target"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg: InstallConfig = state["config"]
        layout: PlatformLayout = state["layout"]

        target = layout.target_dir
        if target.exists() and not target.is_symlink() and not target.is_dir():
            raise InstallError(f'Install target "{target}" exists and is not a directory.')

        removed = False
        if target.is_symlink() or target.is_dir():
            logger.info("Removing existing install directory in %s", target)
            remove_tree(target, dry_run=cfg.dry_run)
            removed = not cfg.dry_run

        state.setdefault("execution", {})["target_removed"] = removed
        return state
