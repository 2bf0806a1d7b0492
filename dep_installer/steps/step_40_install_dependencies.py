from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from ..config import InstallConfig
from ..errors import SkipDistribution
from ..lib.distributions import SKIP_UNSUPPORTED_ARCH, classify
from ..lib.fs import prompt_overwrite
from ..lib.install import install_distribution
from ..lib.platforms import PlatformLayout

logger = logging.getLogger(__name__)


class InstallDependenciesStep:
    step_id = "40_install_dependencies"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg: InstallConfig = state["config"]
        layout: PlatformLayout = state["layout"]
        dist_dirs: List[Path] = state.get("distributions") or []

        exe = state.setdefault("execution", {})
        installed = exe.setdefault("installed", [])
        skipped = exe.setdefault("skipped", [])

        confirm = prompt_overwrite if cfg.verify else None

        for dist_dir in dist_dirs:
            try:
                dist = classify(dist_dir, layout.archs)
                target = install_distribution(
                    dist,
                    layout.target_dir,
                    confirm=confirm,
                    dry_run=cfg.dry_run,
                )
            except SkipDistribution as e:
                # Foreign architectures are expected in a shared _dist tree.
                if e.reason == SKIP_UNSUPPORTED_ARCH:
                    logger.info("%s", e)
                else:
                    logger.warning("%s", e)
                skipped.append({"name": e.name, "reason": e.reason})
                continue

            installed.append({"name": dist.name, "target": str(target)})

        logger.info("Installed %d distribution(s), skipped %d", len(installed), len(skipped))
        return state
