from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import InstallConfig
from ..lib.platforms import resolve_layout

logger = logging.getLogger(__name__)


class ResolvePlatformStep:
    step_id = "10_resolve_platform"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg: InstallConfig = state["config"]

        layout = resolve_layout(cfg.root, cfg.platform, cfg.arch)
        state["layout"] = layout

        logger.info("Using platform: %s; including architectures: %s", layout.platform, " ".join(layout.archs))
        logger.info("Top-level target directory: %s", layout.target_dir)
        return state
