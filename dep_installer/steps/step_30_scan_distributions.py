from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.distributions import scan_distributions
from ..lib.platforms import PlatformLayout

logger = logging.getLogger(__name__)


class ScanDistributionsStep:
    step_id = "30_scan_distributions"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        layout: PlatformLayout = state["layout"]

        logger.info("Looking for distributions in %s", layout.dist_dir)
        logger.info("::%s::", "-" * 73)

        state["distributions"] = scan_distributions(layout.dist_dir)
        return state
