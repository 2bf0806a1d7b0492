from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single install step operating on the shared state."""

    step_id: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(
    *,
    state: Dict[str, Any],
    steps: Sequence[Step],
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order, optionally stopping after *stop_after*."""

    ran: List[str] = []

    for step in steps:
        state.setdefault("execution", {})["current_step"] = step.step_id

        logger.debug("Running step %s", step.step_id)
        state = step.run(state)
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.debug("Stopping after %s", stop_after)
            break

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
