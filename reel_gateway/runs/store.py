from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RunStep:
    name: str
    status: RunState
    updated_at: str  # ISO-8601
    artifacts: Optional[List[str]] = None


@dataclass(frozen=True)
class RunStatus:
    run_id: str
    status: RunState
    steps: List[RunStep] = field(default_factory=list)


class RunStatusStore(ABC):
    @abstractmethod
    def get_status(self, run_id: str) -> RunStatus:
        raise NotImplementedError


class StubRunStatusStore(RunStatusStore):
    """
    Placeholder until run state is persisted by the orchestrator.

    Every run reports PENDING with no steps.
    """

    def get_status(self, run_id: str) -> RunStatus:
        logger.info(f"Fetching status for runID={run_id}")
        return RunStatus(run_id=run_id, status=RunState.PENDING, steps=[])
