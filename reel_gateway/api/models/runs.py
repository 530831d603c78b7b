"""
API models for run status polling.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from reel_gateway.runs.store import RunState, RunStatus


class RunStepModel(BaseModel):
    name: str = Field(..., description="Pipeline step name")
    status: RunState = Field(..., description="Step status")
    updated_at: str = Field(..., alias="updatedAt", description="Last update time (ISO-8601)")
    artifacts: Optional[List[str]] = Field(None, description="Artifact references produced by the step")

    class Config:
        populate_by_name = True


class RunStatusResponse(BaseModel):
    """Current state of a run."""
    run_id: str = Field(..., alias="runId")
    status: RunState = Field(..., description="Overall run status")
    steps: List[RunStepModel] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "runId": "0b7e2c9a-4f5e-4c1e-9d2a-2d6c8f1e7a10",
                "status": "PENDING",
                "steps": []
            }
        }

    @classmethod
    def from_status(cls, status: RunStatus) -> "RunStatusResponse":
        return cls(
            run_id=status.run_id,
            status=status.status,
            steps=[
                RunStepModel(name=s.name, status=s.status, updated_at=s.updated_at, artifacts=s.artifacts)
                for s in status.steps
            ],
        )
