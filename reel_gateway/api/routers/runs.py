"""
Run status polling endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..models.runs import RunStatusResponse
from ..dependencies.services import get_run_store
from reel_gateway.runs.store import RunStatusStore

router = APIRouter()


# declared before the path route, which would also match an empty id
@router.get("/", include_in_schema=False)
def missing_run_id():
    raise HTTPException(status_code=400, detail="Missing runId")


@router.get("/{run_id:path}", response_model=RunStatusResponse, response_model_exclude_none=True)
def get_run_status(
    run_id: str,
    run_store: RunStatusStore = Depends(get_run_store)
):
    """Current status of a run, as reported by the run status store."""
    if not run_id.strip():
        raise HTTPException(status_code=400, detail="Missing runId")

    return RunStatusResponse.from_status(run_store.get_status(run_id))
