"""
Reel intake endpoint.
"""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException

from ..models.reels import CreateReelRequest, CreateReelResponse
from ..dependencies.services import get_publisher
from reel_gateway.bus.base import CommandPublisher, SerializationError, TransportError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=202, response_model=CreateReelResponse)
def create_reel(
    request: CreateReelRequest,
    publisher: CommandPublisher = Depends(get_publisher)
):
    """
    Accept a reel generation request.

    Mints a run identifier, publishes the request to the command queue once
    and returns 202 with the run id. If the queue rejects the message the
    caller gets 503 and no run id, since nothing will process the run.
    """
    run_id = str(uuid.uuid4())

    try:
        publisher.publish(run_id, request)
    except SerializationError as e:
        logger.error(f"Could not encode reel request for runID={run_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to encode reel request")
    except TransportError as e:
        logger.error(f"Could not queue reel request for runID={run_id}: {e}")
        raise HTTPException(status_code=503, detail="Failed to queue reel request")

    logger.info(f"Accepted reel request for project {request.project_id}, runID={run_id}")
    return CreateReelResponse(run_id=run_id)
