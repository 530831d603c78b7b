from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional
import json

from pydantic import BaseModel

#unified publish errors
class PublishError(RuntimeError): ...
class SerializationError(PublishError): ...
class TransportError(PublishError): ...


def serialize_payload(payload: Any) -> str:
    """Encode a command payload as compact JSON. Raises SerializationError."""
    try:
        if isinstance(payload, BaseModel):
            # only what was set: explicit nulls and extras survive, defaults are not invented
            payload = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON serializable: {e}") from e


class CommandPublisher(ABC):
    @abstractmethod
    def publish(self, run_id: str, payload: Any) -> Optional[str]:
        """Send one command tagged with run_id; returns the transport message id."""
        raise NotImplementedError
