"""
Command bus: hands accepted reel requests to the orchestrator queue.
"""

from .base import CommandPublisher, PublishError, SerializationError, TransportError, serialize_payload
from .sqs import SQSPublisher, create_sqs_client

__all__ = [
    "CommandPublisher",
    "PublishError",
    "SQSPublisher",
    "SerializationError",
    "TransportError",
    "create_sqs_client",
    "serialize_payload",
]
