from __future__ import annotations
from typing import Any, Optional
import logging
import time

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .base import CommandPublisher, TransportError, serialize_payload

logger = logging.getLogger(__name__)

RUN_ID_ATTRIBUTE = "runId"


def create_sqs_client(region: Optional[str] = None, timeout: float = 5.0):
    """SQS client with bounded timeouts and a single attempt per send."""
    config = Config(
        connect_timeout=timeout,
        read_timeout=timeout,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )
    return boto3.client("sqs", region_name=region, config=config)


class SQSPublisher(CommandPublisher):
    def __init__(self, queue_url: str, sqs_client: Any):
        self.queue_url = queue_url
        self.sqs_client = sqs_client

    def publish(self, run_id: str, payload: Any) -> Optional[str]:
        body = serialize_payload(payload)

        t0 = time.perf_counter()
        try:
            response = self.sqs_client.send_message(
                QueueUrl=self.queue_url,
                MessageBody=body,
                MessageAttributes={
                    RUN_ID_ATTRIBUTE: {
                        "DataType": "String",
                        "StringValue": run_id,
                    }
                },
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            logger.error(f"Failed to send message to SQS for runID={run_id}: {code}")
            raise TransportError(f"SQS send_message failed: {code}") from e
        except BotoCoreError as e:
            logger.error(f"Failed to send message to SQS for runID={run_id}: {e}")
            raise TransportError(f"SQS send_message failed: {e.__class__.__name__}") from e

        message_id = (response or {}).get("MessageId")
        dt = (time.perf_counter() - t0) * 1000
        logger.info(
            f"Published reel command for runID={run_id} to queue={self.queue_url} "
            f"(messageId={message_id}, {dt:.1f}ms)"
        )
        return message_id
