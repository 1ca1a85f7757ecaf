"""Publishing directory events onto the Redis list the consumer drains."""

import json
from typing import Any

from orgdir.config import settings
from orgdir.models.validation import Operation
from orgdir.services.id_generator import generate_id


def build_envelope(operation: Operation, payload: dict[str, Any], message_id: str | None = None) -> dict:
    """Wrap ``payload`` in an envelope record tagged with ``operation``."""
    body = {"eventType": operation.value, **payload}
    return {
        "messageId": message_id or generate_id("msg_"),
        "body": json.dumps(body),
    }


async def publish_event(
    redis,
    operation: Operation,
    payload: dict[str, Any],
    queue_key: str | None = None,
) -> str:
    """Push one event to the queue and return its message id."""
    envelope = build_envelope(operation, payload)
    await redis.rpush(queue_key or settings.queue_key, json.dumps(envelope))
    return envelope["messageId"]
