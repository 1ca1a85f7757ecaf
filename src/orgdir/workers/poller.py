"""Background loop draining the Redis event list in batches."""

import asyncio
import json
import logging

from orgdir.config import settings
from orgdir.workers.consumer import BatchReport, process_batch

logger = logging.getLogger(__name__)


def _decode_envelope(raw) -> dict:
    try:
        envelope = json.loads(raw)
    except ValueError:
        envelope = None
    if isinstance(envelope, dict):
        return envelope
    # Hand the raw payload through so the consumer logs and skips it
    return {"messageId": "unparsed", "body": raw}


async def poll_once(redis, session_factory, queue_key: str, batch_size: int) -> BatchReport | None:
    """Pop up to ``batch_size`` envelopes and process them. None when the queue is empty."""
    items = await redis.lpop(queue_key, batch_size)
    if not items:
        return None
    return await process_batch([_decode_envelope(item) for item in items], session_factory)


async def run_consumer(app) -> None:
    """Poll forever until cancelled by the application lifespan."""
    logger.info("Queue consumer started (key=%s, batch=%d)", settings.queue_key, settings.queue_batch_size)
    while True:
        try:
            report = await poll_once(
                app.state.redis,
                app.state.db_session_factory,
                settings.queue_key,
                settings.queue_batch_size,
            )
        except Exception:
            logger.exception("Queue poll failed")
            report = None

        if report is None:
            await asyncio.sleep(settings.queue_poll_interval)
