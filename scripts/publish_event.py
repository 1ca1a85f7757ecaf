"""Push one directory event onto the Redis queue drained by the consumer.

Usage:
    python scripts/publish_event.py create.organization '{"name": "Acme", "description": "Widgets"}'
    python scripts/publish_event.py create.user '{"orgId": "org_...", "name": "Bob", "email": "bob@x.com"}'
"""

import argparse
import asyncio
import json

import redis.asyncio as aioredis

from orgdir.config import settings
from orgdir.models.validation import Operation
from orgdir.workers.queue import publish_event


async def _publish(operation: Operation, payload: dict) -> str:
    client = aioredis.from_url(settings.redis_url, decode_responses=True)
    try:
        return await publish_event(client, operation, payload)
    finally:
        await client.aclose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Publish a directory event")
    parser.add_argument("event_type", choices=[op.value for op in Operation])
    parser.add_argument("payload", help="JSON object with the event fields")
    args = parser.parse_args(argv)

    payload = json.loads(args.payload)
    message_id = asyncio.run(_publish(Operation(args.event_type), payload))
    print(f"Published {args.event_type} as {message_id} to {settings.queue_key}")


if __name__ == "__main__":
    main()
