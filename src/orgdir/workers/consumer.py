"""Batch consumer for directory events.

Each envelope record is ``{"messageId": ..., "body": "<json>"}`` where the
body decodes to ``{"eventType": ..., **payload}``. Messages are independent:
each gets its own session and its own error boundary, and a failing message
never stops the rest of the batch.

Failures are only logged. Nothing is signalled back to the transport, so a
message that failed on a transient store error is not redelivered.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orgdir.errors.result import Err
from orgdir.logging_config import bind_context, clear_context
from orgdir.models.validation import Operation
from orgdir.services.dispatch import dispatch

logger = logging.getLogger(__name__)


@dataclass
class BatchReport:
    """Outcome counts for one batch."""

    processed: int = 0
    skipped: int = 0
    rejected: int = 0
    failed_message_ids: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.rejected + len(self.failed_message_ids)


async def process_batch(
    records: Iterable[Mapping[str, Any]],
    session_factory: async_sessionmaker[AsyncSession],
) -> BatchReport:
    """Process every record in ``records``; never raises for a single bad message."""
    report = BatchReport()
    for record in records:
        await process_message(record, session_factory, report)
    logger.info(
        "Batch done: processed=%d skipped=%d rejected=%d failed=%d",
        report.processed, report.skipped, report.rejected, len(report.failed_message_ids),
    )
    return report


async def process_message(
    record: Mapping[str, Any],
    session_factory: async_sessionmaker[AsyncSession],
    report: BatchReport,
) -> None:
    message_id = "unknown"
    try:
        message_id = str(record.get("messageId") or "unknown")
        bind_context(message_id=message_id)

        event = _decode_body(record.get("body"))
        if event is None:
            logger.warning("Skipping message %s: body is not valid JSON", message_id)
            report.skipped += 1
            return

        event_type = event.get("eventType")
        if not event_type:
            logger.warning("Skipping message %s: missing eventType", message_id)
            report.skipped += 1
            return
        try:
            operation = Operation(event_type)
        except ValueError:
            logger.warning("Skipping message %s: unknown eventType %r", message_id, event_type)
            report.skipped += 1
            return
        bind_context(event_type=operation.value)

        async with session_factory() as session:
            result = await dispatch(session, operation, event)
            if isinstance(result, Err):
                await session.rollback()
                logger.warning(
                    "Message %s (%s) rejected with status %d: %s",
                    message_id, operation.value, result.error.status_code, result.error.message,
                )
                report.rejected += 1
                return
            await session.commit()

        logger.info("Message %s (%s) processed", message_id, operation.value)
        report.processed += 1
    except Exception:
        logger.exception("Unexpected error processing message %s", message_id)
        report.failed_message_ids.append(message_id)
    finally:
        clear_context()


def _decode_body(body: Any) -> dict | None:
    if not isinstance(body, (str, bytes)):
        return None
    try:
        event = json.loads(body)
    except ValueError:
        return None
    return event if isinstance(event, dict) else None
