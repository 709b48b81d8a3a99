"""Helpers shared by the quote mutation use cases"""

import logging
from pydantic import BaseModel
from libs.result import Error
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.domain.errors import DomainError
from src.domain.quote_events import QuoteEvent

logger = logging.getLogger(__name__)


def domain_error(exc: DomainError, command: BaseModel) -> Error:
    """Error carrying the rejected input so the caller can re-display it"""
    details = {"input": command.model_dump(mode="json", exclude={"company_id"})}
    if exc.field:
        details["field"] = exc.field
    return Error(
        code=exc.code,
        message=exc.message,
        reason=type(exc).__name__,
        details=details,
    )


def failure(code: str, message: str, exc: Exception) -> Error:
    logger.error(f"{message}: {exc}")
    return Error(code=code, message=message, reason=str(exc))


def publish(broadcaster: QuoteBroadcaster, event: QuoteEvent) -> None:
    """Hand a committed change to the broadcaster; delivery problems never reach the caller"""
    try:
        broadcaster.publish(event.company_id, event)
    except Exception as e:
        logger.error(
            f"Broadcast of {event.event_type.value} for quote {event.quote_id} failed: {e}"
        )
