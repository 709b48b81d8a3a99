"""Quote list change events

Published to a company's channel after a quote is created, updated or
destroyed. Events carry a snapshot of the quote so subscribers never touch
live ORM state.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict
from pydantic import BaseModel

from src.domain.quote import Quote


class QuoteEventType(str, Enum):
    """Quote list change kinds"""
    CREATED = "created"
    UPDATED = "updated"
    DESTROYED = "destroyed"


class QuoteSnapshot(BaseModel):
    id: int
    company_id: int
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteSnapshot":
        return cls(
            id=quote.id,
            company_id=quote.company_id,
            name=quote.name,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )


class QuoteEvent(BaseModel):
    event_type: ClassVar[QuoteEventType]

    company_id: int
    quote_id: int

    def to_message(self) -> Dict[str, Any]:
        return {"event": self.event_type.value, "quote_id": self.quote_id}


class QuoteCreated(QuoteEvent):
    """Subscribers insert the quote at the top of the list"""

    event_type: ClassVar[QuoteEventType] = QuoteEventType.CREATED
    quote: QuoteSnapshot

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteCreated":
        return cls(company_id=quote.company_id, quote_id=quote.id, quote=QuoteSnapshot.from_quote(quote))

    def to_message(self) -> Dict[str, Any]:
        message = super().to_message()
        message["quote"] = self.quote.model_dump(mode="json")
        return message


class QuoteUpdated(QuoteEvent):
    """Subscribers replace the quote in place"""

    event_type: ClassVar[QuoteEventType] = QuoteEventType.UPDATED
    quote: QuoteSnapshot

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteUpdated":
        return cls(company_id=quote.company_id, quote_id=quote.id, quote=QuoteSnapshot.from_quote(quote))

    def to_message(self) -> Dict[str, Any]:
        message = super().to_message()
        message["quote"] = self.quote.model_dump(mode="json")
        return message


class QuoteDestroyed(QuoteEvent):
    """Subscribers remove the quote from the list"""

    event_type: ClassVar[QuoteEventType] = QuoteEventType.DESTROYED
