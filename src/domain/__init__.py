from .base import BaseModel
from .company import Company
from .user import User, display_name
from .quote import Quote
from .line_item_date import LineItemDate
from .line_item import LineItem
from .errors import DomainError, ValidationError, UniquenessError, NotFoundError
from .quote_events import QuoteEvent, QuoteEventType, QuoteCreated, QuoteUpdated, QuoteDestroyed

__all__ = [
    "BaseModel",
    "Company",
    "User",
    "display_name",
    "Quote",
    "LineItemDate",
    "LineItem",
    "DomainError",
    "ValidationError",
    "UniquenessError",
    "NotFoundError",
    "QuoteEvent",
    "QuoteEventType",
    "QuoteCreated",
    "QuoteUpdated",
    "QuoteDestroyed",
]
