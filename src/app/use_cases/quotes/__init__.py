"""Quote hierarchy use cases

The mutation use cases here are the only write path to quotes, line item
dates and line items.
"""
from .create_quote import CreateQuote
from .update_quote import UpdateQuote
from .destroy_quote import DestroyQuote
from .list_quotes import ListQuotes
from .get_quote import GetQuote
from .create_line_item_date import CreateLineItemDate
from .update_line_item_date import UpdateLineItemDate
from .destroy_line_item_date import DestroyLineItemDate
from .get_previous_date import GetPreviousLineItemDate
from .create_line_item import CreateLineItem
from .update_line_item import UpdateLineItem
from .destroy_line_item import DestroyLineItem
from .dtos import (
    CreateQuoteCommandDTO,
    UpdateQuoteCommandDTO,
    DestroyQuoteCommandDTO,
    QuoteResponseDTO,
    QuoteListResponseDTO,
    QuoteDetailDTO,
    DestroyedResponseDTO,
    CreateLineItemDateCommandDTO,
    UpdateLineItemDateCommandDTO,
    DestroyLineItemDateCommandDTO,
    LineItemDateResponseDTO,
    LineItemDateDetailDTO,
    CreateLineItemCommandDTO,
    UpdateLineItemCommandDTO,
    DestroyLineItemCommandDTO,
    LineItemResponseDTO,
)

__all__ = [
    "CreateQuote",
    "UpdateQuote",
    "DestroyQuote",
    "ListQuotes",
    "GetQuote",
    "CreateLineItemDate",
    "UpdateLineItemDate",
    "DestroyLineItemDate",
    "GetPreviousLineItemDate",
    "CreateLineItem",
    "UpdateLineItem",
    "DestroyLineItem",
    "CreateQuoteCommandDTO",
    "UpdateQuoteCommandDTO",
    "DestroyQuoteCommandDTO",
    "QuoteResponseDTO",
    "QuoteListResponseDTO",
    "QuoteDetailDTO",
    "DestroyedResponseDTO",
    "CreateLineItemDateCommandDTO",
    "UpdateLineItemDateCommandDTO",
    "DestroyLineItemDateCommandDTO",
    "LineItemDateResponseDTO",
    "LineItemDateDetailDTO",
    "CreateLineItemCommandDTO",
    "UpdateLineItemCommandDTO",
    "DestroyLineItemCommandDTO",
    "LineItemResponseDTO",
]
