from .company_repository import CompanyRepository
from .user_repository import UserRepository
from .quote_repository import QuoteRepository
from .line_item_date_repository import LineItemDateRepository
from .line_item_repository import LineItemRepository

__all__ = [
    "CompanyRepository",
    "UserRepository",
    "QuoteRepository",
    "LineItemDateRepository",
    "LineItemRepository",
]
