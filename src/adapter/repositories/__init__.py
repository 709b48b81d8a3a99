from .company_repository import SqlAlchemyCompanyRepository
from .user_repository import SqlAlchemyUserRepository
from .quote_repository import SqlAlchemyQuoteRepository
from .line_item_date_repository import SqlAlchemyLineItemDateRepository
from .line_item_repository import SqlAlchemyLineItemRepository

__all__ = [
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyQuoteRepository",
    "SqlAlchemyLineItemDateRepository",
    "SqlAlchemyLineItemRepository",
]
