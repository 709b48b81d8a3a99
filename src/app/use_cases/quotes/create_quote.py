"""CreateQuote Use Case

Creates a quote under the actor's company and announces it on the
company's quote list channel.
"""

import logging
from libs.result import Result, Return
from src.app.repositories.quote_repository import QuoteRepository
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.quote import Quote
from src.domain.quote_events import QuoteCreated
from .dtos import CreateQuoteCommandDTO, QuoteResponseDTO
from .gateway import domain_error, failure, publish

logger = logging.getLogger(__name__)


class CreateQuote:
    """
    Use Case: Create a quote

    Business Rules:
    1. Quote belongs to the actor's company
    2. Name is required and non-blank
    3. Exactly one QuoteCreated event per successful create, none on failure

    Flow:
    1. Take the company write lock
    2. Persist the quote (store validates)
    3. Commit
    4. Publish QuoteCreated
    """

    def __init__(
        self,
        uow: UnitOfWork,
        quote_repo: QuoteRepository,
        broadcaster: QuoteBroadcaster,
        tenant_lock: TenantLock,
    ):
        self.uow = uow
        self.quote_repo = quote_repo
        self.broadcaster = broadcaster
        self.tenant_lock = tenant_lock

    async def execute(self, command: CreateQuoteCommandDTO) -> Result[QuoteResponseDTO]:
        """
        Execute quote creation

        Args:
            command: CreateQuoteCommandDTO with company_id and name

        Returns:
            Result[QuoteResponseDTO]: Created quote, or VALIDATION_ERROR with the rejected input
        """
        async with self.tenant_lock.hold(command.company_id):
            try:
                quote = Quote(company_id=command.company_id, name=command.name)
                created_quote = await self.quote_repo.create(quote)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("CREATE_QUOTE_FAILED", "Failed to create quote", e))

            publish(self.broadcaster, QuoteCreated.from_quote(created_quote))

        logger.info(f"Quote {created_quote.id} created for company {command.company_id}")
        return Return.ok(QuoteResponseDTO.from_quote(created_quote))
