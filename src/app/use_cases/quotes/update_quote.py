"""UpdateQuote Use Case"""

import logging
from libs.result import Result, Return
from src.app.repositories.quote_repository import QuoteRepository
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.quote_events import QuoteUpdated
from .dtos import UpdateQuoteCommandDTO, QuoteResponseDTO
from .gateway import domain_error, failure, publish

logger = logging.getLogger(__name__)


class UpdateQuote:
    """
    Use Case: Apply a patch to a quote

    The store re-validates the whole quote, not only the patched fields.
    Publishes QuoteUpdated after commit.
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

    async def execute(self, command: UpdateQuoteCommandDTO) -> Result[QuoteResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                quote = await self.quote_repo.get(
                    command.company_id, command.quote_id, for_update=True
                )
                for field, value in command.patch().items():
                    setattr(quote, field, value)
                updated_quote = await self.quote_repo.update(quote)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("UPDATE_QUOTE_FAILED", "Failed to update quote", e))

            publish(self.broadcaster, QuoteUpdated.from_quote(updated_quote))

        logger.info(f"Quote {updated_quote.id} updated for company {command.company_id}")
        return Return.ok(QuoteResponseDTO.from_quote(updated_quote))
