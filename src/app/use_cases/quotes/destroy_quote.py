"""DestroyQuote Use Case

Deletes a quote with all of its line item dates and line items in one unit
of work, then announces the removal.
"""

import logging
from libs.result import Result, Return
from src.app.repositories.quote_repository import QuoteRepository
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.quote_events import QuoteDestroyed
from .dtos import DestroyQuoteCommandDTO, DestroyedResponseDTO
from .gateway import domain_error, failure, publish

logger = logging.getLogger(__name__)


class DestroyQuote:
    """
    Use Case: Destroy a quote

    Business Rules:
    1. Cascade removes every line item date and line item under the quote
    2. A quote that is already gone (or foreign) yields QUOTE_NOT_FOUND
    3. Publishes QuoteDestroyed after commit
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

    async def execute(self, command: DestroyQuoteCommandDTO) -> Result[DestroyedResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                await self.quote_repo.delete(command.company_id, command.quote_id)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("DESTROY_QUOTE_FAILED", "Failed to destroy quote", e))

            publish(
                self.broadcaster,
                QuoteDestroyed(company_id=command.company_id, quote_id=command.quote_id),
            )

        logger.info(f"Quote {command.quote_id} destroyed for company {command.company_id}")
        return Return.ok(DestroyedResponseDTO(id=command.quote_id))
