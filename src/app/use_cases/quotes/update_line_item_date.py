"""UpdateLineItemDate Use Case"""

from libs.result import Result, Return
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.app.repositories.quote_repository import QuoteRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from .dtos import UpdateLineItemDateCommandDTO, LineItemDateResponseDTO
from .gateway import domain_error, failure


class UpdateLineItemDate:
    """
    Use Case: Move a line item date to another calendar date

    The new date must still be unique among the quote's other dates.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        quote_repo: QuoteRepository,
        line_item_date_repo: LineItemDateRepository,
        tenant_lock: TenantLock,
    ):
        self.uow = uow
        self.quote_repo = quote_repo
        self.line_item_date_repo = line_item_date_repo
        self.tenant_lock = tenant_lock

    async def execute(
        self, command: UpdateLineItemDateCommandDTO
    ) -> Result[LineItemDateResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                await self.quote_repo.get(command.company_id, command.quote_id, for_update=True)
                line_item_date = await self.line_item_date_repo.get(
                    command.company_id, command.quote_id, command.line_item_date_id
                )
                for field, value in command.patch().items():
                    setattr(line_item_date, field, value)
                updated = await self.line_item_date_repo.update(line_item_date)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(
                    failure("UPDATE_LINE_ITEM_DATE_FAILED", "Failed to update date", e)
                )

        return Return.ok(LineItemDateResponseDTO.from_line_item_date(updated))
