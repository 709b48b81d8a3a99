"""CreateLineItemDate Use Case

Adds a dated group to a quote. Dates are unique per quote; the check and the
insert run under the company write lock and the unique index backs it up at
commit.
"""

from libs.result import Result, Return
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.app.repositories.quote_repository import QuoteRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.line_item_date import LineItemDate
from .dtos import CreateLineItemDateCommandDTO, LineItemDateResponseDTO
from .gateway import domain_error, failure


class CreateLineItemDate:
    """
    Use Case: Create a line item date

    Errors:
        QUOTE_NOT_FOUND: parent quote is absent or foreign
        VALIDATION_ERROR: date missing or malformed
        DATE_ALREADY_EXISTS: the quote already has this date
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
        self, command: CreateLineItemDateCommandDTO
    ) -> Result[LineItemDateResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                quote = await self.quote_repo.get(
                    command.company_id, command.quote_id, for_update=True
                )
                line_item_date = LineItemDate(quote_id=quote.id, date=command.date)
                created = await self.line_item_date_repo.create(line_item_date)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(
                    failure("CREATE_LINE_ITEM_DATE_FAILED", "Failed to create date", e)
                )

        return Return.ok(LineItemDateResponseDTO.from_line_item_date(created))
