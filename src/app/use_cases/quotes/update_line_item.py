"""UpdateLineItem Use Case"""

from libs.result import Result, Return
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from .dtos import UpdateLineItemCommandDTO, LineItemResponseDTO
from .gateway import domain_error, failure


class UpdateLineItem:
    """
    Use Case: Apply a patch to a line item

    The store re-validates every field of the resulting item.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        line_item_repo: LineItemRepository,
        tenant_lock: TenantLock,
    ):
        self.uow = uow
        self.line_item_repo = line_item_repo
        self.tenant_lock = tenant_lock

    async def execute(self, command: UpdateLineItemCommandDTO) -> Result[LineItemResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                line_item = await self.line_item_repo.get(
                    command.company_id,
                    command.quote_id,
                    command.line_item_date_id,
                    command.line_item_id,
                )
                for field, value in command.patch().items():
                    setattr(line_item, field, value)
                updated = await self.line_item_repo.update(line_item)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("UPDATE_LINE_ITEM_FAILED", "Failed to update item", e))

        return Return.ok(LineItemResponseDTO.from_line_item(updated))
