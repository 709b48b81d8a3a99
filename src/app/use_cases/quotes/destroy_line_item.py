"""DestroyLineItem Use Case"""

from libs.result import Result, Return
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from .dtos import DestroyLineItemCommandDTO, DestroyedResponseDTO
from .gateway import domain_error, failure


class DestroyLineItem:
    def __init__(
        self,
        uow: UnitOfWork,
        line_item_repo: LineItemRepository,
        tenant_lock: TenantLock,
    ):
        self.uow = uow
        self.line_item_repo = line_item_repo
        self.tenant_lock = tenant_lock

    async def execute(self, command: DestroyLineItemCommandDTO) -> Result[DestroyedResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                await self.line_item_repo.delete(
                    command.company_id,
                    command.quote_id,
                    command.line_item_date_id,
                    command.line_item_id,
                )
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("DESTROY_LINE_ITEM_FAILED", "Failed to destroy item", e))

        return Return.ok(DestroyedResponseDTO(id=command.line_item_id))
