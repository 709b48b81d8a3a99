"""CreateLineItem Use Case

Adds a billable item to a line item date.
"""

from libs.result import Result, Return
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.line_item import LineItem
from .dtos import CreateLineItemCommandDTO, LineItemResponseDTO
from .gateway import domain_error, failure


class CreateLineItem:
    """
    Use Case: Create a line item

    Business Rules:
    1. Parent date must belong to the given quote of the actor's company
    2. name required; quantity integer; unit_price numeric, kept to cents
    3. No broadcast (only quote-level changes are announced)

    Errors:
        LINE_ITEM_DATE_NOT_FOUND: parent chain does not resolve in the company
        VALIDATION_ERROR: see rule 2
    """

    def __init__(
        self,
        uow: UnitOfWork,
        line_item_date_repo: LineItemDateRepository,
        line_item_repo: LineItemRepository,
        tenant_lock: TenantLock,
    ):
        self.uow = uow
        self.line_item_date_repo = line_item_date_repo
        self.line_item_repo = line_item_repo
        self.tenant_lock = tenant_lock

    async def execute(self, command: CreateLineItemCommandDTO) -> Result[LineItemResponseDTO]:
        async with self.tenant_lock.hold(command.company_id):
            try:
                line_item_date = await self.line_item_date_repo.get(
                    command.company_id, command.quote_id, command.line_item_date_id
                )
                line_item = LineItem(
                    line_item_date_id=line_item_date.id,
                    name=command.name,
                    description=command.description,
                    quantity=command.quantity,
                    unit_price=command.unit_price,
                )
                created = await self.line_item_repo.create(line_item)
                await self.uow.commit()
            except DomainError as e:
                await self.uow.rollback()
                return Return.err(domain_error(e, command))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(failure("CREATE_LINE_ITEM_FAILED", "Failed to create item", e))

        return Return.ok(LineItemResponseDTO.from_line_item(created))
