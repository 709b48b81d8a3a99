"""Line Item API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.line_item_date_repository import SqlAlchemyLineItemDateRepository
from src.adapter.repositories.line_item_repository import SqlAlchemyLineItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, error_status
from src.api.schemas.quote_request import LineItemRequestSchema
from src.app.services.tenant_lock import TenantLock
from src.app.use_cases.quotes import (
    CreateLineItem,
    UpdateLineItem,
    DestroyLineItem,
    CreateLineItemCommandDTO,
    UpdateLineItemCommandDTO,
    DestroyLineItemCommandDTO,
    LineItemResponseDTO,
    DestroyedResponseDTO,
)
from src.app.use_cases.tenants.dtos import ActorDTO
from src.depends import get_current_actor, get_session, get_tenant_lock

router = APIRouter(
    prefix="/quotes/{quote_id}/line_item_dates/{line_item_date_id}/line_items",
    tags=["Line Items"],
)


@router.post("", response_model=LineItemResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_line_item(
    quote_id: int,
    line_item_date_id: int,
    request: LineItemRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Add an item to a date.

    **Example request:**
    ```json
    {"name": "Meeting room", "quantity": 1, "unit_price": "250.00"}
    ```

    **Returns:**
    - 201: Item created, with `total_price`
    - 404: Date not found under this quote in the actor's company
    - 422: Name blank, quantity or unit price missing or not a number
    """
    command = CreateLineItemCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        line_item_date_id=line_item_date_id,
        **request.model_dump(),
    )

    use_case = CreateLineItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyLineItemDateRepository(session),
        SqlAlchemyLineItemRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.patch(
    "/{line_item_id}",
    response_model=LineItemResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_line_item(
    quote_id: int,
    line_item_date_id: int,
    line_item_id: int,
    request: LineItemRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """Update the provided fields of an item."""
    command = UpdateLineItemCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        line_item_date_id=line_item_date_id,
        line_item_id=line_item_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateLineItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyLineItemRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.delete(
    "/{line_item_id}",
    response_model=DestroyedResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def destroy_line_item(
    quote_id: int,
    line_item_date_id: int,
    line_item_id: int,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    command = DestroyLineItemCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        line_item_date_id=line_item_date_id,
        line_item_id=line_item_id,
    )

    use_case = DestroyLineItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyLineItemRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value
