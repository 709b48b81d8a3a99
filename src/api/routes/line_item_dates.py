"""Line Item Date API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.line_item_date_repository import SqlAlchemyLineItemDateRepository
from src.adapter.repositories.quote_repository import SqlAlchemyQuoteRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, error_status
from src.api.schemas.quote_request import LineItemDateRequestSchema
from src.app.services.tenant_lock import TenantLock
from src.app.use_cases.quotes import (
    CreateLineItemDate,
    UpdateLineItemDate,
    DestroyLineItemDate,
    GetPreviousLineItemDate,
    CreateLineItemDateCommandDTO,
    UpdateLineItemDateCommandDTO,
    DestroyLineItemDateCommandDTO,
    LineItemDateResponseDTO,
    DestroyedResponseDTO,
)
from src.app.use_cases.tenants.dtos import ActorDTO
from src.depends import get_current_actor, get_session, get_tenant_lock

router = APIRouter(prefix="/quotes/{quote_id}/line_item_dates", tags=["Line Item Dates"])


@router.post(
    "",
    response_model=LineItemDateResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Date already used in this quote",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DATE_ALREADY_EXISTS",
                            "message": "Date 2024-01-01 has already been taken for this quote"
                        }
                    }
                }
            }
        }
    }
)
async def create_line_item_date(
    quote_id: int,
    request: LineItemDateRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Add a date to a quote.

    **Returns:**
    - 201: Date created
    - 404: Quote not found in the actor's company
    - 409: The quote already has this date
    - 422: Date missing or malformed
    """
    command = CreateLineItemDateCommandDTO(
        company_id=actor.company_id, quote_id=quote_id, **request.model_dump()
    )

    use_case = CreateLineItemDate(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyQuoteRepository(session),
        SqlAlchemyLineItemDateRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.patch(
    "/{line_item_date_id}",
    response_model=LineItemDateResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_line_item_date(
    quote_id: int,
    line_item_date_id: int,
    request: LineItemDateRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Move a date. The new date must not be used by another date of the quote.
    """
    command = UpdateLineItemDateCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        line_item_date_id=line_item_date_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateLineItemDate(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyQuoteRepository(session),
        SqlAlchemyLineItemDateRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.delete(
    "/{line_item_date_id}",
    response_model=DestroyedResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def destroy_line_item_date(
    quote_id: int,
    line_item_date_id: int,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """Destroy a date and its line items."""
    command = DestroyLineItemDateCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        line_item_date_id=line_item_date_id,
    )

    use_case = DestroyLineItemDate(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyLineItemDateRepository(session),
        tenant_lock,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.get(
    "/{line_item_date_id}/previous",
    response_model=Optional[LineItemDateResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_previous_line_item_date(
    quote_id: int,
    line_item_date_id: int,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
):
    """Nearest earlier date of the same quote, or null for the earliest."""
    use_case = GetPreviousLineItemDate(SqlAlchemyLineItemDateRepository(session))
    result = await use_case.execute(actor.company_id, quote_id, line_item_date_id)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value
