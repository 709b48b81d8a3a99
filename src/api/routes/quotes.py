"""Quote API Routes

FastAPI routes for the quote list and quote detail. Writes go through the
quote mutation use cases, which announce changes on the company channel.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.line_item_date_repository import SqlAlchemyLineItemDateRepository
from src.adapter.repositories.line_item_repository import SqlAlchemyLineItemRepository
from src.adapter.repositories.quote_repository import SqlAlchemyQuoteRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, error_status
from src.api.schemas.quote_request import QuoteRequestSchema
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.app.services.tenant_lock import TenantLock
from src.app.use_cases.quotes import (
    CreateQuote,
    UpdateQuote,
    DestroyQuote,
    ListQuotes,
    GetQuote,
    CreateQuoteCommandDTO,
    UpdateQuoteCommandDTO,
    DestroyQuoteCommandDTO,
    QuoteResponseDTO,
    QuoteListResponseDTO,
    QuoteDetailDTO,
    DestroyedResponseDTO,
)
from src.app.use_cases.tenants.dtos import ActorDTO
from src.depends import get_broadcaster, get_current_actor, get_session, get_tenant_lock

router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.get("", response_model=QuoteListResponseDTO, status_code=status.HTTP_200_OK)
async def list_quotes(
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
):
    """
    List the actor's company quotes, newest first.
    """
    use_case = ListQuotes(SqlAlchemyQuoteRepository(session))
    result = await use_case.execute(actor.company_id)
    return result.value


@router.post(
    "",
    response_model=QuoteResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Name can't be blank",
                            "details": {"field": "name", "input": {"name": ""}}
                        }
                    }
                }
            }
        }
    }
)
async def create_quote(
    request: QuoteRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    broadcaster: QuoteBroadcaster = Depends(get_broadcaster),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Create a quote for the actor's company.

    Subscribers of the company's quote stream receive a `created` event.

    **Returns:**
    - 201: Quote created
    - 422: Name missing or blank
    """
    uow = SqlAlchemyUnitOfWork(session)
    quote_repo = SqlAlchemyQuoteRepository(session)

    command = CreateQuoteCommandDTO(company_id=actor.company_id, **request.model_dump())

    use_case = CreateQuote(uow, quote_repo, broadcaster, tenant_lock)
    result = await use_case.execute(command)

    # Handle errors
    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.get("/{quote_id}", response_model=QuoteDetailDTO, status_code=status.HTTP_200_OK)
async def get_quote(
    quote_id: int,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
):
    """
    Quote with its line item dates (ascending), line items and totals.

    **Returns:**
    - 200: Quote detail
    - 404: Quote not found in the actor's company
    """
    use_case = GetQuote(
        SqlAlchemyQuoteRepository(session),
        SqlAlchemyLineItemDateRepository(session),
        SqlAlchemyLineItemRepository(session),
    )
    result = await use_case.execute(actor.company_id, quote_id)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.patch("/{quote_id}", response_model=QuoteResponseDTO, status_code=status.HTTP_200_OK)
async def update_quote(
    quote_id: int,
    request: QuoteRequestSchema,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    broadcaster: QuoteBroadcaster = Depends(get_broadcaster),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Rename a quote. Subscribers receive an `updated` event.

    **Returns:**
    - 200: Quote updated
    - 404: Quote not found in the actor's company
    - 422: Name blank
    """
    uow = SqlAlchemyUnitOfWork(session)
    quote_repo = SqlAlchemyQuoteRepository(session)

    command = UpdateQuoteCommandDTO(
        company_id=actor.company_id,
        quote_id=quote_id,
        **request.model_dump(exclude_unset=True),
    )

    use_case = UpdateQuote(uow, quote_repo, broadcaster, tenant_lock)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value


@router.delete("/{quote_id}", response_model=DestroyedResponseDTO, status_code=status.HTTP_200_OK)
async def destroy_quote(
    quote_id: int,
    actor: ActorDTO = Depends(get_current_actor),
    session: AsyncSession = Depends(get_session),
    broadcaster: QuoteBroadcaster = Depends(get_broadcaster),
    tenant_lock: TenantLock = Depends(get_tenant_lock),
):
    """
    Destroy a quote with its dates and items. Subscribers receive a
    `destroyed` event.

    **Returns:**
    - 200: Quote destroyed
    - 404: Quote not found (or already destroyed)
    """
    uow = SqlAlchemyUnitOfWork(session)
    quote_repo = SqlAlchemyQuoteRepository(session)

    command = DestroyQuoteCommandDTO(company_id=actor.company_id, quote_id=quote_id)

    use_case = DestroyQuote(uow, quote_repo, broadcaster, tenant_lock)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error, status_code=error_status(result.error))

    return result.value
