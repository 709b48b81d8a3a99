from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import UniquenessError

# SQLite names the table in its unique-violation message; PostgreSQL names the index
DUPLICATE_DATE_MARKERS = (
    "UNIQUE constraint failed: line_item_dates",
    "ix_line_item_dates_date_quote_id",
)


def is_duplicate_date(error: IntegrityError) -> bool:
    """True only for a violation of the (quote_id, date) unique index"""
    message = str(error.orig)
    return any(marker in message for marker in DUPLICATE_DATE_MARKERS)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over a single AsyncSession

    A duplicate (quote_id, date) that only surfaces at commit is rolled back
    and reported as UniquenessError, same as one caught before the write.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if is_duplicate_date(e):
                raise UniquenessError(
                    "Date has already been taken for this quote", field="date"
                ) from e
            raise

    async def rollback(self):
        await self.session.rollback()
