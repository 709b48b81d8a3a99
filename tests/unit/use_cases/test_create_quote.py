"""Unit tests for CreateQuote use case

Tests cover:
- Successful creation publishes exactly one QuoteCreated
- Validation failure publishes nothing and echoes the input
- A broken broadcaster never fails the mutation
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.quotes.create_quote import CreateQuote
from src.app.use_cases.quotes.dtos import CreateQuoteCommandDTO
from src.domain.errors import ValidationError
from src.domain.quote_events import QuoteCreated


@pytest.fixture
def mock_quote_repo():
    return MagicMock()


@pytest.fixture
def create_quote_use_case(mock_uow, mock_quote_repo, mock_broadcaster, tenant_lock):
    return CreateQuote(
        uow=mock_uow,
        quote_repo=mock_quote_repo,
        broadcaster=mock_broadcaster,
        tenant_lock=tenant_lock,
    )


@pytest.mark.asyncio
class TestCreateQuote:
    async def test_create_quote_success(
        self, create_quote_use_case, mock_quote_repo, mock_uow, mock_broadcaster, make_quote
    ):
        """
        Given: A valid name
        When: CreateQuote is executed
        Then: Quote is committed and QuoteCreated is published once
        """
        # Arrange
        mock_quote_repo.create = AsyncMock(return_value=make_quote(quote_id=1, company_id=1))
        command = CreateQuoteCommandDTO(company_id=1, name="First quote")

        # Act
        result = await create_quote_use_case.execute(command)

        # Assert
        assert result.is_ok()
        assert result.value.id == 1
        assert result.value.name == "First quote"
        mock_uow.commit.assert_awaited_once()

        mock_broadcaster.publish.assert_called_once()
        company_id, event = mock_broadcaster.publish.call_args.args
        assert company_id == 1
        assert isinstance(event, QuoteCreated)
        assert event.quote_id == 1

    async def test_quote_is_built_for_actor_company(
        self, create_quote_use_case, mock_quote_repo, make_quote
    ):
        mock_quote_repo.create = AsyncMock(return_value=make_quote(company_id=4))

        await create_quote_use_case.execute(CreateQuoteCommandDTO(company_id=4, name="Q"))

        built = mock_quote_repo.create.call_args.args[0]
        assert built.company_id == 4
        assert built.name == "Q"

    async def test_blank_name_returns_validation_error(
        self, create_quote_use_case, mock_quote_repo, mock_uow, mock_broadcaster
    ):
        """
        Given: A blank name
        When: CreateQuote is executed
        Then: VALIDATION_ERROR with the rejected input, nothing committed or published
        """
        mock_quote_repo.create = AsyncMock(
            side_effect=ValidationError("Name can't be blank", field="name")
        )

        result = await create_quote_use_case.execute(CreateQuoteCommandDTO(company_id=1, name=""))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details["field"] == "name"
        assert result.error.details["input"] == {"name": ""}
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_awaited_once()
        mock_broadcaster.publish.assert_not_called()

    async def test_commit_failure_publishes_nothing(
        self, create_quote_use_case, mock_quote_repo, mock_uow, mock_broadcaster, make_quote
    ):
        mock_quote_repo.create = AsyncMock(return_value=make_quote())
        mock_uow.commit.side_effect = RuntimeError("database is locked")

        result = await create_quote_use_case.execute(CreateQuoteCommandDTO(company_id=1, name="Q"))

        assert result.is_err()
        assert result.error.code == "CREATE_QUOTE_FAILED"
        mock_broadcaster.publish.assert_not_called()

    async def test_broadcast_failure_does_not_fail_create(
        self, create_quote_use_case, mock_quote_repo, mock_broadcaster, make_quote
    ):
        mock_quote_repo.create = AsyncMock(return_value=make_quote())
        mock_broadcaster.publish.side_effect = RuntimeError("subscriber gone")

        result = await create_quote_use_case.execute(CreateQuoteCommandDTO(company_id=1, name="Q"))

        assert result.is_ok()
