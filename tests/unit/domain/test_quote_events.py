"""Unit tests for quote list events and actor display names"""

from src.domain.quote_events import QuoteCreated, QuoteDestroyed, QuoteEventType, QuoteUpdated
from src.domain.user import User, display_name


class TestQuoteEvents:
    def test_created_message_carries_quote_snapshot(self, make_quote):
        event = QuoteCreated.from_quote(make_quote(quote_id=7, company_id=3))

        message = event.to_message()

        assert event.event_type == QuoteEventType.CREATED
        assert event.company_id == 3
        assert message["event"] == "created"
        assert message["quote_id"] == 7
        assert message["quote"]["name"] == "First quote"
        assert message["quote"]["created_at"] == "2024-01-01T09:00:00"

    def test_snapshot_is_detached_from_entity(self, make_quote):
        quote = make_quote()
        event = QuoteUpdated.from_quote(quote)

        quote.name = "Renamed later"

        assert event.quote.name == "First quote"
        assert event.to_message()["event"] == "updated"

    def test_destroyed_message_has_only_id(self):
        event = QuoteDestroyed(company_id=1, quote_id=9)

        assert event.to_message() == {"event": "destroyed", "quote_id": 9}


class TestDisplayName:
    def test_local_part_capitalized(self):
        assert display_name("accountant@kpmg.com") == "Accountant"
        assert display_name("eavesdropper@kpmg.com") == "Eavesdropper"

    def test_user_name_property(self):
        user = User(company_id=1, email="manager@pwc.com")

        assert user.name == "Manager"
