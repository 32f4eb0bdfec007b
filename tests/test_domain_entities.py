"""
Unit tests for domain entities.
"""

from datetime import datetime, timedelta, timezone

import pytest

from faq_service.domain.entities import FAQ, parse_timestamp
from faq_service.domain.exceptions import DataIntegrityException


class TestParseTimestamp:
    """Test timestamp parsing."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert parse_timestamp(value) is None

    def test_datetime_passthrough(self):
        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert parse_timestamp(moment) is moment

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-06-20T10:30:00Z") == datetime(
            2024, 6, 20, 10, 30, tzinfo=timezone.utc
        )

    def test_offset(self):
        parsed = parse_timestamp("2024-06-20T10:30:00+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_date(self):
        assert parse_timestamp("2024-06-20") == datetime(2024, 6, 20)

    @pytest.mark.parametrize("value", ["yesterday", 12345])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)


class TestFAQ:
    """Test FAQ entity."""

    def test_defaults(self):
        faq = FAQ(id="1", question="Q", answer="A")

        assert faq.category is None
        assert faq.tags == ()
        assert (faq.views, faq.helpful, faq.not_helpful) == (0, 0, 0)
        assert faq.created_at is None
        assert faq.relevance_score is None

    def test_immutable(self):
        faq = FAQ(id="1", question="Q", answer="A")

        with pytest.raises(AttributeError):
            faq.relevance_score = 1.0

    def test_searchable_text(self):
        faq = FAQ(id="1", question="Reset?", answer="Click the link.", tags=("password", "login"))

        assert faq.searchable_text == "Reset? Click the link. password login"

    def test_with_score_copies(self):
        faq = FAQ(id="1", question="Q", answer="A", views=3)

        scored = faq.with_score(4.5)

        assert scored.relevance_score == 4.5
        assert scored.views == 3
        assert faq.relevance_score is None

    def test_to_dict(self):
        faq = FAQ(
            id="1",
            question="Q",
            answer="A",
            tags=("a",),
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        data = faq.to_dict()

        assert data["tags"] == ["a"]
        assert data["created_at"] == "2024-01-01T00:00:00+00:00"
        assert data["relevance_score"] is None


class TestFAQFromDict:
    """Test building FAQs from stored payloads."""

    def test_camel_case_keys(self):
        faq = FAQ.from_dict(
            {
                "id": 7,
                "question": "How do refunds work?",
                "answer": "Contact support.",
                "category": "Billing",
                "tags": ["refund"],
                "views": 10,
                "helpful": 2,
                "notHelpful": 1,
                "createdAt": "2024-02-01T00:00:00Z",
            }
        )

        assert faq.id == "7"
        assert faq.tags == ("refund",)
        assert faq.not_helpful == 1
        assert faq.created_at == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_snake_case_keys(self):
        faq = FAQ.from_dict(
            {
                "id": "a",
                "question": "Q",
                "answer": "A",
                "not_helpful": 4,
                "created_at": "2024-02-01",
            }
        )

        assert faq.not_helpful == 4
        assert faq.created_at == datetime(2024, 2, 1)

    def test_missing_optional_fields(self):
        faq = FAQ.from_dict({"id": "a", "question": "Q", "answer": "A", "category": ""})

        assert faq.category is None
        assert faq.tags == ()
        assert faq.views == 0

    @pytest.mark.parametrize("missing", ["id", "question", "answer"])
    def test_missing_required(self, missing):
        data = {"id": "a", "question": "Q", "answer": "A"}
        del data[missing]

        with pytest.raises(DataIntegrityException) as exc_info:
            FAQ.from_dict(data)

        assert missing in exc_info.value.message

    def test_string_tags_rejected(self):
        with pytest.raises(DataIntegrityException):
            FAQ.from_dict({"id": "a", "question": "Q", "answer": "A", "tags": "refund"})

    def test_invalid_date(self):
        with pytest.raises(DataIntegrityException):
            FAQ.from_dict({"id": "a", "question": "Q", "answer": "A", "createdAt": "soon"})

    def test_invalid_counter(self):
        with pytest.raises(DataIntegrityException):
            FAQ.from_dict({"id": "a", "question": "Q", "answer": "A", "views": "many"})
