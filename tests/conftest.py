"""
Test configuration and fixtures
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from faq_service.app import create_app
from faq_service.config import Settings
from faq_service.domain.entities import FAQ
from faq_service.repositories.faq_repository import InMemoryFAQRepository
from faq_service.search.engine import RelevanceEngine


@pytest.fixture
def sample_faqs():
    """Small knowledge base covering two categories."""
    return [
        FAQ(
            id="1",
            question="How do I reset my password?",
            answer="Open the login page and click the forgot password link to reset it.",
            category="Account",
            tags=("password", "login"),
            views=120,
            helpful=10,
            not_helpful=1,
            created_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
        ),
        FAQ(
            id="2",
            question="How can I change my email address?",
            answer="Go to account settings and update the email field.",
            category="Account",
            tags=("email", "settings"),
            views=40,
            helpful=3,
            not_helpful=0,
            created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
        ),
        FAQ(
            id="3",
            question="What payment methods are accepted?",
            answer="We accept credit cards, PayPal and bank transfers.",
            category="Billing",
            tags=("payment", "billing"),
            views=300,
            helpful=25,
            not_helpful=2,
            created_at=datetime(2024, 6, 20, tzinfo=timezone.utc),
        ),
        FAQ(
            id="4",
            question="How do I request a refund?",
            answer="Contact billing support within 30 days of purchase to request a refund.",
            category="Billing",
            tags=("refund", "payment"),
            views=80,
            helpful=5,
            not_helpful=4,
            created_at=datetime(2024, 9, 1, tzinfo=timezone.utc),
        ),
    ]


@pytest.fixture
def engine():
    """Fresh relevance engine with default configuration."""
    return RelevanceEngine()


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, LOG_LEVEL="WARNING")


@pytest.fixture
def repository(sample_faqs):
    """In-memory FAQ store seeded with the sample FAQs."""
    return InMemoryFAQRepository(sample_faqs)


@pytest.fixture
def client(test_settings, repository):
    """Test client running the full application lifespan."""
    app = create_app(test_settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
