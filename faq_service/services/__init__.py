"""
Service layer - Business logic orchestration.
"""
from .faq_search_service import FAQSearchService, SearchPage

__all__ = ["FAQSearchService", "SearchPage"]
