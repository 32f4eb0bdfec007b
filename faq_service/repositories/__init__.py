"""
Repository layer - Data access abstractions.
"""
from .faq_repository import IFAQRepository, InMemoryFAQRepository

__all__ = ["IFAQRepository", "InMemoryFAQRepository"]
