"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .services.faq_search_service import FAQSearchService

# Global service instance (set by main app)
_search_service: Optional["FAQSearchService"] = None


def set_search_service(service: Optional["FAQSearchService"]) -> None:
    """
    Set the global search service instance.

    Called by the app lifespan during startup and shutdown.
    """
    global _search_service
    _search_service = service


async def get_search_service() -> "FAQSearchService":
    """
    Get search service instance for dependency injection.

    Raises:
        RuntimeError: If the application has not finished starting
    """
    if _search_service is None:
        raise RuntimeError("Search service not initialized")
    return _search_service
