"""
API routers for FAQ search service endpoints.
"""

from . import faqs_router, health_router, search_router

__all__ = ["search_router", "faqs_router", "health_router"]
