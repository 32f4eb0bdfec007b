"""
FAQ search service.

Relevance search over a knowledge base of FAQs: TF-IDF ranking with
heuristic boosts, fuzzy matching, suggestions and filtered search,
served over a small FastAPI application.
"""

__version__ = "1.0.0"
