"""
API response models for the FAQ search endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.entities import FAQ


class SearchResultItem(BaseModel):
    """Single ranked FAQ in a search response."""

    faq_id: str = Field(..., description="FAQ identifier")
    question: str = Field(..., description="Question text")
    answer: str = Field(..., description="Answer text")
    category: Optional[str] = Field(None, description="FAQ category")
    tags: List[str] = Field(default_factory=list, description="FAQ tags")
    relevance_score: Optional[str] = Field(
        None,
        description="Relevance score rounded to fixed precision; only comparable within one query",
        examples=["7.1234"],
    )
    views: int = Field(0, description="View count")
    helpful: int = Field(0, description="Helpful votes")

    @classmethod
    def from_faq(cls, faq: FAQ, precision: int) -> "SearchResultItem":
        score = None
        if faq.relevance_score is not None:
            score = f"{faq.relevance_score:.{precision}f}"
        return cls(
            faq_id=faq.id,
            question=faq.question,
            answer=faq.answer,
            category=faq.category,
            tags=list(faq.tags),
            relevance_score=score,
            views=faq.views,
            helpful=faq.helpful,
        )


class SearchResponse(BaseModel):
    """Paginated search response."""

    status: str = Field(default="success", description="Request status")
    query: str = Field(..., description="Original search query")
    total: int = Field(..., description="Total ranked results across all pages")
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="Number of pages")
    results: List[SearchResultItem] = Field(..., description="Results on this page")


class SuggestionsResponse(BaseModel):
    """Autocomplete suggestions response."""

    suggestions: List[str] = Field(default_factory=list, description="Suggested strings")


class FAQDetail(BaseModel):
    """Stored FAQ as returned by the read endpoints."""

    id: str
    question: str
    answer: str
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    views: int = 0
    helpful: int = 0
    not_helpful: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_faq(cls, faq: FAQ) -> "FAQDetail":
        return cls(
            id=faq.id,
            question=faq.question,
            answer=faq.answer,
            category=faq.category,
            tags=list(faq.tags),
            views=faq.views,
            helpful=faq.helpful,
            not_helpful=faq.not_helpful,
            created_at=faq.created_at,
        )


class FAQResponse(BaseModel):
    status: str = "success"
    faq: FAQDetail


class FAQListResponse(BaseModel):
    status: str = "success"
    faqs: List[FAQDetail]


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict, description="Additional error details")
