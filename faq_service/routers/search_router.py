"""
FAQ search API router.

GET /api/v1/search?q={query}&category={c}&tags={a,b}&page={n}&limit={n}
GET /api/v1/search/suggestions?q={partial}
"""

from datetime import datetime
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from ..dependencies import get_search_service
from ..domain.exceptions import ValidationException
from ..metrics import suggestion_requests_total
from ..services.faq_search_service import FAQSearchService
from .models import ErrorResponse, SearchResponse, SearchResultItem, SuggestionsResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.get(
    "",
    response_model=SearchResponse,
    responses={
        400: {"description": "Invalid request", "model": ErrorResponse},
        500: {"description": "Search failed", "model": ErrorResponse},
    },
    summary="Search FAQs",
    description="""
    Rank FAQs by TF-IDF relevance with question, exact phrase, category,
    tag and popularity boosts, then filter and paginate.

    **Request Parameters:**
    - `q`: Search query (min 3 characters after trimming)
    - `category`: Category filter, `all` to disable (default)
    - `tags`: Comma-separated tags, FAQs need any one of them
    - `date_from` / `date_to`: Inclusive creation date range
    - `page`: Page number (default 1)
    - `limit`: Results per page (default 20)
    """,
)
async def search_faqs(
    q: str = Query(..., max_length=500, description="Search query"),
    category: str = Query("all", description="Category filter"),
    tags: Optional[str] = Query(None, description="Comma-separated tag filter"),
    date_from: Optional[datetime] = Query(None, description="Created on or after"),
    date_to: Optional[datetime] = Query(None, description="Created on or before"),
    page: int = Query(1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Results per page"),
    service: FAQSearchService = Depends(get_search_service),
) -> SearchResponse:
    """
    Search FAQs.

    Raises:
        HTTPException: 400 for invalid parameters, 500 on unexpected errors
    """
    tag_list = tags.split(",") if tags else []

    try:
        result = await service.search(
            q,
            category=category,
            tags=tag_list,
            date_from=date_from,
            date_to=date_to,
            page=page,
            limit=limit,
        )
    except ValidationException as e:
        logger.warning("Invalid search request", error=e.message, **e.details)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "validation_error", "message": e.message, "details": e.details},
        )
    except Exception as e:
        logger.error(f"Unexpected error during search: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "search_failed",
                "message": "Search service temporarily unavailable",
                "details": {},
            },
        )

    precision = service.settings.SCORE_PRECISION
    return SearchResponse(
        query=result.query,
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        results=[SearchResultItem.from_faq(faq, precision) for faq in result.results],
    )


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    summary="Autocomplete suggestions",
    description="Questions and tags containing the partial query (min 2 characters)",
)
async def search_suggestions(
    q: str = Query("", max_length=200, description="Partial query"),
    service: FAQSearchService = Depends(get_search_service),
):
    """Get autocomplete suggestions; failures return an empty list with 500."""
    try:
        suggestions = await service.suggestions(q)
    except Exception as e:
        logger.error(f"Error getting suggestions: {e}", exc_info=True)
        suggestion_requests_total.labels(status="error").inc()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"suggestions": []},
        )

    return SuggestionsResponse(suggestions=suggestions)
