"""
Read-only FAQ router.

GET /api/v1/faqs
GET /api/v1/faqs/{faq_id}

Unknown ids raise FAQNotFoundException, which the application handler
turns into a 404.
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_search_service
from ..services.faq_search_service import FAQSearchService
from .models import ErrorResponse, FAQDetail, FAQListResponse, FAQResponse

router = APIRouter(prefix="/api/v1/faqs", tags=["faqs"])


@router.get("", response_model=FAQListResponse, summary="List FAQs")
async def list_faqs(service: FAQSearchService = Depends(get_search_service)):
    faqs = await service.list_faqs()
    return FAQListResponse(faqs=[FAQDetail.from_faq(faq) for faq in faqs])


@router.get(
    "/{faq_id}",
    response_model=FAQResponse,
    responses={404: {"description": "FAQ not found", "model": ErrorResponse}},
    summary="Get FAQ by id",
)
async def get_faq(faq_id: str, service: FAQSearchService = Depends(get_search_service)):
    faq = await service.get_faq(faq_id)
    return FAQResponse(faq=FAQDetail.from_faq(faq))
