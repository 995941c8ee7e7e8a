from fastapi import APIRouter, Depends
from typing import List
import logging

from shorturl.api.deps import get_url_service
from shorturl.schemas.url import ErrorResponse, MessageResponse, URLRecordResponse, URLStatsResponse
from shorturl.services.shortener import URLService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/urls", response_model=List[URLRecordResponse])
def list_urls_endpoint(service: URLService = Depends(get_url_service)):
    """All shortened URLs, newest first."""
    return service.list_urls()


@router.get("/stats/{short_code}", response_model=URLStatsResponse,
            responses={404: {"model": ErrorResponse}})
def get_url_statistics_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    return service.get_url_stats(short_code)


@router.delete("/urls/{short_code}", response_model=MessageResponse,
               responses={404: {"model": ErrorResponse}})
def delete_url_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    service.delete_url(short_code)
    return MessageResponse(message="URL deleted successfully")
