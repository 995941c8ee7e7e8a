from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse
import logging

from shorturl.api.deps import get_url_service
from shorturl.schemas.url import ErrorResponse, URLCreateRequest, URLInfoResponse
from shorturl.services.shortener import URLService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/shorten",
    response_model=URLInfoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": URLInfoResponse}, 400: {"model": ErrorResponse}},
)
def shorten_url_endpoint(url_request: URLCreateRequest, response: Response,
                         service: URLService = Depends(get_url_service)):
    db_url, created = service.create_short_url(url_request.url)
    if not created:
        response.status_code = status.HTTP_200_OK

    return URLInfoResponse(
        short_code=db_url.short_code,
        short_url=service.short_url_for(db_url.short_code),
        original_url=db_url.original_url,
        click_count=db_url.click_count,
        created_at=db_url.created_at,
    )


@router.get("/{short_code}", tags=["redirect"], responses={404: {"model": ErrorResponse}})
def redirect_to_url_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    db_url = service.resolve(short_code)
    logger.info(f"Redirect {short_code} -> {db_url.original_url[:50]}")
    return RedirectResponse(url=db_url.original_url, status_code=status.HTTP_302_FOUND)
