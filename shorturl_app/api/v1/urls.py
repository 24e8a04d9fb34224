from fastapi import APIRouter, Depends, status
from shorturl_app.schemas.url import ShortenRequest, ShortenResponse
from shorturl_app.services.url_service import URLService
from shorturl_app.dependencies import get_url_service

router = APIRouter(tags=["urls"])


@router.post("/shorten", response_model=ShortenResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    payload: ShortenRequest,
    url_service: URLService = Depends(get_url_service)
):
    """Shorten a long URL. Re-shortening a known URL returns the same identifier."""
    short_url = await url_service.create_short_url(payload.long_url)
    return ShortenResponse(short_url=short_url)
