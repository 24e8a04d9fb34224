from typing import Optional

from fastapi import APIRouter, Depends, Query
from shorturl_app.schemas.url import AnalyticsResponse
from shorturl_app.services.analytics_service import AnalyticsService
from shorturl_app.services.url_service import URLService
from shorturl_app.dependencies import get_analytics_service, get_url_service

router = APIRouter(tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(
    short_url_id: str = Query(..., alias="shortUrlId"),
    time_frame: Optional[str] = Query(None, alias="timeFrame"),
    url_service: URLService = Depends(get_url_service),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
):
    """
    Access count for a short URL over "24h", "7d" or "all" (default).

    The identifier must belong to a URL record (404 otherwise); the lookup
    goes through the same cache-aside path as redirects.
    """
    await url_service.get_long_url_for_redirect(short_url_id)
    return await analytics_service.generate_analytics(short_url_id, time_frame)
