from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from shorturl_app.services.url_service import URLService
from shorturl_app.storage.models import AccessLogEntry
from shorturl_app.storage.strategies import AccessLogStrategy
from shorturl_app.dependencies import get_url_service, get_access_log

router = APIRouter(tags=["redirect"])


@router.get("/{short_url_id}")
async def redirect_to_long_url(
    short_url_id: str,
    url_service: URLService = Depends(get_url_service),
    access_logs: AccessLogStrategy = Depends(get_access_log),
):
    """
    Permanently redirect to the original URL.

    Flow:
    1. Resolve long URL through the cache-aside pipeline (404 if unknown)
    2. Append an access log entry for analytics
    3. 301 redirect
    """
    long_url = await url_service.get_long_url_for_redirect(short_url_id)

    await access_logs.append(AccessLogEntry(short_url_id=short_url_id))

    return RedirectResponse(url=long_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
