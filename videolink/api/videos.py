"""
Video Landing Pages — Server-rendered and client-rendered deep-link pages.

GET /v/{video_id}               Server-rendered landing page with Open Graph /
                                Twitter Card metadata and the deep-link script.
GET /v/{video_id}/player        Embeddable player referenced by twitter:player.
GET /client/v/{video_id}        Client-rendered shell; loads the JSON below
                                in the browser.
GET /api/v1/videos/{video_id}   JSON view of the catalog record.

Lookup failures never escape as stack traces or JSON errors on the HTML
routes: not-found renders the 404 page, anything else the 500 page.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from videolink.core.config import API_V1_PREFIX
from videolink.models.videos import VideoResponse
from videolink.rendering.pages import (
    render_client_page,
    render_error_page,
    render_not_found_page,
    render_player_page,
    render_video_page,
)
from videolink.services.catalog import CatalogError, CatalogService, VideoNotFoundError
from videolink.utils.formatting import format_price
from videolink.utils.links import app_url, share_url

logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def get_catalog_service() -> CatalogService:
    """FastAPI dependency providing the catalog client."""
    return CatalogService()


def _html(content: str, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return HTMLResponse(content=content, status_code=status_code, media_type=HTML_MEDIA_TYPE)


# --- Router ---

router = APIRouter(tags=["videos"])


@router.get("/v/{video_id}", response_class=HTMLResponse)
async def video_landing_page(
    video_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Server-rendered landing page for a shared video link.

    Link-preview crawlers read the Open Graph / Twitter Card tags; browsers
    run the embedded script which tries the app scheme first and falls
    back to the platform store.
    """
    try:
        video = await catalog.get_video(video_id)
        page = render_video_page(video, video_id)
    except VideoNotFoundError:
        return _html(render_not_found_page(), status.HTTP_404_NOT_FOUND)
    except CatalogError as exc:
        return _html(render_error_page(str(exc)), status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception as exc:
        logger.exception("Failed to render landing page for video %s", video_id)
        return _html(render_error_page(str(exc)), status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Rendered landing page for video %s", video_id)
    return _html(page)


@router.get("/v/{video_id}/player", response_class=HTMLResponse)
async def video_player_page(
    video_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Embeddable HTML5 player for the twitter:player card."""
    try:
        video = await catalog.get_video(video_id)
        page = render_player_page(video)
    except VideoNotFoundError:
        return _html(render_not_found_page(), status.HTTP_404_NOT_FOUND)
    except CatalogError as exc:
        return _html(render_error_page(str(exc)), status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception as exc:
        logger.exception("Failed to render player page for video %s", video_id)
        return _html(render_error_page(str(exc)), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return _html(page)


@router.get("/client/v/{video_id}", response_class=HTMLResponse)
async def video_client_page(video_id: str):
    """
    Client-rendered landing page.

    No catalog call happens here: the browser fetches the video from
    the JSON endpoint and renders the loading, error and success states.
    """
    return _html(render_client_page(video_id))


@router.get(f"{API_V1_PREFIX}/videos/{{video_id}}", response_model=VideoResponse)
async def get_video(
    video_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> VideoResponse:
    """
    JSON view of a catalog video, with the display price and app links.

    Raises:
        HTTPException(404): The catalog has no such video.
        HTTPException(502): The catalog could not be reached or answered
            with an unreadable response.
    """
    try:
        video = await catalog.get_video(video_id)
    except VideoNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found",
        ) from exc
    except CatalogError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load video",
        ) from exc

    return VideoResponse(
        id=video.id,
        caption=video.caption,
        thumbnailUrl=video.thumbnail_url,
        videoUrl=video.video_url,
        price=video.price,
        userName=video.user_name,
        formattedPrice=format_price(video.price),
        appUrl=app_url(video.id),
        shareUrl=share_url(video.id),
    )
