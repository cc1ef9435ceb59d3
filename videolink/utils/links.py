"""
URL builders for a video identifier.

The identifier is opaque and only ever inserted as a single, percent-encoded
path segment.
"""

from urllib.parse import quote

from videolink.core.config import (
    ANDROID_PACKAGE,
    APP_SCHEME,
    CATALOG_API_URL,
    PUBLIC_BASE_URL,
)


def _segment(video_id: str) -> str:
    return quote(video_id, safe="")


def catalog_video_url(video_id: str) -> str:
    """Catalog API endpoint for a single video record."""
    return f"{CATALOG_API_URL}/api/v1/videos/{_segment(video_id)}"


def app_url(video_id: str) -> str:
    """Custom-scheme deep link handled by the native app."""
    return f"{APP_SCHEME}://video/{_segment(video_id)}"


def share_url(video_id: str) -> str:
    """Canonical public landing page URL (og:url)."""
    return f"{PUBLIC_BASE_URL}/v/{_segment(video_id)}"


def player_url(video_id: str) -> str:
    """Embeddable player page referenced by twitter:player."""
    return f"{PUBLIC_BASE_URL}/v/{_segment(video_id)}/player"


def android_app_url(video_id: str) -> str:
    """Android app-indexing URI for <link rel="alternate">."""
    return f"android-app://{ANDROID_PACKAGE}/{APP_SCHEME}/video/{_segment(video_id)}"
