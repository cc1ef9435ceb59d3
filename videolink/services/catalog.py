"""
Catalog API Client — Look up a single product video.

Performs one GET against the catalog's /api/v1/videos/{id} endpoint and
returns a parsed VideoRecord. Failures are raised as VideoNotFoundError
(upstream answered with a non-success status) or CatalogError (network
failure, timeout, unreadable body). There is no retry: a failed attempt
is reported to the caller straight away.
"""

import logging

import httpx
from pydantic import ValidationError

from videolink.core.config import CATALOG_STRICT_ERRORS, CATALOG_TIMEOUT
from videolink.models.videos import VideoRecord
from videolink.utils.links import catalog_video_url

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the catalog lookup fails for a reason other than not-found."""

    pass


class VideoNotFoundError(CatalogError):
    """Raised when the catalog has no record for the requested video."""

    def __init__(self, video_id: str, status_code: int) -> None:
        super().__init__(f"Video {video_id} not found (catalog status {status_code})")
        self.video_id = video_id
        self.status_code = status_code


class CatalogService:
    """Async read-only client for catalog video records."""

    def __init__(
        self,
        timeout: float = CATALOG_TIMEOUT,
        strict_errors: bool = CATALOG_STRICT_ERRORS,
    ) -> None:
        self._timeout = timeout
        self._strict_errors = strict_errors

    async def get_video(self, video_id: str) -> VideoRecord:
        """
        Fetch a video record by identifier.

        Args:
            video_id: Opaque identifier taken from the request path.

        Returns:
            The parsed VideoRecord. If the payload has no id, the
            requested identifier is used.

        Raises:
            VideoNotFoundError: The catalog answered with a non-2xx status
                (only 4xx when strict error mode is enabled).
            CatalogError: Network failure, timeout, non-JSON body, or a
                record that fails validation.
        """
        url = catalog_video_url(video_id)
        logger.debug("Fetching catalog video %s from %s", video_id, url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    url, headers={"Accept": "application/json"}
                )
        except httpx.TimeoutException as exc:
            logger.error("Catalog API timeout for video %s", video_id)
            raise CatalogError("The catalog service timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("Catalog API request error for video %s: %s", video_id, exc)
            raise CatalogError(f"Could not reach the catalog service: {exc}") from exc

        if not response.is_success:
            if self._strict_errors and response.status_code >= 500:
                logger.error(
                    "Catalog API HTTP error %d for video %s",
                    response.status_code, video_id,
                )
                raise CatalogError(
                    f"The catalog service returned HTTP {response.status_code}"
                )
            logger.warning(
                "Catalog API returned %d for video %s",
                response.status_code, video_id,
            )
            raise VideoNotFoundError(video_id, response.status_code)

        return self._parse_record(response, video_id)

    @staticmethod
    def _parse_record(response: httpx.Response, video_id: str) -> VideoRecord:
        """Decode the JSON body into a VideoRecord."""
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Catalog API returned a non-JSON body for video %s", video_id)
            raise CatalogError("The catalog service returned an invalid response") from exc

        if not isinstance(data, dict):
            logger.error(
                "Catalog API returned %s instead of an object for video %s",
                type(data).__name__, video_id,
            )
            raise CatalogError("The catalog service returned an invalid response")

        try:
            record = VideoRecord.model_validate(data)
        except ValidationError as exc:
            logger.error("Catalog record for video %s failed validation: %s", video_id, exc)
            raise CatalogError("The catalog service returned an invalid video record") from exc

        if not record.id:
            record = record.model_copy(update={"id": video_id})
        return record
