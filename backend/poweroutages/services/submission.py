"""Hands a finished FeatureCollection to the downstream layer.

POSTs to SUBMIT_URL when configured; otherwise only logs (local runs).
"""

import logging

import httpx

from poweroutages.config import settings
from poweroutages.errors import TransportError
from poweroutages.schemas.feature import FeatureCollection

logger = logging.getLogger(__name__)


async def submit(collection: FeatureCollection) -> None:
    if not settings.submit_url:
        logger.info("No submit URL configured; %d features not submitted", len(collection.features))
        return

    headers = {}
    if settings.submit_token:
        headers["Authorization"] = f"Bearer {settings.submit_token}"

    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            resp = await client.post(
                settings.submit_url,
                json=collection.model_dump(mode="json"),
                headers=headers,
            )
    except httpx.RequestError as e:
        raise TransportError(None, str(e) or type(e).__name__, url=settings.submit_url, action="submit features") from e

    if not resp.is_success:
        raise TransportError(
            resp.status_code, resp.reason_phrase, url=settings.submit_url, action="submit features"
        )
    logger.info("Submitted %d features to %s", len(collection.features), settings.submit_url)
