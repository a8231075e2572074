"""Power outage aggregation API client.

Builds the filtered request URL from the ETL environment, performs a single
GET and validates the body into an OutageReport. No retries: a failed fetch
fails the run and the scheduler decides what happens next.
"""

import logging
import math

import httpx
from pydantic import ValidationError

from poweroutages.config import settings
from poweroutages.errors import ConfigurationError, ParseError, TransportError
from poweroutages.schemas.environment import OutageEnvironment
from poweroutages.schemas.outage import OutageReport

logger = logging.getLogger(__name__)


def parse_min_customers(raw: str | None) -> int | float:
    """Parse the ``Min Customers`` setting. Blank means no threshold."""
    text = (raw or "").strip()
    if not text:
        return 0
    try:
        value = float(text)
    except ValueError:
        raise ConfigurationError(f"Invalid minimum customers value: {raw!r}") from None
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"Invalid minimum customers value: {raw!r}")
    return int(value) if value.is_integer() else value


def build_url(env: OutageEnvironment) -> httpx.URL:
    """Append the configured filters to the API URL as query parameters."""
    min_customers = parse_min_customers(env.min_customers)

    params: dict[str, str] = {}
    if min_customers > 0:
        params["minCustomers"] = str(min_customers)
    if env.utility_filter:
        params["utility"] = env.utility_filter
    if env.outage_type:
        params["outageType"] = env.outage_type

    url = httpx.URL(env.api_url)
    if params:
        url = url.copy_merge_params(params)
    return url


async def fetch_report(env: OutageEnvironment) -> OutageReport:
    """Fetch and validate the current outage report."""
    url = build_url(env)
    logger.info("Fetching power outages from %s", url)

    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            resp = await client.get(url)
    except httpx.RequestError as e:
        raise TransportError(None, str(e) or type(e).__name__, url=str(url)) from e

    if not resp.is_success:
        raise TransportError(resp.status_code, resp.reason_phrase, url=str(url))

    try:
        data = resp.json()
    except ValueError as e:
        raise ParseError(f"Response body is not valid JSON: {e}") from e

    try:
        report = OutageReport.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"Response does not match the outage report shape ({e.error_count()} errors): {e}"
        ) from e

    logger.info(
        "Fetched %d power outages (%d customers affected)",
        len(report.outages), report.summary.total_customers_affected,
    )
    return report
