"""Serverless entry point: one ETL run per invocation."""

import asyncio
import logging

from poweroutages.config import settings
from poweroutages.services.outage_etl import run_etl

logging.basicConfig(
    format='%(asctime)s - %(levelname)s - %(message)s - %(filename)s',
    level=settings.log_level.upper(),
)
logger = logging.getLogger(__name__)


def lambda_handler(event: dict | None = None, context=None) -> dict:
    """Run the outage ETL once.

    Args:
        event (dict): Optional overrides keyed by the layer configuration
            names (``API_URL``, ``Min Customers``, ``Utility Filter``,
            ``Outage Type``).

    Returns:
        dict: Status code and number of features submitted.
    """
    env = settings.environment(event or {})
    collection = asyncio.run(run_etl(env))
    return {
        "statusCode": 200,
        "features": len(collection.features),
    }
