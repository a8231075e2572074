"""One ETL run: configuration → fetch → transform → submit."""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from poweroutages.config import settings
from poweroutages.schemas.environment import OutageEnvironment
from poweroutages.schemas.feature import FeatureCollection
from poweroutages.services import feature_builder, outage_client, submission

logger = logging.getLogger(__name__)

Sink = Callable[[FeatureCollection], Awaitable[None]]


async def run_etl(
    env: OutageEnvironment | None = None,
    sink: Sink | None = None,
    now: datetime | None = None,
) -> FeatureCollection:
    """Run a single fetch/transform/submit pass and return what was submitted.

    Errors are logged and re-raised; nothing is submitted on failure.
    """
    if env is None:
        env = settings.environment()
    if sink is None:
        sink = submission.submit

    try:
        min_customers = outage_client.parse_min_customers(env.min_customers)
        report = await outage_client.fetch_report(env)

        features = feature_builder.transform_outages(
            report.outages,
            min_customers=min_customers,
            now=now,
            tz=settings.display_timezone,
        )
        collection = feature_builder.build_collection(features)
        logger.info(
            "Built %d power outage features (%d customers affected)",
            len(collection.features), report.summary.total_customers_affected,
        )

        await sink(collection)
        return collection

    except Exception as e:
        logger.error("Error in outage ETL: %s", e)
        raise
