"""APScheduler setup for the periodic power outage ETL run."""

import asyncio
import logging

from apscheduler.schedulers.background import BackgroundScheduler

from poweroutages.config import settings

logger = logging.getLogger(__name__)

_scheduler: BackgroundScheduler | None = None


def _run_outage_etl():
    from poweroutages.services.outage_etl import run_etl
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(run_etl())
    except Exception as e:
        logger.error("Outage ETL job failed: %s", e)
    finally:
        loop.close()


def start_scheduler():
    global _scheduler
    _scheduler = BackgroundScheduler()

    _scheduler.add_job(
        _run_outage_etl,
        "interval",
        minutes=settings.ingest_interval,
        id="outage_etl",
        name="Power outage ETL",
        max_instances=1,
    )

    _scheduler.start()
    logger.info("Scheduler started: outage ETL every %d min", settings.ingest_interval)


def stop_scheduler():
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
        _scheduler = None
