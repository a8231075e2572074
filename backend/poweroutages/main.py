import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from poweroutages.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)


# Strong references so startup tasks are not collected mid-run
_background_tasks: set[asyncio.Task] = set()


@asynccontextmanager
async def lifespan(app: FastAPI):
    from poweroutages.tasks.scheduler import start_scheduler, stop_scheduler
    start_scheduler()
    # Run once on startup rather than waiting a full interval
    task = asyncio.create_task(_initial_run())
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    yield
    stop_scheduler()


async def _initial_run():
    logger = logging.getLogger(__name__)
    try:
        from poweroutages.services.outage_etl import run_etl
        await run_etl()
    except Exception as e:
        logger.error("Initial outage ETL run failed: %s", e)


app = FastAPI(
    title="etl-poweroutages",
    description="NZ power outages as incident features",
    version="0.1.0",
    lifespan=lifespan,
)

from poweroutages.routers import etl  # noqa: E402

app.include_router(etl.router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok"}
