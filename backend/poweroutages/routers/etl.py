from fastapi import APIRouter, HTTPException, Query

from poweroutages.errors import ConfigurationError, ParseError, TransportError
from poweroutages.schemas.feature import FeatureCollection
from poweroutages.services.etl_schema import get_schema
from poweroutages.services.outage_etl import run_etl

router = APIRouter(prefix="/etl", tags=["etl"])


@router.get("/schema")
async def etl_schema(
    type: str = Query("input", pattern="^(input|output)$"),
    flow: str = Query("incoming", pattern="^(incoming|outgoing)$"),
):
    """JSON schema for the ETL configuration (input) or an outage record (output)."""
    return get_schema(type, flow)


@router.post("/run", response_model=FeatureCollection)
async def trigger_run():
    """Run one fetch/transform/submit pass and return the submitted collection."""
    try:
        return await run_etl()
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (TransportError, ParseError) as e:
        raise HTTPException(status_code=502, detail=str(e))
