"""JSON schemas the hosting layer uses to render configuration and records."""

from poweroutages.schemas.environment import OutageEnvironment
from poweroutages.schemas.outage import OutageRecord

SCHEMA_TYPES = ("input", "output")
FLOWS = ("incoming", "outgoing")


def get_schema(schema_type: str = "input", flow: str = "incoming") -> dict:
    if schema_type not in SCHEMA_TYPES:
        raise ValueError(f"Unknown schema type: {schema_type}")
    if flow not in FLOWS:
        raise ValueError(f"Unknown flow: {flow}")

    # Only incoming data is supported
    if flow == "outgoing":
        return {"type": "object", "properties": {}}
    if schema_type == "input":
        return OutageEnvironment.model_json_schema(by_alias=True)
    return OutageRecord.model_json_schema(by_alias=True)
