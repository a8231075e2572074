from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_URL = "https://utils.tak.nz/power-outages/outages"


class OutageEnvironment(BaseModel):
    """ETL input configuration, keyed by the names operators set on the layer."""

    model_config = ConfigDict(populate_by_name=True)

    api_url: str = Field(default=DEFAULT_API_URL, alias="API_URL", description="Power Outages API URL")
    min_customers: str = Field(
        default="0", alias="Min Customers", description="Minimum customers affected to display"
    )
    utility_filter: str | None = Field(
        default=None,
        alias="Utility Filter",
        description="Filter by utility ID (e.g., ORION_NZ, POWERCO_NZ)",
    )
    outage_type: str | None = Field(
        default=None, alias="Outage Type", description="Filter by outage type (planned, unplanned)"
    )
