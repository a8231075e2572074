"""Upstream outage report shapes.

Attribute names are snake_case; the API's camelCase keys are the aliases.
Unknown keys are kept so a record can be embedded verbatim downstream.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Utility(_ApiModel):
    name: str = Field(description="Utility company name")
    id: str = Field(description="Utility company ID")


class Coordinates(_ApiModel):
    latitude: float = Field(description="Latitude")
    longitude: float = Field(description="Longitude")


class OutageLocation(_ApiModel):
    coordinates: Coordinates
    # A missing list reads as empty
    areas: list[str] = Field(default=[], description="Affected areas (treated as empty when absent)")
    streets: list[str] = Field(default=[], description="Affected streets (treated as empty when absent)")


class OutageMetadata(_ApiModel):
    feeder: str | None = Field(default=None, description="Feeder name")
    last_update: str | None = Field(default=None, description="Last update timestamp")
    aggregation_type: str | None = Field(default=None, description="Aggregation type")
    outage_count: int | None = Field(default=None, description="Number of aggregated outages")


class OutageRecord(_ApiModel):
    outage_id: str = Field(description="Unique outage identifier")
    utility: Utility
    region: str = Field(description="NZ region name")
    region_code: str = Field(description="ISO 3166-2:NZ region code")
    outage_start: str = Field(description="Outage start timestamp")
    estimated_restoration: str | None = Field(default=None, description="Estimated restoration time")
    cause: str = Field(description="Cause of outage")
    status: str = Field(description="Outage status (active, resolved)")
    outage_type: str | None = Field(default=None, description="Type of outage (planned, unplanned)")
    customers_affected: int = Field(description="Number of customers affected")
    crew_status: str | None = Field(default=None, description="Crew status information")
    location: OutageLocation
    metadata: OutageMetadata | None = None


class ReportSummary(_ApiModel):
    total_utilities: int
    total_outages: int
    total_customers_affected: int


class UtilityStatus(_ApiModel):
    name: str
    id: str
    status: str
    outage_count: int


class OutageReport(_ApiModel):
    version: str
    timestamp: str
    summary: ReportSummary
    utilities: list[UtilityStatus]
    outages: list[OutageRecord]
