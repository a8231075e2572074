from typing import Any, Literal

from pydantic import BaseModel


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: list[float]  # [longitude, latitude]


class IncidentProperties(BaseModel):
    callsign: str
    type: str
    icon: str
    time: str | None = None
    start: str | None = None
    stale: str | None = None
    metadata: dict[str, Any] = {}
    remarks: str = ""


class IncidentFeature(BaseModel):
    id: str
    type: Literal["Feature"] = "Feature"
    properties: IncidentProperties
    geometry: PointGeometry


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[IncidentFeature] = []
