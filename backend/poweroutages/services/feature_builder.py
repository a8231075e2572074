"""Outage record → incident feature mapping.

Each retained OutageRecord becomes one point feature carrying a callsign,
start/stale instants, the original record as metadata, and a multi-line
remarks block written in NZ local time.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from poweroutages.schemas.feature import FeatureCollection, IncidentFeature, IncidentProperties, PointGeometry
from poweroutages.schemas.outage import OutageRecord

logger = logging.getLogger(__name__)

INCIDENT_TYPE = "a-f-X-i"
ICON = "bb4df0a6-ca8d-4ba8-bb9e-3deb97ff015e:Incidents/INC.04.PowerOutage"
ID_PREFIX = "poweroutage-"
DEFAULT_TIMEZONE = "Pacific/Auckland"
TIMEZONE_SUFFIX = "NZT"

# Outages without a restoration estimate expire one hour after generation
DEFAULT_STALE = timedelta(hours=1)


def parse_timestamp(val: str | None) -> datetime | None:
    """Parse an ISO-ish timestamp. Naive values are taken as UTC."""
    if not val:
        return None
    try:
        dt = datetime.fromisoformat(str(val).replace("Z", "+00:00"))
    except (ValueError, TypeError):
        logger.warning("Unparseable outage timestamp: %r", val)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso(dt: datetime | None) -> str | None:
    """UTC instant with millisecond precision, e.g. 2024-01-15T10:30:00.000Z."""
    if dt is None:
        return None
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_local_time(dt: datetime, tz: str = DEFAULT_TIMEZONE) -> str:
    """en-NZ date-time in the given zone, e.g. ``5/01/2024, 11:30:00 pm``."""
    local = dt.astimezone(ZoneInfo(tz))
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return (
        f"{local.day}/{local.month:02d}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def _local_or_raw(raw: str | None, tz: str) -> str:
    dt = parse_timestamp(raw)
    if dt is None:
        return str(raw)
    return f"{format_local_time(dt, tz)} {TIMEZONE_SUFFIX}"


def build_callsign(record: OutageRecord) -> str:
    areas = record.location.areas
    place = areas[0] if areas and areas[0] else record.region
    return f"{record.utility.name} - {place}"


def _feeder(record: OutageRecord) -> str | None:
    return record.metadata.feeder if record.metadata else None


def _aggregation_type(record: OutageRecord) -> str | None:
    return record.metadata.aggregation_type if record.metadata else None


def _aggregated_count(record: OutageRecord) -> str:
    count = record.metadata.outage_count if record.metadata else None
    return str(count) if count is not None else "unknown"


_Line = tuple[Callable[[OutageRecord], bool], Callable[[OutageRecord, str], str]]

# Remarks lines in display order: (include?, render)
_REMARK_LINES: list[_Line] = [
    (lambda r: True, lambda r, tz: f"Utility: {r.utility.name}"),
    (lambda r: True, lambda r, tz: f"Customers Affected: {r.customers_affected}"),
    (lambda r: True, lambda r, tz: f"Status: {r.status}"),
    (lambda r: True, lambda r, tz: f"Cause: {r.cause}"),
    (lambda r: True, lambda r, tz: f"Region: {r.region}"),
    (lambda r: True, lambda r, tz: f"Areas: {', '.join(r.location.areas) or 'Unknown'}"),
    (lambda r: bool(r.location.streets), lambda r, tz: f"Streets: {', '.join(r.location.streets)}"),
    (lambda r: True, lambda r, tz: f"Outage Start: {_local_or_raw(r.outage_start, tz)}"),
    (
        lambda r: bool(r.estimated_restoration),
        lambda r, tz: f"Estimated Restoration: {_local_or_raw(r.estimated_restoration, tz)}",
    ),
    (lambda r: bool(r.outage_type), lambda r, tz: f"Type: {r.outage_type}"),
    (lambda r: bool(r.crew_status), lambda r, tz: f"Crew Status: {r.crew_status}"),
    (lambda r: bool(_feeder(r)), lambda r, tz: f"Feeder: {_feeder(r)}"),
    (lambda r: bool(_aggregation_type(r)), lambda r, tz: f"Aggregated: {_aggregated_count(r)} outages"),
]


def build_remarks(record: OutageRecord, tz: str = DEFAULT_TIMEZONE) -> str:
    return "\n".join(render(record, tz) for include, render in _REMARK_LINES if include(record))


def compute_stale(record: OutageRecord, now: datetime) -> datetime | None:
    """Estimated restoration when known, otherwise one hour after ``now``."""
    if record.estimated_restoration:
        return parse_timestamp(record.estimated_restoration)
    return now + DEFAULT_STALE


def build_feature(record: OutageRecord, now: datetime, tz: str = DEFAULT_TIMEZONE) -> IncidentFeature:
    coords = record.location.coordinates
    start = to_iso(parse_timestamp(record.outage_start))

    return IncidentFeature(
        id=f"{ID_PREFIX}{record.outage_id}",
        properties=IncidentProperties(
            callsign=build_callsign(record),
            type=INCIDENT_TYPE,
            icon=ICON,
            time=start,
            start=start,
            stale=to_iso(compute_stale(record, now)),
            metadata=record.model_dump(mode="json", by_alias=True, exclude_unset=True),
            remarks=build_remarks(record, tz),
        ),
        geometry=PointGeometry(coordinates=[coords.longitude, coords.latitude]),
    )


def transform_outages(
    outages: Iterable[OutageRecord],
    min_customers: int | float = 0,
    now: datetime | None = None,
    tz: str = DEFAULT_TIMEZONE,
) -> list[IncidentFeature]:
    """Map outages to features in input order, dropping any under the customer threshold."""
    if now is None:
        now = datetime.now(timezone.utc)

    features = []
    dropped = 0
    for record in outages:
        if record.customers_affected < min_customers:
            dropped += 1
            continue
        features.append(build_feature(record, now, tz))

    if dropped:
        logger.debug("Dropped %d outages below %s customers", dropped, min_customers)
    return features


def build_collection(features: list[IncidentFeature]) -> FeatureCollection:
    return FeatureCollection(features=features)
