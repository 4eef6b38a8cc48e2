import logging
import math
from datetime import datetime, timezone
from typing import Any

from app.config import (
    RISING_NOISE_THRESHOLD,
    SRI_LANKA_CENTROID,
    UNKNOWN_RIVER,
    UNKNOWN_STATION,
)
from app.models.schemas import AlertTier, Location, StationReading
from app.services.registry import CRITICAL_STATIONS, get_thresholds, is_critical

logger = logging.getLogger(__name__)

# Upstream providers disagree on field names, so each canonical field is
# resolved from its own ordered list of candidates.
STATION_NAME_FIELDS = ("station_name", "station", "name", "Station", "gauging_station_name")
RIVER_FIELDS = ("river_basin", "river", "basin", "River", "river_name")
LEVEL_FIELDS = ("level_m", "level", "water_level", "Level", "current_water_level")
TIMESTAMP_FIELDS = ("measured_at", "timestamp", "time", "Timestamp", "last_measured", "lastMeasured")
RATE_FIELDS = ("rate_of_rise", "rate", "change_rate", "rateOfRise")
LAT_FIELDS = ("latitude", "lat")
LNG_FIELDS = ("longitude", "lng")

PAYLOAD_KEYS = ("stations", "data")


def first_present(raw: dict, fields: tuple[str, ...]) -> Any:
    """Return the value of the first candidate field that is set.

    None and blank strings count as missing; 0 does not.
    """
    for field in fields:
        value = raw.get(field)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def extract_station_objects(payload: Any) -> list[dict]:
    """Pull the station list out of a bare array, {stations: [...]} or {data: [...]}."""
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = []
        for key in PAYLOAD_KEYS:
            if isinstance(payload.get(key), list):
                items = payload[key]
                break
    else:
        items = []
    return [item for item in items if isinstance(item, dict)]


def resolve_station_name(raw: dict) -> str:
    name = first_present(raw, STATION_NAME_FIELDS)
    return str(name).strip() if name is not None else UNKNOWN_STATION


def resolve_river(raw: dict, station_name: str) -> str:
    river = first_present(raw, RIVER_FIELDS)
    if river is not None:
        return str(river)
    critical = CRITICAL_STATIONS.get(station_name)
    if critical:
        return critical.river
    return UNKNOWN_RIVER


def resolve_level(raw: dict) -> float | None:
    return to_float(first_present(raw, LEVEL_FIELDS))


def resolve_timestamp(raw: dict) -> str:
    timestamp = first_present(raw, TIMESTAMP_FIELDS)
    if timestamp is None:
        return datetime.now(timezone.utc).isoformat()
    return str(timestamp)


def resolve_rate_of_rise(raw: dict) -> float:
    rate = to_float(first_present(raw, RATE_FIELDS))
    return rate if rate is not None else 0.0


def resolve_coordinates(raw: dict, station_name: str) -> Location:
    """Payload lat/lng, then the critical station table, then the island centroid."""
    source = raw
    nested = raw.get("coordinates")
    if isinstance(nested, dict):
        source = {**nested, **raw}
    lat = to_float(first_present(source, LAT_FIELDS))
    lng = to_float(first_present(source, LNG_FIELDS))
    if lat is not None and lng is not None:
        return Location(lat=lat, lng=lng)

    critical = CRITICAL_STATIONS.get(station_name)
    if critical:
        return Location(lat=critical.lat, lng=critical.lng)

    lat, lng = SRI_LANKA_CENTROID
    return Location(lat=lat, lng=lng)


def classify_alert(station_name: str, level: float) -> AlertTier:
    thresholds = get_thresholds(station_name)

    if level >= thresholds.major:
        return AlertTier.MAJOR_FLOOD
    elif level >= thresholds.minor:
        return AlertTier.MINOR_FLOOD
    elif level >= thresholds.alert:
        return AlertTier.ALERT
    else:
        return AlertTier.NORMAL


def normalize_station(raw: dict) -> StationReading | None:
    """Map one raw station object to a StationReading, or None if it has no usable level."""
    station_name = resolve_station_name(raw)
    level = resolve_level(raw)
    if level is None:
        logger.debug("Dropping %s: no numeric water level", station_name)
        return None

    rate_of_rise = resolve_rate_of_rise(raw)
    return StationReading(
        station=station_name,
        river=resolve_river(raw, station_name),
        level=level,
        alert=classify_alert(station_name, level),
        rate_of_rise=rate_of_rise,
        rising=rate_of_rise > RISING_NOISE_THRESHOLD,
        last_measured=resolve_timestamp(raw),
        coordinates=resolve_coordinates(raw, station_name),
        is_critical=is_critical(station_name),
    )


def normalize(raw_stations: Any) -> list[StationReading]:
    readings = []
    for raw in extract_station_objects(raw_stations):
        reading = normalize_station(raw)
        if reading is not None:
            readings.append(reading)
    return readings
