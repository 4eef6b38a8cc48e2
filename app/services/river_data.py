import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

import httpx

from app.config import PRIMARY_SOURCE_URL, REQUEST_TIMEOUT, SECONDARY_SOURCE_URL
from app.models.schemas import StationReading
from app.services.normalizer import extract_station_objects, normalize
from app.services.sample_data import get_sample_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def http_client(client: httpx.AsyncClient | None = None):
    """Yield the caller's client, or a short-lived one owned by this call."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as owned:
        yield owned


async def fetch_json(client: httpx.AsyncClient, url: str) -> dict | list | None:
    """Single GET attempt. Any HTTP, transport or decode failure gives None."""
    try:
        response = await client.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        logger.warning(f"Fetch failed for {url}: {e}")
        return None
    except ValueError as e:
        logger.warning(f"Invalid JSON from {url}: {e}")
        return None


async def fetch_from_source(client: httpx.AsyncClient, url: str) -> list[dict]:
    return extract_station_objects(await fetch_json(client, url))


async def fetch_river_data(client: httpx.AsyncClient | None = None) -> list[dict]:
    """Get raw station objects: primary source, then secondary, then built-in sample.

    Each source is tried once. Recovery from an outage is left to the next
    refresh cycle, so there is no retry or backoff here.
    """
    async with http_client(client) as session:
        sources: list[tuple[str, Callable[[], Awaitable[list[dict]]]]] = [
            ("primary", lambda: fetch_from_source(session, PRIMARY_SOURCE_URL)),
            ("secondary", lambda: fetch_from_source(session, SECONDARY_SOURCE_URL)),
        ]
        for label, attempt in sources:
            stations = await attempt()
            if stations:
                logger.info(f"Loaded {len(stations)} stations from {label} source")
                return stations
            logger.warning(f"The {label} source returned no stations")

    logger.warning("All sources unavailable, using sample data")
    return get_sample_data()


async def get_stations(client: httpx.AsyncClient | None = None) -> list[StationReading]:
    """Fetch and normalize the current station list."""
    return normalize(await fetch_river_data(client))


def find_station(stations: list[StationReading], name: str) -> StationReading | None:
    for station in stations:
        if station.station.lower() == name.lower():
            return station
    return None


def filter_stations(
    stations: list[StationReading], view: str = "all", river: str | None = None
) -> list[StationReading]:
    """Select stations for a dashboard view: all, critical, or other at-risk stations."""
    if view == "critical":
        selected = [s for s in stations if s.is_critical]
    elif view == "risk":
        selected = [s for s in stations if not s.is_critical and s.alert.severity > 0]
    else:
        selected = list(stations)

    if river:
        selected = [s for s in selected if river.lower() in s.river.lower()]
    return selected
