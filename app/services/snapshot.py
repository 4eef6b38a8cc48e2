from cachetools import TTLCache

from app.config import SNAPSHOT_TTL_SECONDS
from app.models.schemas import StationReading
from app.services import river_data

SNAPSHOT_KEY = "stations"

# Holds the latest station list between refresh cycles
cache = TTLCache(maxsize=1, ttl=SNAPSHOT_TTL_SECONDS)


async def get_snapshot() -> list[StationReading]:
    if SNAPSHOT_KEY in cache:
        return cache[SNAPSHOT_KEY]
    stations = await river_data.get_stations()
    cache[SNAPSHOT_KEY] = stations
    return stations


async def refresh_snapshot() -> list[StationReading]:
    """Drop the held snapshot and fetch a new one."""
    cache.clear()
    return await get_snapshot()
