import logging
import math

import httpx

from app.config import HISTORY_INTERVAL_HOURS, HISTORY_LISTING_URL
from app.models.schemas import StationReading
from app.services.normalizer import normalize
from app.services.river_data import fetch_json, http_client

logger = logging.getLogger(__name__)

# Copy of the newest dated file, kept alongside the archive
LATEST_FILENAME = "latest.json"


def select_recent_files(listing: list[dict], hours: int) -> list[dict]:
    """Newest dated JSON files first, enough of them to cover the requested window."""
    json_files = [
        f for f in listing
        if isinstance(f, dict)
        and str(f.get("name") or "").endswith(".json")
        and f.get("name") != LATEST_FILENAME
        and f.get("download_url")
    ]
    # Names are dated, so sorting them sorts by time
    json_files.sort(key=lambda f: f["name"], reverse=True)
    return json_files[:math.ceil(hours / HISTORY_INTERVAL_HOURS)]


async def fetch_historical_data(
    station_name: str, hours: int = 24, client: httpx.AsyncClient | None = None
) -> list[StationReading]:
    """Get recent readings for one station, newest first.

    Files that can't be fetched or don't mention the station are skipped.
    """
    async with http_client(client) as session:
        listing = await fetch_json(session, HISTORY_LISTING_URL)
        if not isinstance(listing, list):
            logger.warning("History listing unavailable")
            return []

        history = []
        for file in select_recent_files(listing, hours):
            data = await fetch_json(session, file["download_url"])
            if not data:
                continue
            for reading in normalize(data):
                if reading.station == station_name:
                    history.append(reading)
                    break
    return history
