from fastapi import APIRouter, HTTPException, Query
from app.services import history
from app.models.schemas import StationReading

router = APIRouter()


@router.get("/{station_name}", response_model=list[StationReading])
async def get_station_history(station_name: str, hours: int = Query(24, ge=1, le=240)):
    """Get recent readings for a station from the archived snapshots.

    Snapshots are roughly 3 hours apart; results are newest first.
    """
    readings = await history.fetch_historical_data(station_name, hours=hours)
    if not readings:
        raise HTTPException(status_code=404, detail=f"No history found for '{station_name}'")

    return readings
