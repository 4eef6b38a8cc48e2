from typing import Literal

from fastapi import APIRouter, HTTPException
from app.services import river_data, snapshot
from app.models.schemas import StationReading

router = APIRouter()


@router.get("", response_model=list[StationReading])
async def list_stations(view: Literal["all", "critical", "risk"] = "all", river: str | None = None):
    """Get the latest normalized reading for every station.

    `view=critical` limits the list to critical stations, `view=risk` to the
    other stations above normal level. `river` matches part of the river name.
    """
    stations = await snapshot.get_snapshot()
    return river_data.filter_stations(stations, view=view, river=river)


@router.get("/{name}", response_model=StationReading)
async def get_station(name: str):
    """Get the latest reading for a specific station."""
    stations = await snapshot.get_snapshot()
    station = river_data.find_station(stations, name)
    if not station:
        raise HTTPException(status_code=404, detail=f"Station '{name}' not found")

    return station
