from fastapi import APIRouter
from app.services import snapshot
from app.models.schemas import StationReading, AlertSummary, AlertTier

router = APIRouter()


@router.get("", response_model=list[StationReading])
async def get_active_alerts():
    """Get all stations currently at Alert, Minor Flood or Major Flood level."""
    stations = await snapshot.get_snapshot()
    alerts = [s for s in stations if s.alert != AlertTier.NORMAL]

    # Most severe first
    alerts.sort(key=lambda s: s.alert.severity, reverse=True)

    return alerts


@router.get("/summary", response_model=list[AlertSummary])
async def get_alert_summary():
    """Get a summary count of stations by alert tier."""
    stations = await snapshot.get_snapshot()

    counts: dict[AlertTier, list[str]] = {
        AlertTier.MAJOR_FLOOD: [],
        AlertTier.MINOR_FLOOD: [],
        AlertTier.ALERT: [],
        AlertTier.NORMAL: [],
    }

    for station in stations:
        counts[station.alert].append(station.station)

    return [
        AlertSummary(
            alert=tier,
            count=len(station_list),
            stations=station_list,
        )
        for tier, station_list in counts.items()
        if len(station_list) > 0
    ]
