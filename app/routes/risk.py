from datetime import datetime, timezone

from fastapi import APIRouter
from app.services import risk, snapshot
from app.models.schemas import RiskReport

router = APIRouter()


@router.get("", response_model=RiskReport)
async def get_flood_risk():
    """Get the overall flood risk score (0-100) for the latest readings."""
    stations = await snapshot.get_snapshot()
    score = risk.calculate_flood_risk(stations)

    return RiskReport(
        score=score,
        band=risk.risk_band(score),
        station_count=len(stations),
        critical_count=sum(1 for s in stations if s.is_critical),
        generated_at=datetime.now(timezone.utc).isoformat(),
    )
