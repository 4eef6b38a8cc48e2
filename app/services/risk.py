import math

from app.config import RAPID_RISE_THRESHOLD
from app.models.schemas import AlertTier, RiskBand, StationReading

TIER_RISK = {
    AlertTier.MAJOR_FLOOD: 40,
    AlertTier.MINOR_FLOOD: 25,
    AlertTier.ALERT: 10,
    AlertTier.NORMAL: 0,
}

RAPID_RISE_RISK = 20
RISE_RISK = 10

# Pads the divisor so a handful of stations can't push the score to the top
STATION_COUNT_PADDING = 4


def station_risk(station: StationReading) -> int:
    risk = TIER_RISK[station.alert]

    if station.rising and station.rate_of_rise > RAPID_RISE_THRESHOLD:
        risk += RAPID_RISE_RISK
    elif station.rising:
        risk += RISE_RISK

    return risk


def calculate_flood_risk(stations: list[StationReading]) -> int:
    """Reduce a station list to an overall flood risk score between 0 and 100.

    Critical stations have their contribution counted a second time.
    """
    if not stations:
        return 0

    total_risk = 0
    critical_risk = 0
    for station in stations:
        risk = station_risk(station)
        if station.is_critical:
            # Counted once more here, so critical stations weigh 2x overall
            critical_risk += risk
        total_risk += risk

    overall = min(100, (total_risk + critical_risk) / (len(stations) + STATION_COUNT_PADDING))
    # Half up, not banker's rounding
    return int(math.floor(overall + 0.5))


def risk_band(score: int) -> RiskBand:
    if score >= 75:
        return RiskBand.SEVERE
    elif score >= 50:
        return RiskBand.HIGH
    elif score >= 25:
        return RiskBand.MODERATE
    else:
        return RiskBand.LOW
