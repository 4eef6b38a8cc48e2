from pydantic import BaseModel, ConfigDict
from enum import Enum


class AlertTier(str, Enum):
    MAJOR_FLOOD = "Major Flood"
    MINOR_FLOOD = "Minor Flood"
    ALERT = "Alert"
    NORMAL = "Normal"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    AlertTier.NORMAL: 0,
    AlertTier.ALERT: 1,
    AlertTier.MINOR_FLOOD: 2,
    AlertTier.MAJOR_FLOOD: 3,
}


class RiskBand(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    SEVERE = "SEVERE"


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class CriticalStation(BaseModel):
    model_config = ConfigDict(frozen=True)

    river: str
    lat: float
    lng: float
    priority: int


class Thresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    major: float
    minor: float
    alert: float


class StationReading(BaseModel):
    station: str
    river: str
    level: float
    alert: AlertTier
    rate_of_rise: float
    rising: bool
    last_measured: str
    coordinates: Location
    is_critical: bool


class AlertSummary(BaseModel):
    alert: AlertTier
    count: int
    stations: list[str]


class RiskReport(BaseModel):
    score: int
    band: RiskBand
    station_count: int
    critical_count: int
    generated_at: str
