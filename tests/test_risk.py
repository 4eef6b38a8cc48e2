import pytest

from app.models.schemas import AlertTier, Location, RiskBand, StationReading
from app.services.normalizer import normalize
from app.services.risk import calculate_flood_risk, risk_band, station_risk
from app.services.sample_data import get_sample_data


def make_station(alert=AlertTier.NORMAL, rate_of_rise=0.0, is_critical=False):
    return StationReading(
        station="Test",
        river="Test River",
        level=1.0,
        alert=alert,
        rate_of_rise=rate_of_rise,
        rising=rate_of_rise > 0.001,
        last_measured="2025-11-30T06:00:00Z",
        coordinates=Location(lat=7.0, lng=80.0),
        is_critical=is_critical,
    )


def test_empty_list_scores_zero():
    assert calculate_flood_risk([]) == 0


@pytest.mark.parametrize(
    "alert,expected",
    [
        (AlertTier.MAJOR_FLOOD, 40),
        (AlertTier.MINOR_FLOOD, 25),
        (AlertTier.ALERT, 10),
        (AlertTier.NORMAL, 0),
    ],
)
def test_tier_contribution(alert, expected):
    assert station_risk(make_station(alert=alert)) == expected


def test_rise_contribution():
    assert station_risk(make_station(rate_of_rise=0.02)) == 10
    assert station_risk(make_station(rate_of_rise=0.05)) == 10
    assert station_risk(make_station(rate_of_rise=0.06)) == 20
    assert station_risk(make_station(rate_of_rise=-0.5)) == 0


def test_critical_station_counts_twice():
    # (40 + 40) / (1 + 4) = 16
    assert calculate_flood_risk([make_station(alert=AlertTier.MAJOR_FLOOD, is_critical=True)]) == 16
    # 40 / 5 = 8
    assert calculate_flood_risk([make_station(alert=AlertTier.MAJOR_FLOOD)]) == 8


def test_rounds_half_up():
    # (10 + 10) / 8 = 2.5
    stations = [make_station(alert=AlertTier.ALERT) for _ in range(2)] + [make_station() for _ in range(2)]
    assert calculate_flood_risk(stations) == 3


def test_score_is_capped_at_100():
    stations = [make_station(alert=AlertTier.MAJOR_FLOOD, rate_of_rise=0.5, is_critical=True) for _ in range(50)]
    # (60 + 60) * 50 / 54 is well over 100
    assert calculate_flood_risk(stations) == 100


def test_sample_data_score_is_stable():
    # Major x5 (two rising fast, one rising), minor x3; four critical
    assert calculate_flood_risk(normalize(get_sample_data())) == 45


@pytest.mark.parametrize(
    "score,band",
    [(0, RiskBand.LOW), (24, RiskBand.LOW), (25, RiskBand.MODERATE), (50, RiskBand.HIGH), (75, RiskBand.SEVERE), (100, RiskBand.SEVERE)],
)
def test_risk_band(score, band):
    assert risk_band(score) == band
