"""Static station tables shared by the normalizer and the risk scorer."""
from types import MappingProxyType

from app.models.schemas import CriticalStation, Thresholds

DEFAULT_THRESHOLD_KEY = "default"

CRITICAL_STATIONS = MappingProxyType({
    "Nagalagam Street": CriticalStation(river="Kelani Ganga", lat=6.96027, lng=79.87858, priority=1),
    "Peradeniya": CriticalStation(river="Mahaweli Ganga", lat=7.26417, lng=80.59362, priority=1),
    "Moragaswewa": CriticalStation(river="Deduru Oya", lat=7.73187, lng=80.24296, priority=1),
    "Thanthirimale": CriticalStation(river="Malwathu Oya", lat=8.58076, lng=80.28401, priority=1),
})

# Level cutoffs in meters
ALERT_THRESHOLDS = MappingProxyType({
    "Nagalagam Street": Thresholds(major=2.4, minor=2.0, alert=1.6),
    "Peradeniya": Thresholds(major=8.0, minor=6.5, alert=5.5),
    "Moragaswewa": Thresholds(major=7.5, minor=6.0, alert=5.0),
    "Thanthirimale": Thresholds(major=9.0, minor=7.5, alert=6.5),
    "Hanwella": Thresholds(major=9.0, minor=7.5, alert=6.5),
    "Glencourse": Thresholds(major=15.0, minor=13.5, alert=12.0),
    "Rathnapura": Thresholds(major=7.0, minor=5.5, alert=4.5),
    "Kalawellawa": Thresholds(major=8.0, minor=6.5, alert=5.5),
    DEFAULT_THRESHOLD_KEY: Thresholds(major=10.0, minor=7.5, alert=5.0),
})


def get_thresholds(station_name: str) -> Thresholds:
    return ALERT_THRESHOLDS.get(station_name, ALERT_THRESHOLDS[DEFAULT_THRESHOLD_KEY])


def is_critical(station_name: str) -> bool:
    return station_name in CRITICAL_STATIONS
