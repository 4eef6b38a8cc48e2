"""Built-in snapshot served when no upstream source responds (offline/demo use)."""
import copy

SAMPLE_STATIONS = (
    {"station": "Nagalagam Street", "river": "Kelani Ganga", "level": 2.56, "rate_of_rise": 0.015,
     "latitude": 6.96027, "longitude": 79.87858},
    {"station": "Peradeniya", "river": "Mahaweli Ganga", "level": 10.56, "rate_of_rise": 0.595,
     "latitude": 7.26417, "longitude": 80.59362},
    {"station": "Moragaswewa", "river": "Deduru Oya", "level": 8.33, "rate_of_rise": 0.051,
     "latitude": 7.73187, "longitude": 80.24296},
    {"station": "Thanthirimale", "river": "Malwathu Oya", "level": 10.64, "rate_of_rise": -0.033,
     "latitude": 8.58076, "longitude": 80.28401},
    {"station": "Hanwella", "river": "Kelani Ganga", "level": 9.69, "rate_of_rise": -0.087,
     "latitude": 6.91049, "longitude": 80.08134},
    {"station": "Glencourse", "river": "Kelani Ganga", "level": 13.58, "rate_of_rise": -0.190,
     "latitude": 6.97574, "longitude": 80.18661},
    {"station": "Rathnapura", "river": "Kalu Ganga", "level": 5.82, "rate_of_rise": -0.059,
     "latitude": 6.68986, "longitude": 80.38028},
    {"station": "Kalawellawa", "river": "Kalu Ganga", "level": 7.38, "rate_of_rise": -0.051,
     "latitude": 6.63151, "longitude": 80.16073},
)


def get_sample_data() -> list[dict]:
    # Copies, so callers can't alter the snapshot for the next cycle
    return copy.deepcopy(list(SAMPLE_STATIONS))
