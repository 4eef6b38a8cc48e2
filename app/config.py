PRIMARY_SOURCE_URL = "https://raw.githubusercontent.com/nuuuwan/lk_irrigation/main/data/rwlds/latest.json"
SECONDARY_SOURCE_URL = "https://raw.githubusercontent.com/nuuuwan/lk_dmc_vis/main/data/latest.json"
HISTORY_LISTING_URL = "https://api.github.com/repos/nuuuwan/lk_irrigation/contents/data/rwlds"

REQUEST_TIMEOUT = 30.0

# Snapshot lifetime for the API layer - matches the 3 minute dashboard refresh
SNAPSHOT_TTL_SECONDS = 180

# Hours between files in the lk_irrigation archive
HISTORY_INTERVAL_HOURS = 3

# Rate of rise (m/h) below which a station is not considered rising
RISING_NOISE_THRESHOLD = 0.001
RAPID_RISE_THRESHOLD = 0.05

# Geographic centre of Sri Lanka
SRI_LANKA_CENTROID = (7.8731, 80.7718)

UNKNOWN_STATION = "Unknown Station"
UNKNOWN_RIVER = "Unknown River"
