"""Constants for the Mapbox API adapters.

API Documentation:
- Isochrone: https://docs.mapbox.com/api/navigation/isochrone/
- Directions: https://docs.mapbox.com/api/navigation/directions/
"""

MAPBOX_BASE_URL = "https://api.mapbox.com"
ISOCHRONE_PATH = "/isochrone/v1/{profile}/{longitude},{latitude}"
DIRECTIONS_PATH = (
    "/directions/v5/{profile}/{origin_longitude},{origin_latitude};"
    "{destination_longitude},{destination_latitude}"
)

DEFAULT_PROFILE = "mapbox/cycling"

# Shared rate limiter key for every Mapbox endpoint
MAPBOX_API_NAME = "mapbox"

# The isochrone API accepts at most 4 contours of at most 60 minutes each
MAX_CONTOURS = 4
MAX_CONTOUR_MINUTES = 60
