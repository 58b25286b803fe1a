"""Station feed adapters."""

from veloroute.adapters.station_feeds.http_station_feed import HttpStationFeed

PUBLIBIKE_FEED_NAME = "publibike"
PARTNER_FEED_NAME = "partner"

__all__ = ["PARTNER_FEED_NAME", "PUBLIBIKE_FEED_NAME", "HttpStationFeed"]
