"""Pollers for periodic data reloads."""

from veloroute.adapters.pollers.station_poller import StationPoller

__all__ = ["StationPoller"]
