"""Bike-share route builder with reachability-constrained stops."""
