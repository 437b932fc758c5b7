"""Geocoding data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCandidate:
    latitude: float
    longitude: float
    name: str
    admin1: str | None = None
