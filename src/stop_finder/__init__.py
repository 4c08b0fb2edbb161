"""Nearby Stop Finder

Prompts for a UK postcode, resolves it with postcodes.io and lists the
closest bus, coach and tram stops from the TfL StopPoint API.
"""

__version__ = "0.1.0"

from .core.models import Coordinate, StopPoint
from .core.pipeline import NearbyStopsPipeline

__all__ = ["Coordinate", "NearbyStopsPipeline", "StopPoint"]
