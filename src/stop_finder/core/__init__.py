"""Core nearby stop lookup functionality."""

from .config import StopFinderSettings
from .exceptions import (
    HttpStatusError,
    InvalidUrlError,
    MalformedResponseError,
    StopFinderError,
    TransportError,
    ValidationError,
)
from .fetcher import HttpFetcher
from .geocoder import PostcodeGeocoder
from .models import Coordinate, QueryParameter, StopPoint
from .pipeline import NearbyStopsPipeline, normalize_postcode
from .presenter import present_stop_points
from .reader import ConsoleLineReader
from .stops import StopPointLocator
from .urls import build_url

__all__ = [
    "ConsoleLineReader",
    "Coordinate",
    "HttpFetcher",
    "NearbyStopsPipeline",
    "PostcodeGeocoder",
    "QueryParameter",
    "StopFinderSettings",
    "StopPoint",
    "StopPointLocator",
    "build_url",
    "normalize_postcode",
    "present_stop_points",
    "StopFinderError",
    "TransportError",
    "HttpStatusError",
    "MalformedResponseError",
    "InvalidUrlError",
    "ValidationError",
]
