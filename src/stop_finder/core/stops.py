"""Nearby stop lookup via the TfL StopPoint API."""

import logging

import pydantic

from .config import StopFinderSettings
from .exceptions import MalformedResponseError, ValidationError
from .fetcher import HttpFetcher
from .models import Coordinate, QueryParameter, StopPoint, StopPointSearchResponse
from .urls import build_url

logger = logging.getLogger(__name__)


class StopPointLocator:
    """Finds public bus, coach and tram stops around a coordinate."""

    def __init__(self, fetcher: HttpFetcher, settings: StopFinderSettings):
        """Initialize the locator.

        Args:
            fetcher: HTTP fetcher used for the StopPoint request
            settings: Source of the origin, radius, stop types and credentials
        """
        self.fetcher = fetcher
        self.settings = settings

    def _query_parameters(self, coordinate: Coordinate) -> list[QueryParameter]:
        return [
            QueryParameter(name="stopTypes", value=self.settings.stop_types),
            QueryParameter(name="lat", value=coordinate.latitude),
            QueryParameter(name="lon", value=coordinate.longitude),
            QueryParameter(name="radius", value=self.settings.search_radius),
            QueryParameter(name="app_id", value=self.settings.app_id),
            QueryParameter(name="app_key", value=self.settings.app_key),
        ]

    async def nearby(self, coordinate: Coordinate, max_count: int) -> list[StopPoint]:
        """Get up to ``max_count`` stops near ``coordinate``.

        Stops are returned in the order the service lists them.

        Raises:
            ValidationError: If ``max_count`` is negative
            TransportError: If the request cannot complete
            HttpStatusError: If the search does not return 200
            MalformedResponseError: If the body has no ``stopPoints`` list
        """
        if max_count < 0:
            raise ValidationError(f"max_count cannot be negative: {max_count}")

        url = build_url(
            self.settings.tfl_base_url, "StopPoint", self._query_parameters(coordinate)
        )
        body = await self.fetcher.fetch(url)

        try:
            payload = StopPointSearchResponse.model_validate_json(body)
        except pydantic.ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected StopPoint response: {str(e)}"
            ) from e

        stop_points = [entry.to_stop_point() for entry in payload.stop_points]
        logger.debug(f"Service returned {len(stop_points)} stops near {coordinate}")
        return stop_points[:max_count]
