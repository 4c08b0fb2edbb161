"""Postcode to coordinate lookup via postcodes.io."""

import logging

import pydantic

from .config import POSTCODES_BASE_URL
from .exceptions import MalformedResponseError
from .fetcher import HttpFetcher
from .models import Coordinate, PostcodeLookupResponse
from .urls import build_url

logger = logging.getLogger(__name__)


class PostcodeGeocoder:
    """Resolves a normalized postcode to a coordinate."""

    def __init__(self, fetcher: HttpFetcher, base_url: str = POSTCODES_BASE_URL):
        self.fetcher = fetcher
        self.base_url = base_url

    async def resolve(self, postcode: str) -> Coordinate:
        """Look up the coordinate of ``postcode``.

        The postcode is placed into the request path verbatim; callers are
        expected to have stripped whitespace already.

        Raises:
            TransportError: If the request cannot complete
            HttpStatusError: If the lookup does not return 200
            MalformedResponseError: If the body lacks a numeric location
        """
        url = build_url(self.base_url, f"postcodes/{postcode}")
        body = await self.fetcher.fetch(url)

        try:
            payload = PostcodeLookupResponse.model_validate_json(body)
        except pydantic.ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected postcode lookup response for {postcode}: {str(e)}"
            ) from e

        coordinate = Coordinate(
            latitude=payload.result.latitude, longitude=payload.result.longitude
        )
        logger.debug(f"Resolved {postcode} to {coordinate}")
        return coordinate
