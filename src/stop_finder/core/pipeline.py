"""Prompt, geocode, locate and present: the nearby stops run."""

import logging
import re
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Protocol

from .geocoder import PostcodeGeocoder
from .models import StopPoint
from .presenter import present_stop_points
from .stops import StopPointLocator

logger = logging.getLogger(__name__)

POSTCODE_PROMPT = "\nEnter your postcode: "
DEFAULT_RESULT_COUNT = 5

_WHITESPACE = re.compile(r"\s")


class LineReader(Protocol):
    async def ask(self, message: str) -> str: ...


def normalize_postcode(postcode: str) -> str:
    """Remove every whitespace character from ``postcode``."""
    return _WHITESPACE.sub("", postcode)


class NearbyStopsPipeline:
    """Runs the nearby stops lookup once.

    Each stage awaits the previous one and any error propagates to the
    caller untouched, so nothing is presented after a failure.
    """

    def __init__(
        self,
        line_reader: AbstractAsyncContextManager[LineReader],
        geocoder: PostcodeGeocoder,
        locator: StopPointLocator,
        presenter: Callable[[Sequence[StopPoint]], None] = present_stop_points,
        result_count: int = DEFAULT_RESULT_COUNT,
    ) -> None:
        self.line_reader = line_reader
        self.geocoder = geocoder
        self.locator = locator
        self.presenter = presenter
        self.result_count = result_count

    async def prompt_for_postcode(self) -> str:
        """Acquire the line reader, ask once and release it."""
        async with self.line_reader as reader:
            return await reader.ask(POSTCODE_PROMPT)

    async def run(self) -> None:
        postcode = normalize_postcode(await self.prompt_for_postcode())
        logger.info(f"Looking up stops near {postcode}")

        coordinate = await self.geocoder.resolve(postcode)
        stop_points = await self.locator.nearby(coordinate, self.result_count)

        self.presenter(stop_points)
