"""Data models for the nearby stop finder."""

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A geographic point resolved from a postcode."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"


class StopPoint(BaseModel):
    """Represents a public transport stop."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="NaPTAN stop identifier")
    display_name: str = Field(..., description="Human readable stop name")

    def __str__(self) -> str:
        return self.display_name


class QueryParameter(BaseModel):
    """A single query-string entry."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Parameter name")
    value: str | int | float = Field(..., description="Parameter value")


class PostcodeLocation(BaseModel):
    """The part of a postcode lookup result we use."""

    latitude: float = Field(..., strict=True)
    longitude: float = Field(..., strict=True)


class PostcodeLookupResponse(BaseModel):
    """Response body of ``GET /postcodes/{code}``."""

    result: PostcodeLocation


class StopPointEntry(BaseModel):
    """A single entry of the ``stopPoints`` collection."""

    naptan_id: str = Field(..., alias="naptanId")
    common_name: str = Field(..., alias="commonName")

    def to_stop_point(self) -> StopPoint:
        """Convert to the domain model."""
        return StopPoint(identifier=self.naptan_id, display_name=self.common_name)


class StopPointSearchResponse(BaseModel):
    """Response body of ``GET /StopPoint``."""

    stop_points: list[StopPointEntry] = Field(..., alias="stopPoints")
