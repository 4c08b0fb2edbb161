"""Runtime configuration for the nearby stop finder."""

from pydantic import BaseModel, ConfigDict, Field

POSTCODES_BASE_URL = "https://api.postcodes.io"
TFL_BASE_URL = "https://api.tfl.gov.uk"


class StopFinderSettings(BaseModel):
    """Settings passed explicitly into the geocoder, locator and pipeline.

    The TfL credentials default to empty strings and are sent as-is; the
    remote service decides whether anonymous requests are acceptable.
    """

    model_config = ConfigDict(frozen=True)

    app_id: str = Field("", description="TfL application id")
    app_key: str = Field("", description="TfL application key")
    result_count: int = Field(5, ge=0, description="Number of stops to show")
    search_radius: int = Field(1000, ge=0, description="Search radius in metres")
    stop_types: str = Field(
        "NaptanPublicBusCoachTram", description="TfL stop type filter"
    )
    postcodes_base_url: str = Field(
        POSTCODES_BASE_URL, description="Postcode lookup service origin"
    )
    tfl_base_url: str = Field(TFL_BASE_URL, description="TfL API origin")

    def masked_app_key(self) -> str:
        """Get the app key with all but the last four characters hidden."""
        if not self.app_key:
            return "(not set)"
        if len(self.app_key) <= 4:
            return "*" * len(self.app_key)
        return "*" * (len(self.app_key) - 4) + self.app_key[-4:]
