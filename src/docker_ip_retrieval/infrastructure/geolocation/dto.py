"""
Geolocation API data transfer objects.
"""
from pydantic import BaseModel, ConfigDict, Field


class GeolocationResponse(BaseModel):
    """
    Response body of the ip-api.com JSON endpoint.

    Only the fields used to build the location label are modelled.
    """

    model_config = ConfigDict(extra="ignore")

    status: str = Field(..., description="success or fail")
    country: str = Field(default="", description="Country name")
    city: str = Field(default="", description="City name")
    message: str = Field(default="", description="Reason when status is fail")

    @property
    def is_failure(self) -> bool:
        return self.status == "fail"

    def label(self) -> str:
        return f"{self.country}, {self.city}"
