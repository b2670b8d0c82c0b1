"""
API Models (Pydantic)

Response schemas for the API. JSON keys are camelCase.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Movies
# =============================================================================

class MovieRecord(CamelModel):
    """Movie catalog entry."""
    id: int
    title: str
    description: str
    image_url: str
    review: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Highlander",
                "description": "Lorem ipsum dolor sit amet.",
                "imageUrl": "/images/movies/Highlander.png",
                "review": "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
            }
        },
    )


# =============================================================================
# Weather
# =============================================================================

def celsius_to_fahrenheit(temperature_c: int) -> int:
    """Approximate conversion, truncated toward zero."""
    return 32 + int(temperature_c / 0.5556)


class WeatherForecast(CamelModel):
    """Forecast for a single day."""
    date: dt.date
    temperature_c: int
    summary: Optional[str] = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)


# =============================================================================
# Common
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    service: str = "todo-app"


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
