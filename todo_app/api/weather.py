"""
Weather API

Random five-day forecast. Nothing is stored.
"""

import random
from datetime import date, timedelta
from typing import List, Optional, Sequence

from fastapi import APIRouter, Depends

from .models import WeatherForecast
from .deps import get_rng, get_today


router = APIRouter(tags=["weather"])


SUMMARIES = (
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
)

FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive


def generate_forecast(
    today: date,
    rng: Optional[random.Random] = None,
    days: int = FORECAST_DAYS,
    summaries: Sequence[str] = SUMMARIES,
) -> List[WeatherForecast]:
    """Build ``days`` forecasts for the days following ``today``."""
    rng = rng or random.Random()
    return [
        WeatherForecast(
            date=today + timedelta(days=index),
            temperature_c=rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
            summary=rng.choice(summaries),
        )
        for index in range(1, days + 1)
    ]


@router.get(
    "/weatherforecast",
    response_model=List[WeatherForecast],
    operation_id="GetWeatherForecast",
)
async def get_weather_forecast(
    rng: random.Random = Depends(get_rng),
    today: date = Depends(get_today),
):
    """Five-day forecast starting tomorrow."""
    return generate_forecast(today, rng)
