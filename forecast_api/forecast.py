"""
Forecast Generator
Builds the randomly generated five-day weather forecast
"""

import random
import datetime
from datetime import timedelta
from typing import List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, computed_field

Summary = Literal[
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
]

SUMMARIES = get_args(Summary)

FORECAST_DAYS = 5


class WeatherForecast(BaseModel):
    """One day's forecast."""

    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    temperature_c: int = Field(0, alias="temperatureC")
    summary: Summary

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)


def generate_forecasts(
    today: Optional[datetime.date] = None,
    rng: Optional[random.Random] = None,
) -> List[WeatherForecast]:
    """
    Generate forecasts for today+1 through today+5, ascending by date.

    A fresh Random is created per call unless one is passed in, so
    concurrent requests never share generator state.
    """
    today = today or datetime.date.today()
    rng = rng or random.Random()

    return [
        WeatherForecast(
            date=today + timedelta(days=index),
            summary=SUMMARIES[rng.randrange(len(SUMMARIES))],
        )
        for index in range(1, FORECAST_DAYS + 1)
    ]
