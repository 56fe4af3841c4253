"""
WeatherForecast API Endpoint
Serves the randomly generated five-day forecast
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from forecast_api.errors import ERROR_RESPONSES
from forecast_api.forecast import WeatherForecast, generate_forecasts
from forecast_api.middleware.metrics import FORECAST_SUMMARIES

router = APIRouter(prefix="/WeatherForecast", tags=["WeatherForecast"])


def get_logger() -> logging.Logger:
    """Logger handed to request handlers."""
    return logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[WeatherForecast],
    responses=ERROR_RESPONSES,
    summary="Retrieves a 5-day weather forecast.",
    description="Returns randomly generated weather data including date, temperature, and summary.",
)
def get_weather_forecast(
    nothing: Optional[str] = Query(None, description="Accepted for compatibility; has no effect."),
    logger: logging.Logger = Depends(get_logger),
):
    forecasts = generate_forecasts()

    for f in forecasts:
        FORECAST_SUMMARIES.labels(summary=f.summary).inc()

    logger.debug(f"Generated {len(forecasts)} forecasts starting {forecasts[0].date.isoformat()}")
    return forecasts
