# noon forecast: one display record per day from the openweathermap 5 day / 3 hour feed

from .models import DisplaySample, ParseResult
from .client import OpenWeatherClient, ForecastAPIError
from .service import fetch_forecast, parse_display_samples, ForecastParseError
from .state import ForecastBoard

__all__ = [
    "DisplaySample",
    "ParseResult",
    "OpenWeatherClient",
    "ForecastAPIError",
    "ForecastParseError",
    "fetch_forecast",
    "parse_display_samples",
    "ForecastBoard",
]
