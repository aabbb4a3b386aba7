# forecast acquisition and normalization
# pure functions (filter and map) plus the async fetch_forecast coordinator

from __future__ import annotations
import asyncio
import logging
import math
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from .models import DisplaySample, ParseResult
from .client import OpenWeatherClient

logger = logging.getLogger(__name__)

ICON_BASE_URL = "http://openweathermap.org/img/w/"
ICON_SUFFIX = ".png"
NOON_HOUR = 12
# dt_txt carries the provider's own clock, no timezone conversion is applied
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

class ForecastParseError(ValueError):
    # raised by fetch_forecast when the payload does not have the expected shape
    pass

def parse_timestamp(dt_txt: str) -> datetime:
    return datetime.strptime(dt_txt, TIMESTAMP_FORMAT)

def is_noon_sample(sample: Dict[str, Any]) -> bool:
    return parse_timestamp(sample["dt_txt"]).hour == NOON_HOUR

def icon_url(code: str) -> str:
    return f"{ICON_BASE_URL}{code}{ICON_SUFFIX}"

def round_temperature(value: float) -> int:
    # half-up: 15.5 -> 16, -0.5 -> 0, -0.6 -> -1
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"temperature is not finite: {value!r}")
    return int(math.floor(value + 0.5))

def day_label(dt_txt: str) -> str:
    # %a follows the ambient locale, "Fri" under the default C locale
    return parse_timestamp(dt_txt).strftime("%a")

def to_display_sample(sample: Dict[str, Any]) -> DisplaySample:
    condition = sample["weather"][0]
    code, description = condition["icon"], condition["description"]
    if not isinstance(code, str) or not isinstance(description, str):
        raise TypeError(f"icon and description must be strings, got {code!r}, {description!r}")
    return DisplaySample(
        icon=icon_url(code),
        description=description,
        temperature=round_temperature(sample["main"]["temp"]),
        day_label=day_label(sample["dt_txt"]),
    )

def select_noon_samples(samples: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # keeps input order; days without an exact 12:xx entry simply drop out
    return [s for s in samples if is_noon_sample(s)]

def parse_display_samples(payload: Any) -> ParseResult:
    """Reduce a raw forecast payload to one DisplaySample per noon entry.

    Never raises: a payload missing ``list``, or a noon sample with a missing
    field, a non-string icon or description, or a non-finite temperature,
    produces a failed ``ParseResult`` describing the problem.
    """
    if not isinstance(payload, dict):
        return ParseResult.failure(f"expected a JSON object, got {type(payload).__name__}")
    series = payload.get("list")
    if not isinstance(series, list):
        return ParseResult.failure("missing 'list' in forecast payload")

    out: List[DisplaySample] = []
    for i, sample in enumerate(series):
        try:
            if not is_noon_sample(sample):
                continue
            out.append(to_display_sample(sample))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            return ParseResult.failure(f"sample {i} is malformed: {exc!r}")
    return ParseResult.success(out)

async def fetch_forecast(city: str, client: Optional[OpenWeatherClient] = None) -> List[DisplaySample]:
    # exactly one network call per invocation, nothing cached between calls
    owned = client is None
    client = client or OpenWeatherClient()
    try:
        # the blocking requests call runs in a worker thread so the event loop is free
        payload = await asyncio.to_thread(client.get_forecast, city)
    finally:
        if owned:
            client.close()
    result = parse_display_samples(payload)
    if not result.ok:
        raise ForecastParseError(f"Unexpected forecast payload for {city!r}: {result.error}")
    logger.info("%s: %d noon samples", city, len(result.samples))
    return result.samples
