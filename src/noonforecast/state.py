# display state owned by the host, filled from fetch_forecast results

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List
from .models import DisplaySample
from .service import fetch_forecast

Fetcher = Callable[[str], Awaitable[List[DisplaySample]]]

@dataclass
class ForecastBoard:
    city: str = "London"          # editable input, refresh() must be called explicitly
    city_title: str = "London"    # city of the last successful refresh
    forecast: List[DisplaySample] = field(default_factory=list)

    async def refresh(self, fetch: Fetcher = fetch_forecast) -> List[DisplaySample]:
        # fields are only assigned after the fetch succeeds, a failure leaves them as they were
        city = self.city
        samples = await fetch(city)
        self.forecast = samples
        self.city_title = city
        return samples
