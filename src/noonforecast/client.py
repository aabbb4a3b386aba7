# openweathermap transport: the only module that talks http
# key, timeout and session handling live here, the service layer only sees decoded JSON
# each thread that runs a fetch lazily gets its own session; close() releases all of them

from __future__ import annotations
import logging
import os
import threading
from typing import Dict, Any, List
import requests
from dotenv import load_dotenv

load_dotenv()  # in production the key is injected through the environment

logger = logging.getLogger(__name__)

class ForecastAPIError(RuntimeError):
    # request, HTTP status and body decoding failures all surface as this
    pass

class OpenWeatherClient:
    # encapsulates provider details: base URL, units, credential, timeout
    BASE_URL = "https://api.openweathermap.org/data/2.5/forecast"
    DEFAULT_TIMEOUT = 10.0
    UNITS = "metric"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "noonforecast/0.1",
    ):
        self.api_key = api_key or os.getenv("OPENWEATHER_API_KEY")
        if not self.api_key:
            # fail when key is missing to avoid a confusing 401 later
            raise ForecastAPIError("OPENWEATHER_API_KEY not set")

        self.timeout = timeout
        self.user_agent = user_agent
        self._local = threading.local()
        # sessions from every worker thread, so close() can reach them from any thread
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()

    def _build_session(self) -> requests.Session:
        # no retry adapter: one request per fetch
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
            with self._lock:
                self._sessions.append(sess)
        return sess

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for s in sessions:
            s.close()
        self._local = threading.local()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_params(self, city: str) -> Dict[str, str]:
        # requests url-encodes these, so city names with spaces or commas are safe
        return {"q": city, "units": self.UNITS, "APPID": self.api_key}

    def get_forecast(self, city: str) -> Dict[str, Any]:
        # returns the decoded JSON body; its shape is checked by the service parser
        logger.debug("GET %s q=%r", self.BASE_URL, city)
        try:
            resp = self._session().get(self.BASE_URL, params=self.build_params(city), timeout=self.timeout)
        except requests.RequestException as exc:
            raise ForecastAPIError(f"Request error for {city!r}: {exc}") from exc

        if resp.status_code >= 400:
            # the provider puts its reason ("city not found", "Invalid API key") in the body
            snippet = (resp.text or "")[:300]
            raise ForecastAPIError(f"HTTP {resp.status_code} for {city!r}. Body: {snippet}")

        try:
            return resp.json()
        except ValueError as exc:
            raise ForecastAPIError(f"Invalid JSON for {city!r}: {exc}") from exc
