# shared fixtures: the recorded payload and a fake http layer so tests never hit the network

import json
from pathlib import Path
import pytest

DATA_DIR = Path(__file__).parent / "data"

@pytest.fixture
def forecast_payload():
    return json.loads((DATA_DIR / "example_forecast.json").read_text())

class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body

class FakeSession:
    # records every GET and replays a canned response or error
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

@pytest.fixture
def fake_response():
    return FakeResponse

@pytest.fixture
def fake_session():
    return FakeSession
