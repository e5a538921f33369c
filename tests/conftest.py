"""Shared fixtures: deterministic completion stub and a TestClient wired to it."""

import os

os.environ.setdefault("OPENAI_API_KEY", "test-key")

import json  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from fitment_api.core.dependencies import get_completion_client  # noqa: E402
from fitment_api.core.errors import CompletionError  # noqa: E402
from fitment_api.main import app  # noqa: E402

SAMPLE_FITMENT = {
    "oem": {
        "wheelSize": "17x7.5",
        "tireSize": "245/70R17",
        "boltPattern": "6x135mm",
        "hubSize": "87.1mm",
        "offset": "+44mm",
        "tpms": "Required",
    },
    "upgrades": {
        "20": [
            {
                "wheelSize": "20x9.0",
                "tireSize": "275/55R20",
                "offset": "+18mm to +25mm",
                "notes": "No rubbing or modifications required",
            },
            {
                "wheelSize": "20x9.0",
                "tireSize": "275/60R20",
                "offset": "+18mm to +25mm",
                "notes": "Slightly taller than OEM",
            },
        ],
        "22": [
            {
                "wheelSize": "22x9.5",
                "tireSize": "285/45R22",
                "offset": "+20mm",
                "notes": "Firmer ride",
            }
        ],
        "24": [],
    },
}

VEHICLE = {"year": 2019, "make": "Ford", "model": "F-150", "trim": "XLT"}


class StubCompletionClient:
    """Returns canned text (or raises) and records every call."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self.reply = json.dumps(SAMPLE_FITMENT) if reply is None else reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, messages, *, model, temperature, max_tokens):
        self.calls.append(
            {
                "messages": messages,
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_client():
    return StubCompletionClient()


@pytest.fixture
def client(stub_client):
    app.dependency_overrides[get_completion_client] = lambda: stub_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    return StubCompletionClient(error=CompletionError("Incorrect API key provided"))
