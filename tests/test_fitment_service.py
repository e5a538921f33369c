"""Tests for the fitment lookup pipeline with a deterministic completion stub."""

import asyncio
import json

import pytest

from fitment_api.core.config import Settings
from fitment_api.core.errors import CompletionError, ResponseParseError
from fitment_api.models.fitment import FitmentQuery
from fitment_api.services.fitment import FitmentService, inspect_fitment_shape
from tests.conftest import SAMPLE_FITMENT, StubCompletionClient

QUERY = FitmentQuery(year=2019, make="Ford", model="F-150", trim="XLT")


def _settings(**overrides) -> Settings:
    values = {"OPENAI_API_KEY": "test-key", **overrides}
    return Settings(**values)


class TestLookup:
    def test_returns_parsed_fitment(self):
        stub = StubCompletionClient()
        service = FitmentService(stub, _settings())
        assert asyncio.run(service.lookup(QUERY)) == SAMPLE_FITMENT
        assert len(stub.calls) == 1

    def test_sends_configured_sampling(self):
        stub = StubCompletionClient()
        service = FitmentService(
            stub, _settings(OPENAI_MODEL="gpt-4o", OPENAI_MAX_TOKENS=1500)
        )
        asyncio.run(service.lookup(QUERY))
        call = stub.calls[0]
        assert call["model"] == "gpt-4o"
        assert call["temperature"] == 0.2
        assert call["max_tokens"] == 1500
        assert [m["role"] for m in call["messages"]] == ["system", "user"]
        assert "2019 Ford F-150 XLT" in call["messages"][1]["content"]

    def test_defaults_match_original_call(self):
        settings = _settings()
        assert settings.openai_model == "gpt-4"
        assert settings.openai_temperature == 0.2
        assert settings.openai_max_tokens == 2000

    def test_embedded_json_recovered(self):
        stub = StubCompletionClient(
            reply="Sure! Here is the data:\n" + json.dumps(SAMPLE_FITMENT) + "\nThanks."
        )
        service = FitmentService(stub, _settings())
        assert asyncio.run(service.lookup(QUERY)) == SAMPLE_FITMENT

    def test_unparseable_reply_raises(self):
        stub = StubCompletionClient(reply="I cannot help with that.")
        service = FitmentService(stub, _settings())
        with pytest.raises(ResponseParseError):
            asyncio.run(service.lookup(QUERY))

    def test_completion_error_propagates(self):
        stub = StubCompletionClient(error=CompletionError("quota exceeded"))
        service = FitmentService(stub, _settings())
        with pytest.raises(CompletionError, match="quota exceeded"):
            asyncio.run(service.lookup(QUERY))
        assert len(stub.calls) == 1

    def test_array_reply_returned_unchanged(self):
        reply = [SAMPLE_FITMENT, {"oem": {}}]
        stub = StubCompletionClient(reply=json.dumps(reply))
        service = FitmentService(stub, _settings())
        assert asyncio.run(service.lookup(QUERY)) == reply

    def test_deviating_shape_still_returned(self):
        odd = {"oem": {"wheelSize": "16x7"}, "upgrades": {"20": "none"}}
        stub = StubCompletionClient(reply=json.dumps(odd))
        service = FitmentService(stub, _settings())
        assert asyncio.run(service.lookup(QUERY)) == odd

    def test_repeat_lookup_is_identical(self):
        stub = StubCompletionClient()
        service = FitmentService(stub, _settings())
        first = asyncio.run(service.lookup(QUERY))
        second = asyncio.run(service.lookup(QUERY))
        assert first == second
        assert stub.calls[0] == stub.calls[1]


class TestInspectFitmentShape:
    def test_expected_shape_is_clean(self):
        assert inspect_fitment_shape(SAMPLE_FITMENT) == []

    def test_missing_sections(self):
        assert inspect_fitment_shape({}) == [
            "missing 'oem' object",
            "missing 'upgrades' object",
        ]

    def test_missing_and_wrong_diameters(self):
        data = {"oem": {}, "upgrades": {"20": [], "22": "n/a"}}
        assert inspect_fitment_shape(data) == [
            "upgrades['22'] is not a list",
            "missing upgrades['24']",
        ]

    def test_top_level_array(self):
        assert inspect_fitment_shape([SAMPLE_FITMENT]) == [
            "top-level value is a list, not an object"
        ]
