"""
Tests for sewstudio/inference/llm_classifier.py — LLMGarmentClassifier.

The anthropic client is replaced with unittest.mock so no API calls are made.
Integration tests require ANTHROPIC_API_KEY and are skipped otherwise.
"""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from sewstudio.inference import GarmentClassifier
from sewstudio.inference.llm_classifier import LLMGarmentClassifier
from sewstudio.inference.prompts import SYSTEM_PROMPT, build_tool_schema


def _tool_response(label: str) -> MagicMock:
    block = MagicMock()
    block.type = "tool_use"
    block.input = {"garment_type": label}
    response = MagicMock()
    response.content = [block]
    return response


def _text_response() -> MagicMock:
    block = MagicMock()
    block.type = "text"
    response = MagicMock()
    response.content = [block]
    return response


@pytest.fixture
def classifier():
    with patch("anthropic.Anthropic") as client_cls:
        clf = LLMGarmentClassifier(model="claude-test")
    assert clf._client is client_cls.return_value
    return clf


class TestToolSchema:
    def test_enum_is_the_vocabulary(self):
        schema = build_tool_schema(("Dress", "Vest"))
        prop = schema["input_schema"]["properties"]["garment_type"]
        assert prop["enum"] == ["Dress", "Vest"]
        assert schema["input_schema"]["required"] == ["garment_type"]

    def test_default_uses_catalog_vocabulary(self):
        enum = build_tool_schema()["input_schema"]["properties"]["garment_type"]["enum"]
        assert enum[0] == "Dress"
        assert "Dog Bandana" in enum


class TestLLMClassifier:
    def test_satisfies_protocol(self, classifier):
        assert isinstance(classifier, GarmentClassifier)

    def test_returns_tool_label(self, classifier):
        classifier._client.messages.create.return_value = _tool_response("Cardigan")
        assert classifier.classify("a cosy knitted layer with buttons") == "Cardigan"

    def test_request_forces_tool_use(self, classifier):
        classifier._client.messages.create.return_value = _tool_response("Dress")
        classifier.classify("sundress")
        kwargs = classifier._client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["tool_choice"] == {"type": "any"}
        assert kwargs["tools"][0]["name"] == "classify_garment"
        assert kwargs["messages"] == [{"role": "user", "content": "sundress"}]

    def test_off_vocabulary_label_falls_back(self, classifier):
        classifier._client.messages.create.return_value = _tool_response("Kimono")
        with pytest.warns(UserWarning, match="not in the garment vocabulary"):
            assert classifier.classify("wide-leg trousers") == "Pants"

    def test_missing_tool_block_falls_back(self, classifier):
        classifier._client.messages.create.return_value = _text_response()
        with pytest.warns(UserWarning, match="tool_use"):
            assert classifier.classify("a cozy pullover") == "Hoodie"

    def test_api_error_falls_back(self, classifier):
        classifier._client.messages.create.side_effect = RuntimeError("connection reset")
        with pytest.warns(UserWarning, match="connection reset"):
            assert classifier.classify("nothing recognisable") == "Dress"


@pytest.mark.skipif(not os.getenv("ANTHROPIC_API_KEY"), reason="requires ANTHROPIC_API_KEY")
class TestLLMClassifierIntegration:
    def test_classifies_into_vocabulary(self):
        clf = LLMGarmentClassifier()
        assert clf.classify("a warm zip-up jacket for autumn walks") in build_tool_schema()[
            "input_schema"
        ]["properties"]["garment_type"]["enum"]
