"""
Unit Tests for request serialization
"""

import json

import pytest
from pydantic import ValidationError

from shipi18n.schemas import JSONTranslationRequest, TranslationRequest, canonical_json


def test_translation_request_wire_format():
    request = TranslationRequest(text="Hello", target_languages=["es", "fr"])

    assert request.to_wire() == (
        '{"text":"Hello","sourceLanguage":"en","targetLanguages":["es","fr"],'
        '"preservePlaceholders":true}'
    )


def test_translation_request_accepts_wire_names():
    request = TranslationRequest.model_validate(
        {"text": "Hi", "sourceLanguage": "de", "targetLanguages": ["en"], "preservePlaceholders": False}
    )

    assert request.source_language == "de"
    assert request.preserve_placeholders is False


def test_target_languages_are_required():
    with pytest.raises(ValidationError):
        TranslationRequest(text="Hello")


def test_empty_target_languages_are_not_rejected():
    assert TranslationRequest(text="Hello", target_languages=[]).target_languages == []


def test_json_request_keeps_insertion_order():
    request = JSONTranslationRequest(
        json={"b": "second", "a": {"z": "Zed", "y": "Why"}},
        target_languages=["es"],
    )

    assert request.payload == '{"b":"second","a":{"z":"Zed","y":"Why"}}'
    assert json.loads(request.to_wire())["json"] == request.payload


def test_json_request_passes_strings_through():
    raw = '{ "greeting" : "Hello" }'

    assert JSONTranslationRequest(json=raw, target_languages=["es"]).payload == raw


def test_canonical_json_keeps_unicode_and_placeholders():
    assert canonical_json({"farewell": "Adiós {name}"}) == '{"farewell":"Adiós {name}"}'


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_canonical_json_rejects_non_finite_numbers(value):
    with pytest.raises(ValueError):
        canonical_json({"n": value})


def test_json_request_rejects_non_finite_numbers():
    with pytest.raises(ValidationError):
        JSONTranslationRequest(json={"n": float("nan")}, target_languages=["es"])
