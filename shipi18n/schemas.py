"""
Request and response shapes exchanged with the translation API
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def canonical_json(value: Any) -> str:
    """Serialize ``value`` compactly, keeping key insertion order.

    Non-finite floats have no JSON form and raise :class:`ValueError`.
    """
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> str:
        """Body sent to the API, with camelCase keys."""
        return self.model_dump_json(by_alias=True)


class TranslationRequest(_WireModel):
    """Plain text translation request"""
    text: str
    source_language: str = Field("en", alias="sourceLanguage")
    target_languages: List[str] = Field(..., alias="targetLanguages")
    preserve_placeholders: bool = Field(True, alias="preservePlaceholders")


class JSONTranslationRequest(_WireModel):
    """Structure preserving translation request.

    ``json`` may be given as a string, which is sent unchanged, or as any
    JSON-serializable value, which is serialized with :func:`canonical_json`.
    """
    payload: str = Field(..., alias="json")
    source_language: str = Field("en", alias="sourceLanguage")
    target_languages: List[str] = Field(..., alias="targetLanguages")
    preserve_placeholders: bool = Field(True, alias="preservePlaceholders")

    @field_validator("payload", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        return canonical_json(value)


class TextTranslation(TypedDict):
    original: str
    translated: str


class HealthStatus(TypedDict, total=False):
    status: str
    version: Optional[str]


# language code -> list of text pairs (text mode) or mirrored object (JSON mode)
TranslationResult = Dict[str, Union[List[TextTranslation], Dict[str, Any]]]


__all__ = [
    "HealthStatus",
    "JSONTranslationRequest",
    "TextTranslation",
    "TranslationRequest",
    "TranslationResult",
    "canonical_json",
]
