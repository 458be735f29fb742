from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .errors import EmptyInputError, InvalidArgumentError, MalformedResponseError


@dataclass(frozen=True, slots=True)
class TranslateRequest:
    """Body of a ``/translate`` call.

    ``source_language_code=None`` asks the API to detect the source language;
    the field is then left out of the JSON body instead of being sent as null.
    """

    folder_id: str
    texts: Sequence[str]
    target_language_code: str
    source_language_code: Optional[str] = None

    def validate(self) -> None:
        if isinstance(self.texts, str):
            raise InvalidArgumentError("texts must be a sequence of strings, not a single string")
        if not self.texts:
            raise EmptyInputError("texts must contain at least one item")
        for index, text in enumerate(self.texts):
            if not isinstance(text, str):
                raise InvalidArgumentError(f"texts[{index}] is {type(text).__name__}, expected str")
        if not isinstance(self.target_language_code, str) or not self.target_language_code.strip():
            raise InvalidArgumentError("target_language_code is required")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "folderId": self.folder_id,
            "texts": list(self.texts),
            "targetLanguageCode": self.target_language_code,
        }
        if self.source_language_code is not None:
            payload["sourceLanguageCode"] = self.source_language_code
        return payload


@dataclass(frozen=True, slots=True)
class Translation:
    text: str
    # Set only when the source language was auto-detected.
    detected_language_code: Optional[str] = None


@dataclass(slots=True)
class TranslateResponse:
    translations: List[Translation] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> "TranslateResponse":
        """Build a response from decoded JSON, rejecting anything off-shape."""
        if not isinstance(data, dict):
            raise MalformedResponseError(f"expected a JSON object, got {type(data).__name__}")
        items = data.get("translations")
        if not isinstance(items, list):
            raise MalformedResponseError("response has no 'translations' list")

        translations = []
        for index, item in enumerate(items):
            if not isinstance(item, dict) or not isinstance(item.get("text"), str):
                raise MalformedResponseError(f"translations[{index}] has no 'text' string")
            detected = item.get("detectedLanguageCode")
            if detected is not None and not isinstance(detected, str):
                raise MalformedResponseError(f"translations[{index}].detectedLanguageCode is not a string")
            translations.append(Translation(text=item["text"], detected_language_code=detected))
        return cls(translations=translations)

    @property
    def texts(self) -> List[str]:
        return [item.text for item in self.translations]

    def __len__(self) -> int:
        return len(self.translations)

    def __iter__(self) -> Iterator[Translation]:
        return iter(self.translations)
