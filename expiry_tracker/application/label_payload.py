"""Normalization of loosely-typed label payloads into label text."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Self

from .exceptions import LabelPayloadError

_CODE_FENCE = re.compile(r"```(?:json)?\n?")
_NULL_MARKERS = {"", "null", "none", "n/a"}


def _clean(value: Any) -> str | None:
    """Coerce an optional payload member to a stripped string or None."""
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in _NULL_MARKERS:
        return None
    return text


@dataclass(frozen=True, slots=True)
class LabelPayload:
    """Fields read from a product label by the vision collaborator."""

    product_name: str | None = None
    manufacturing_date: str | None = None
    expiry_date: str | None = None
    best_before_duration: str | None = None
    category: str | None = None
    raw_text: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a payload from the collaborator's JSON object, tolerating missing members."""
        return cls(
            product_name=_clean(data.get("productName")),
            manufacturing_date=_clean(data.get("manufacturingDate")),
            expiry_date=_clean(data.get("expiryDate")),
            best_before_duration=_clean(data.get("bestBeforeDuration")),
            category=_clean(data.get("category")),
            raw_text=_clean(data.get("rawText")),
        )

    def to_label_text(self) -> str:
        """Synthesize the single label-text contract consumed by the date extractor."""
        lines: list[str] = []
        if self.raw_text:
            lines.append(self.raw_text)
        if self.manufacturing_date:
            lines.append(f"MFG: {self.manufacturing_date}")
        if self.expiry_date:
            lines.append(f"EXP: {self.expiry_date}")
        if self.best_before_duration:
            duration = self.best_before_duration
            if "best before" not in duration.lower():
                duration = f"best before {duration}"
            lines.append(duration)
        return "\n".join(lines)


def parse_label_response(content: str) -> LabelPayload:
    """
    Decode the collaborator's reply into a LabelPayload.

    Markdown code fences around the JSON object are stripped.

    Raises:
        LabelPayloadError: If the content is not a JSON object.
    """
    cleaned = _CODE_FENCE.sub("", content).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse label payload: {e}"
        raise LabelPayloadError(msg) from e

    if not isinstance(data, dict):
        msg = f"Label payload must be a JSON object, got {type(data).__name__}"
        raise LabelPayloadError(msg)

    return LabelPayload.from_dict(data)
