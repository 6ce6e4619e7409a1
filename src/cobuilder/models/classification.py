"""Classification result model with clamping validators.

The model's JSON uses camelCase keys (``assetNumber``, ``checklistItemId``, ...).
Validation never trusts the upstream model: numeric fields are clamped into
range, unknown priorities fall back to medium, and a checklist item that is
not on the chosen asset's checklist is dropped.
"""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from cobuilder.framework import MAX_ASSET_NUMBER, MIN_ASSET_NUMBER, get_asset

MAX_TITLE_LENGTH = 100
MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100


class TaskPriority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


def _coerce_int(value: Any) -> int:
    """Convert a JSON number (or numeric string) to an int, rejecting everything else."""
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {value!r}")
    return round(number)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class ClassificationResult(BaseModel):
    """Where a Slack message belongs in the framework, plus the task extracted from it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    asset_number: int
    checklist_item_id: str | None = None
    title: str
    priority: TaskPriority = TaskPriority.MEDIUM
    confidence: int
    reasoning: str = ""

    @field_validator("asset_number", mode="before")
    @classmethod
    def _clamp_asset_number(cls, value: Any) -> int:
        return _clamp(_coerce_int(value), MIN_ASSET_NUMBER, MAX_ASSET_NUMBER)

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value: Any) -> int:
        return _clamp(_coerce_int(value), MIN_CONFIDENCE, MAX_CONFIDENCE)

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, value: Any) -> TaskPriority:
        if isinstance(value, TaskPriority):
            return value
        if isinstance(value, str):
            try:
                return TaskPriority(value.strip().lower())
            except ValueError:
                pass
        return TaskPriority.MEDIUM

    @field_validator("title", mode="before")
    @classmethod
    def _truncate_title(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("title must be a non-empty string")
        return value.strip()[:MAX_TITLE_LENGTH]

    @field_validator("checklist_item_id", mode="before")
    @classmethod
    def _normalize_checklist_item(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("reasoning", mode="before")
    @classmethod
    def _default_reasoning(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @model_validator(mode="after")
    def _checklist_matches_asset(self) -> "ClassificationResult":
        # Only IDs of the chosen asset's own checklist are kept.
        if self.checklist_item_id:
            asset = get_asset(self.asset_number)
            known = {item.id for item in asset.checklist} if asset else set()
            if self.checklist_item_id not in known:
                self.checklist_item_id = None
        return self
