"""
Progress tracking schemas.

The on-disk keys are camelCase (completedLessons, completionDates,
currentLessonId, totalLessonsCompleted) so progress files written by the
desktop app load unchanged. Snake_case field names are accepted too.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

logger = logging.getLogger(__name__)

# Older files carry nanosecond fractions, datetime keeps microseconds
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


class ProgressRecord(BaseModel):
    """One learner's completion state."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    completed_lesson_ids: set[str] = Field(default_factory=set, alias="completedLessons")
    completion_timestamps: dict[str, datetime] = Field(default_factory=dict, alias="completionDates")
    current_lesson_id: Optional[str] = Field(default=None, alias="currentLessonId")
    total_completed_count: int = Field(default=0, ge=0, alias="totalLessonsCompleted")

    @field_validator("completed_lesson_ids", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("completion_timestamps", mode="before")
    @classmethod
    def trim_fractions(cls, value):
        if not isinstance(value, dict):
            return value if value else {}
        return {
            key: _FRACTION_RE.sub(r"\1", stamp) if isinstance(stamp, str) else stamp
            for key, stamp in value.items()
        }

    @model_validator(mode="after")
    def reconcile(self) -> "ProgressRecord":
        """Keep timestamps and count consistent with the completed set."""
        stray = set(self.completion_timestamps) - self.completed_lesson_ids
        for lesson_id in stray:
            del self.completion_timestamps[lesson_id]

        actual = len(self.completed_lesson_ids)
        if self.total_completed_count != actual:
            logger.warning(
                f"Stored completed count {self.total_completed_count} "
                f"does not match {actual} completed lessons; using {actual}"
            )
            self.total_completed_count = actual
        return self

    @field_serializer("completed_lesson_ids")
    def serialize_completed(self, value: set[str]) -> list[str]:
        return sorted(value)

    def to_json(self) -> str:
        """Serialize with the persisted key names."""
        return self.model_dump_json(by_alias=True, indent=2)
