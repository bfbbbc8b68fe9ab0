"""
Curriculum schemas for the course platform.

Defines Pydantic models for the read-only catalog:
- Challenge: optional practice exercise attached to a lesson
- Lesson: one markdown lesson with a stable id
- Module: an ordered group of lessons

All models are frozen; the catalog never changes after startup.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Challenge(BaseModel):
    """Practice exercise shown after a lesson body."""
    model_config = ConfigDict(frozen=True)

    description: str
    starter_code: Optional[str] = None
    solution: Optional[str] = None


class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    module_id: str           # weak reference, resolve through CourseLoader
    order_index: int
    content_ref: str         # path relative to the lessons directory
    challenge: Optional[Challenge] = None

    @property
    def has_challenge(self) -> bool:
        return self.challenge is not None

    def __str__(self) -> str:
        return f"Lesson {self.order_index}: {self.title}"


class Module(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: Optional[str] = None
    order_index: int
    lessons: tuple[Lesson, ...] = ()

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    def __str__(self) -> str:
        return f"Module {self.order_index}: {self.title} ({len(self.lessons)} lessons)"
