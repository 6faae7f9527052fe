"""
Course model: one catalog entry with its prerequisite list.

Loaded from the catalog text file; never modified after creation.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.validate import (
    is_valid_course_name,
    is_valid_course_number,
    normalize_course_number,
    trim_course_name,
)


class Course(BaseModel):
    """A course with its number, name and prerequisite course numbers."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    number: str
    name: str
    prerequisites: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("number")
    @classmethod
    def _check_number(cls, value: str) -> str:
        if not is_valid_course_number(value):
            raise ValueError(f"invalid course number '{value}'")
        return normalize_course_number(value)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_course_name(value):
            raise ValueError(f"invalid course name '{value}'")
        return trim_course_name(value)

    @field_validator("prerequisites")
    @classmethod
    def _check_prerequisites(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for prereq in value:
            if not is_valid_course_number(prereq):
                raise ValueError(f"invalid prerequisite course number '{prereq}'")
        return tuple(normalize_course_number(p) for p in value)

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)
