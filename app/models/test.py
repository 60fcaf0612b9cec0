"""
IELTS test document.

Skill content is kept in both the legacy nested layout (``reading``,
``listening``, ``writing``, ``speaking``) and the flat layout
(``readingSections`` ...). Sections, questions, tasks and parts are
schemaless embedded dicts identified by a string ``id``; see
``app.services.test_transformer`` for how the two layouts are reconciled.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import BaseDocument
from .enums import TestCategory, TestDifficulty, TestStatus


class TestStatistics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_attempts: int = Field(0, alias="totalAttempts")
    average_score: float = Field(0, alias="averageScore")
    average_completion_time: float = Field(0, alias="averageCompletionTime")
    completion_rate: float = Field(0, alias="completionRate")


class TestSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    allow_review: bool = Field(True, alias="allowReview")
    show_correct_answers: bool = Field(True, alias="showCorrectAnswers")
    allow_pause: bool = Field(True, alias="allowPause")
    shuffle_questions: bool = Field(False, alias="shuffleQuestions")
    time_per_question: Optional[int] = Field(None, alias="timePerQuestion")
    passing_score: float = Field(7, ge=0, le=9, alias="passingScore")


class Test(BaseDocument):
    # Basic info
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=1000)
    difficulty: TestDifficulty = TestDifficulty.INTERMEDIATE
    status: TestStatus = TestStatus.DRAFT
    category: TestCategory = TestCategory.PRACTICE
    tags: List[str] = Field(default_factory=list)

    # Timing, in minutes
    duration: Optional[float] = None
    total_time: Optional[float] = Field(None, alias="totalTime")
    total_questions: int = Field(0, alias="totalQuestions")

    skills: List[str] = Field(default_factory=list)

    # Visibility
    is_public: bool = Field(True, alias="isPublic")
    is_featured: bool = Field(False, alias="isFeatured")
    is_template: bool = Field(False, alias="isTemplate")

    # Legacy nested layout
    reading: Optional[Dict[str, Any]] = None
    listening: Optional[Dict[str, Any]] = None
    writing: Optional[Dict[str, Any]] = None
    speaking: Optional[Dict[str, Any]] = None

    # Flat layout
    reading_sections: List[Dict[str, Any]] = Field(
        default_factory=list, alias="readingSections"
    )
    listening_sections: List[Dict[str, Any]] = Field(
        default_factory=list, alias="listeningSections"
    )
    writing_tasks: List[Dict[str, Any]] = Field(
        default_factory=list, alias="writingTasks"
    )
    speaking_parts: List[Dict[str, Any]] = Field(
        default_factory=list, alias="speakingParts"
    )

    statistics: TestStatistics = Field(default_factory=TestStatistics)
    test_settings: TestSettings = Field(default_factory=TestSettings, alias="settings")

    # Ownership
    created_by: Optional[str] = Field(None, alias="createdBy")
    last_modified_by: Optional[str] = Field(None, alias="lastModifiedBy")

    class Settings:
        name = "tests"
        indexes = [
            [("status", 1), ("isPublic", 1)],
            "difficulty",
            "skills",
            "createdBy",
        ]

    @field_validator("difficulty", mode="before")
    @classmethod
    def lowercase_difficulty(cls, value):
        # Older admin builds sent "Beginner", "Advanced", ...
        if isinstance(value, str):
            return value.lower()
        return value
