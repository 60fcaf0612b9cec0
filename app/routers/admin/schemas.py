"""
Pydantic schemas for admin endpoints
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models.enums import TestDifficulty, TestStatus


def _lowercase(value):
    # Older admin builds sent "Beginner", "Advanced", ...
    return value.lower() if isinstance(value, str) else value


# Test Management Schemas
class TestCreateRequest(BaseModel):
    """
    Test document sent by the editor. Skill content may arrive in the nested
    layout, the flat layout or both, so unknown keys are kept as-is.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "title": "Academic Mock Test 1",
                "description": "Full academic mock",
                "difficulty": "intermediate",
                "tags": ["academic", "mock"],
                "reading": {
                    "sections": [
                        {
                            "title": "Passage 1",
                            "passage": "...",
                            "suggestedTime": 20,
                            "questions": [
                                {
                                    "type": "true_false_not_given",
                                    "order": 1,
                                    "content": {
                                        "statement": "The author agrees.",
                                        "answer": "True",
                                    },
                                }
                            ],
                        }
                    ]
                },
            }
        },
    )

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=1000)
    difficulty: Optional[TestDifficulty] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("difficulty", mode="before")
    @classmethod
    def lowercase_difficulty(cls, value):
        return _lowercase(value)


class TestUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    difficulty: Optional[TestDifficulty] = None
    tags: Optional[List[str]] = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def lowercase_difficulty(cls, value):
        return _lowercase(value)


class TestStatusUpdateRequest(BaseModel):
    status: TestStatus
