"""
Pytest configuration and shared fixtures

Settings are read at import time, so the environment is prepared before any
``app`` module is imported.
"""
import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/ielts_admin_test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from beanie import init_beanie  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from app.models import test as test_model  # noqa: E402
from app.models.admin_action import AdminAction  # noqa: E402
from app.models.user import User  # noqa: E402


@pytest.fixture
async def beanie_db():
    """Beanie bound to a fresh in-memory Mongo database"""
    database = AsyncMongoMockClient()["ielts_admin_test"]
    await init_beanie(
        database=database, document_models=[User, test_model.Test, AdminAction]
    )
    yield database


@pytest.fixture
def nested_test():
    """A test stored only in the legacy nested layout"""
    return {
        "title": "Academic Mock 1",
        "description": "Nested only",
        "reading": {
            "sections": [
                {
                    "id": "section-r1",
                    "title": "Passage 1",
                    "passage": "Bees...",
                    "suggestedTime": 20,
                    "questions": [
                        {
                            "id": "question-r1",
                            "type": "true_false_not_given",
                            "order": 1,
                            "content": {"question": "Bees sleep.", "answer": "True"},
                        }
                    ],
                }
            ],
            "totalTime": 60,
        },
        "writing": {
            "tasks": [
                {"id": "task-w1", "taskNumber": 1, "timeLimit": 20, "minWords": 150}
            ],
            "totalTime": 60,
        },
    }


@pytest.fixture
def flat_test():
    """A test stored only in the flat layout"""
    return {
        "title": "General Mock 2",
        "listeningSections": [
            {"id": "section-l1", "title": "Part 1", "suggestedTime": 8, "questions": []},
            {"id": "section-l2", "title": "Part 2", "questions": []},
        ],
        "speakingParts": [
            {"id": "part-s1", "partNumber": 1, "speakingTime": 270, "questions": []},
            {"id": "part-s2", "partNumber": 2, "timeLimit": 4, "questions": []},
        ],
    }
