"""
Migration sweep over an in-memory stand-in for the Motor collection
"""
import pytest

from app.services.migration_service import sweep_test_structures


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        return [dict(document) for document in self._documents]


class FakeCollection:
    """Implements the two Motor calls the sweep relies on"""

    def __init__(self, documents, failing_ids=()):
        self.documents = {document["_id"]: document for document in documents}
        self.failing_ids = set(failing_ids)
        self.updates = []

    def find(self, query):
        assert query == {}
        return FakeCursor(list(self.documents.values()))

    async def update_one(self, query, update):
        document_id = query["_id"]
        if document_id in self.failing_ids:
            raise RuntimeError("write conflict")
        self.updates.append((document_id, update))
        self.documents[document_id].update(update["$set"])


@pytest.mark.asyncio
async def test_flat_writing_tasks_copied_to_nested():
    tasks = [{"id": "task-1", "taskNumber": 1, "timeLimit": 20}]
    collection = FakeCollection([{"_id": 1, "title": "W", "writing": {}, "writingTasks": tasks}])

    report = await sweep_test_structures(collection)

    assert report.updated == 1
    assert collection.documents[1]["writing"]["tasks"] == tasks
    assert collection.documents[1]["writing"]["totalTime"] == 20


@pytest.mark.asyncio
async def test_only_dirty_documents_are_written(nested_test, flat_test):
    consistent = {
        "_id": 3,
        "title": "Done",
        "reading": {"sections": [{"id": "section-1"}]},
        "readingSections": [{"id": "section-1"}],
    }
    collection = FakeCollection(
        [
            {"_id": 1, **nested_test},
            {"_id": 2, **flat_test},
            consistent,
            {"_id": 4, "title": "Empty"},
        ]
    )

    report = await sweep_test_structures(collection)

    assert report.total == 4
    assert report.updated == 2
    assert report.skipped == 2
    assert [document_id for document_id, _ in collection.updates] == [1, 2]
    assert set(collection.updates[0][1]["$set"]) == {"readingSections", "writingTasks"}
    assert set(collection.updates[1][1]["$set"]) == {"listening", "speaking"}


@pytest.mark.asyncio
async def test_second_sweep_changes_nothing(nested_test, flat_test):
    collection = FakeCollection([{"_id": 1, **nested_test}, {"_id": 2, **flat_test}])

    await sweep_test_structures(collection)
    report = await sweep_test_structures(collection)

    assert report.updated == 0
    assert report.skipped == 2


@pytest.mark.asyncio
async def test_failed_write_does_not_stop_the_sweep(nested_test, flat_test):
    collection = FakeCollection(
        [{"_id": 1, **nested_test}, {"_id": 2, **flat_test}], failing_ids={1}
    )

    report = await sweep_test_structures(collection)

    assert report.updated == 1
    assert report.failed == 1
    assert report.errors[0].document_id == "1"
    assert report.errors[0].message == "write conflict"
    assert "listening" in collection.documents[2]


@pytest.mark.asyncio
async def test_empty_collection():
    report = await sweep_test_structures(FakeCollection([]))

    assert (report.total, report.updated, report.skipped, report.failed) == (0, 0, 0, 0)
