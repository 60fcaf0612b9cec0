"""
One-off sweep that reconciles the nested and flat layouts of stored tests
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .test_transformer import plan_structure_sync

logger = logging.getLogger(__name__)


@dataclass
class SweepError:
    document_id: str
    message: str


@dataclass
class SweepReport:
    total: int = 0
    updated: int = 0
    skipped: int = 0
    errors: List[SweepError] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)


async def sweep_test_structures(collection) -> SweepReport:
    """
    Apply the two-way layout sync to every document in ``collection``.

    ``collection`` is a raw Motor collection (documents are read without a
    schema so fields unknown to the model survive). Documents are handled
    one at a time; only those needing at least one copy are written. A
    failed write is recorded and the sweep moves on to the next document.
    """
    report = SweepReport()
    documents: List[Dict[str, Any]] = await collection.find({}).to_list(length=None)
    logger.info("Found %d tests to process", len(documents))

    for document in documents:
        report.total += 1
        title = document.get("title", "<untitled>")
        updates = plan_structure_sync(document)

        if not updates:
            report.skipped += 1
            continue

        for key in updates:
            logger.info("Adding %s to test: %s", key, title)

        try:
            await collection.update_one({"_id": document["_id"]}, {"$set": updates})
        except Exception as e:
            logger.error("Failed to update test %s: %s", document.get("_id"), e)
            report.errors.append(SweepError(str(document.get("_id")), str(e)))
            continue

        report.updated += 1
        logger.info("Updated test: %s", title)

    logger.info(
        "Migration completed: %d updated, %d unchanged, %d failed",
        report.updated,
        report.skipped,
        report.failed,
    )
    return report
