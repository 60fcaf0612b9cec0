#!/usr/bin/env python3
"""
Script to reconcile the nested and flat skill layouts of every stored test.

For each test, a skill held only in ``reading.sections`` (and friends) is
copied to ``readingSections`` (and friends), and the other way round. Tests
that already hold both layouts are left untouched.

Usage:
    python scripts/migrate_test_structure.py

Requirements:
    - .env file with MONGO_URI (same as main app)
"""

import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from app.config import settings
from app.db import get_database, close_client
from app.services.migration_service import sweep_test_structures


async def migrate_test_structures():
    print("🔄 Initializing database connection...")
    db = await get_database()

    try:
        print("🚀 Starting test structure migration...")
        report = await sweep_test_structures(db["tests"])
    finally:
        close_client()
        print("🔌 Database connection closed")

    print("🎉 Migration completed!")
    print(f"   ✅ Updated: {report.updated} tests")
    print(f"   ⏭️  Unchanged: {report.skipped} tests")
    print(f"   📊 Total: {report.total} tests")

    if report.errors:
        print(f"   ❌ Failed: {report.failed} tests")
        for error in report.errors:
            print(f"      {error.document_id}: {error.message}")

    return report


if __name__ == "__main__":
    print("🎯 Test Structure Migration Script")
    print("=" * 50)
    print(f"📊 MongoDB URI: {settings.MONGO_URI[:20]}... (masked)")
    print()

    try:
        report = asyncio.run(migrate_test_structures())
    except Exception as e:
        print(f"\n❌ Error occurred: {str(e)}")
        sys.exit(1)

    sys.exit(1 if report.errors else 0)
