"""
Script to insert a handful of sample jobs.

Uses the same connection bootstrap and CRUD layer as the API, so it needs
MONGODB_URI set (or present in .env).

Run this script from the project root:
    python seed_jobs.py
"""

import sys

from app.core.config import settings
from app.core.database import close_db, connect_db, get_jobs_collection
from app.core.errors import DatabaseConfigurationError, DatabaseConnectionError
from app.core.logging_config import get_logger, setup_logging
from app.crud import job as job_crud
from app.schemas.job import JobPayload

logger = get_logger(__name__)

SAMPLE_JOBS = [
    JobPayload(title="Senior Frontend Developer", company="Blockpour", status="Applied"),
    JobPayload(title="Go Developer", company="Kidsloop", status="Interviewing"),
    JobPayload(title="AWS Engineer", company="On the beach", status="Rejected"),
]


def seed_jobs() -> int:
    """Insert SAMPLE_JOBS and return the process exit code."""
    try:
        client = connect_db(settings)
    except (DatabaseConfigurationError, DatabaseConnectionError) as e:
        print(f"\n❌ {e}")
        return 1

    try:
        collection = get_jobs_collection(client, settings)
        inserted_ids = job_crud.create_many(collection, SAMPLE_JOBS)

        print(f"\n{'='*60}")
        print(f"Inserted {len(inserted_ids)} jobs into {settings.MONGODB_DB}.{settings.MONGODB_COLLECTION}")
        print(f"{'='*60}\n")
        for job, job_id in zip(SAMPLE_JOBS, inserted_ids):
            print(f"  ✓ {job_id}  {job.title} @ {job.company} ({job.status})")

        logger.info(f"Seeded {len(inserted_ids)} jobs")
        return 0
    finally:
        close_db(client)


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    sys.exit(seed_jobs())
