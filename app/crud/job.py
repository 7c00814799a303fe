"""
CRUD operations for Job documents.

Implements the Repository pattern to encapsulate all collection operations
for jobs, providing a clean interface for the API layer. Each function issues
exactly one collection call; driver errors propagate to the caller.
"""

from typing import Any, Dict, List, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.core.errors import InvalidJobIdError
from app.models.job import JOB_FIELDS, job_from_document, new_job_document, utcnow
from app.schemas.job import JobPayload


def parse_job_id(job_id: str) -> ObjectId:
    """
    Convert a path id into an ObjectId.

    Raises:
        InvalidJobIdError: If job_id is not a 24-character hex string
    """
    if not isinstance(job_id, str):
        raise InvalidJobIdError(str(job_id))
    try:
        return ObjectId(job_id)
    except (InvalidId, TypeError):
        raise InvalidJobIdError(job_id)


def get_multi(collection: Collection, limit: int = 0) -> List[Dict[str, Any]]:
    """
    Retrieve jobs, most recently updated first.

    Args:
        collection: Jobs collection
        limit: Maximum number of jobs to return (0 means no limit)

    Returns:
        List of jobs in API shape
    """
    cursor = collection.find({}).sort("updated_at", DESCENDING).limit(limit)
    return [job_from_document(document) for document in cursor]


def get_by_id(collection: Collection, job_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve a job by its ID.

    Returns:
        Job in API shape if found, None otherwise
    """
    document = collection.find_one({"_id": parse_job_id(job_id)})
    if document is None:
        return None
    return job_from_document(document)


def create(collection: Collection, job_data: JobPayload) -> InsertOneResult:
    """
    Insert a new job with a fresh id and matching created_at/updated_at.

    Returns:
        The driver's insertion result, carrying the new id
    """
    document = new_job_document(
        title=job_data.title,
        company=job_data.company,
        status=job_data.status,
    )
    return collection.insert_one(document)


def update(collection: Collection, job_id: str, job_data: JobPayload) -> UpdateResult:
    """
    Replace title, company and status and refresh updated_at.

    Only those four fields are $set; created_at is left alone. Matching no
    document is not an error, the result simply reports zero counts.

    Stored timestamps have millisecond resolution, so an edit landing in the
    same millisecond as the previous write leaves updated_at unchanged.
    """
    object_id = parse_job_id(job_id)
    changes = {field: getattr(job_data, field) for field in JOB_FIELDS}
    changes["updated_at"] = utcnow()
    return collection.update_one({"_id": object_id}, {"$set": changes})


def delete(collection: Collection, job_id: str) -> DeleteResult:
    """
    Delete a job by ID.

    Returns:
        The driver's deletion result; deleted_count is 0 if nothing matched
    """
    return collection.delete_one({"_id": parse_job_id(job_id)})


def create_many(collection: Collection, jobs: List[JobPayload]) -> List[ObjectId]:
    """
    Insert several jobs at once, each stamped with the same timestamp.

    Returns:
        Ids of the inserted jobs, in input order
    """
    if not jobs:
        return []
    now = utcnow()
    documents = [
        new_job_document(job.title, job.company, job.status, now=now)
        for job in jobs
    ]
    return collection.insert_many(documents).inserted_ids
