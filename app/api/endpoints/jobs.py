import logging
import re
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.collection import Collection

from app.core.database import get_collection
from app.crud import job as job_crud
from app.schemas.job import (
    DeleteAcknowledgment,
    InsertAcknowledgment,
    JobPayload,
    JobResponse,
    UpdateAcknowledgment,
)

router = APIRouter(tags=["Jobs"])
logger = logging.getLogger(__name__)

# Largest value the driver can encode as a BSON int64
MAX_LIMIT = 2**63 - 1
LIMIT_PATTERN = re.compile(r"[0-9]+")


def parse_limit(limit: Optional[str]) -> int:
    """
    Turn the raw limit query parameter into a result cap.

    Absent, empty or 0 means no cap. Only plain decimal digits are accepted
    (no sign, whitespace or underscores), up to the int64 maximum.
    """
    if limit is None or limit == "":
        return 0

    if not LIMIT_PATTERN.fullmatch(limit):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit must be a non-negative integer, got {limit!r}"
        )

    value = int(limit)
    if value > MAX_LIMIT:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit must not exceed {MAX_LIMIT}"
        )

    return value


@router.get("/get-jobs", response_model=list[JobResponse])
def list_jobs(
    limit: Optional[str] = None,
    collection: Collection = Depends(get_collection)
):
    """
    List jobs, most recently updated first.

    Args:
        limit: Maximum number of jobs to return (omit or 0 for all)
    """
    jobs = job_crud.get_multi(collection, limit=parse_limit(limit))
    logger.debug(f"Listed {len(jobs)} jobs (limit={limit})")
    return jobs


@router.get("/get-job/{job_id}", response_model=JobResponse)
def get_job(job_id: str, collection: Collection = Depends(get_collection)):
    """
    Retrieve a job by ID.

    Returns 400 for an id that is not a valid ObjectId and 404 when no job has it.
    """
    job = job_crud.get_by_id(collection, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("/add-job", status_code=201, response_model=InsertAcknowledgment)
def create_job(
    request: JobPayload,
    collection: Collection = Depends(get_collection)
):
    """
    Create a new job.

    The id, created_at and updated_at are assigned here; created_at and
    updated_at start out equal.
    """
    result = job_crud.create(collection, request)

    logger.info(f"Created job {result.inserted_id}: {request.title} @ {request.company}")

    return InsertAcknowledgment(
        inserted_id=str(result.inserted_id),
        acknowledged=result.acknowledged
    )


@router.post("/edit-job/{job_id}", response_model=UpdateAcknowledgment)
def edit_job(
    job_id: str,
    request: JobPayload,
    collection: Collection = Depends(get_collection)
):
    """
    Replace a job's title, company and status and refresh updated_at.

    Editing an id that matches nothing is not an error: the acknowledgment
    reports matched_count=0.
    """
    result = job_crud.update(collection, job_id, request)

    if result.matched_count == 0:
        logger.info(f"Edit of job {job_id} matched nothing")
    else:
        logger.info(f"Edited job {job_id}")

    return UpdateAcknowledgment(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_id=str(result.upserted_id) if result.upserted_id is not None else None,
        acknowledged=result.acknowledged
    )


@router.delete("/delete-job/{job_id}", response_model=DeleteAcknowledgment)
def delete_job(job_id: str, collection: Collection = Depends(get_collection)):
    """
    Delete a job by ID.

    Deleting an id that matches nothing reports deleted_count=0.
    """
    result = job_crud.delete(collection, job_id)

    logger.info(f"Deleted job {job_id} (deleted_count={result.deleted_count})")

    return DeleteAcknowledgment(
        deleted_count=result.deleted_count,
        acknowledged=result.acknowledged
    )
