"""
Job document layout in the MongoDB "jobs" collection.

    {
        "_id": ObjectId,
        "title": str,
        "company": str,
        "status": str,
        "created_at": datetime,
        "updated_at": datetime,
    }

BSON keeps datetimes at millisecond precision and, unless the client is
tz-aware, hands them back naive. Naive values are read as UTC.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from bson import ObjectId

# Fields a client may write
JOB_FIELDS = ("title", "company", "status")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def new_job_document(
    title: str,
    company: str,
    status: str,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Build a document for insertion with a fresh id.

    created_at and updated_at share one timestamp so they compare equal.
    """
    now = now or utcnow()
    return {
        "_id": ObjectId(),
        "title": title,
        "company": company,
        "status": status,
        "created_at": now,
        "updated_at": now,
    }


def job_from_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a stored document into the API's Job shape."""
    return {
        "id": str(document["_id"]),
        "title": document.get("title", ""),
        "company": document.get("company", ""),
        "status": document.get("status", ""),
        "created_at": _as_utc(document.get("created_at")),
        "updated_at": _as_utc(document.get("updated_at")),
    }
