"""
Document models package.
"""

from app.models.job import JOB_FIELDS, new_job_document, job_from_document

__all__ = ["JOB_FIELDS", "new_job_document", "job_from_document"]
