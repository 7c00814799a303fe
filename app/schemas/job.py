from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class JobPayload(BaseModel):
    """
    Schema for creating or editing a job.

    Every field is optional and may be empty; status is free text.
    """
    model_config = ConfigDict(extra="ignore")

    title: str = Field("", description="Role being applied for")
    company: str = Field("", description="Employer name")
    status: str = Field("", description="Application state, e.g. Applied, Interviewing, Rejected")


class JobResponse(BaseModel):
    """Schema for job response"""
    id: str
    title: str
    company: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InsertAcknowledgment(BaseModel):
    """Result of inserting a job"""
    inserted_id: str
    acknowledged: bool = True


class UpdateAcknowledgment(BaseModel):
    """Result of editing a job; zero counts mean no job had that id"""
    matched_count: int
    modified_count: int
    upserted_id: Optional[str] = None
    acknowledged: bool = True


class DeleteAcknowledgment(BaseModel):
    """Result of deleting a job; zero means no job had that id"""
    deleted_count: int
    acknowledged: bool = True
