"""
Job Pydantic schemas - camelCase wire format used by the frontend
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

JobStatus = Literal["pending", "interview", "declined"]
JobType = Literal["full-time", "part-time", "remote", "internship"]


class JobCreate(BaseModel):
    """Schema for creating a job. Unknown keys (e.g. createdBy) are dropped."""
    company: Optional[str] = Field(None, max_length=50)
    position: Optional[str] = Field(None, max_length=100)
    status: JobStatus = "pending"
    jobType: JobType = "full-time"
    jobLocation: Optional[str] = None

    model_config = {"extra": "ignore"}


class JobUpdate(BaseModel):
    """Schema for updating a job. Only keys present in the body are applied."""
    company: Optional[str] = Field(None, max_length=50)
    position: Optional[str] = Field(None, max_length=100)
    status: Optional[JobStatus] = None
    jobType: Optional[JobType] = None
    jobLocation: Optional[str] = None

    model_config = {"extra": "ignore"}


class JobOut(BaseModel):
    id: str
    company: str
    position: str
    status: str
    jobType: str
    jobLocation: str
    createdBy: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class JobResponse(BaseModel):
    job: JobOut


class JobListResponse(BaseModel):
    jobs: List[JobOut] = Field(default_factory=list)
    totalJobs: int = 0
    numOfPages: int = 0


class DefaultStats(BaseModel):
    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplication(BaseModel):
    date: str
    count: int


class JobStatsResponse(BaseModel):
    defaultStats: DefaultStats = Field(default_factory=DefaultStats)
    monthlyApplications: List[MonthlyApplication] = Field(default_factory=list)


# JobUpdate/JobCreate key -> Job column attribute
PAYLOAD_TO_COLUMN: dict[str, str] = {
    "company": "company",
    "position": "position",
    "status": "status",
    "jobType": "job_type",
    "jobLocation": "job_location",
}


def job_model_to_payload(job) -> JobOut:
    """Convert Job DB model to JobOut schema"""
    return JobOut(
        id=job.id,
        company=job.company,
        position=job.position,
        status=job.status,
        jobType=job.job_type,
        jobLocation=job.job_location,
        createdBy=job.created_by,
        createdAt=job.created_at,
        updatedAt=job.updated_at,
    )
