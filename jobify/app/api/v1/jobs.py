"""
Jobs API - list/filter/paginate, stats, and owner-scoped CRUD
"""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobify.app.core.dependencies import get_current_identity, get_db, require_writable_identity
from jobify.app.core.identity import Identity
from jobify.app.schemas.job import (
    JobCreate,
    JobListResponse,
    JobResponse,
    JobStatsResponse,
    JobUpdate,
    job_model_to_payload,
)
from jobify.app.services.job_query import JobQuery, PageRequest
from jobify.app.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    job_type: str | None = Query(None, alias="jobType"),
    sort: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """
    List the caller's jobs.

    - **search**: case-insensitive substring of position
    - **status** / **jobType**: exact match, "all" for no filter
    - **sort**: latest, oldest, a-z, z-a (anything else leaves storage order)
    - **page** / **limit**: 1-based page, page size (defaults 1 and 10)
    """
    query = JobQuery.from_params(search=search, status=status_filter, job_type=job_type, sort=sort)
    result = JobService.list_jobs(db, identity, query, PageRequest.from_params(page, limit))
    return JobListResponse(
        jobs=[job_model_to_payload(j) for j in result["jobs"]],
        totalJobs=result["totalJobs"],
        numOfPages=result["numOfPages"],
    )


@router.get("/stats", response_model=JobStatsResponse)
def show_stats(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Status summary and the last six months with applications, oldest first."""
    return JobService.show_stats(db, identity)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    job = JobService.get_job(db, identity, job_id)
    return JobResponse(job=job_model_to_payload(job))


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_writable_identity),
):
    """Create a job owned by the caller."""
    job = JobService.create_job(db, identity, payload)
    return JobResponse(job=job_model_to_payload(job))


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    payload: JobUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_writable_identity),
):
    """Partial update; company and position must be present and non-empty."""
    job = JobService.update_job(db, identity, job_id, payload)
    return JobResponse(job=job_model_to_payload(job))


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_writable_identity),
):
    JobService.delete_job(db, identity, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
