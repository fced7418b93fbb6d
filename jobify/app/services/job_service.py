"""
Job service business logic. Every lookup is filtered by (id, owner) in the query itself.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from jobify.app.core.config import settings
from jobify.app.core.errors import NotFoundError, ValidationError
from jobify.app.core.identity import Identity
from jobify.app.core.logging_config import get_logger
from jobify.app.models.job import Job
from jobify.app.schemas.job import PAYLOAD_TO_COLUMN, JobCreate, JobUpdate
from jobify.app.services.job_query import (
    JobQuery,
    PageRequest,
    build_filters,
    build_ordering,
    count_pages,
)
from jobify.app.services.job_stats import build_job_stats

logger = get_logger("services.jobs")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _missing_required(company: str | None, position: str | None) -> list[str]:
    return [name for name, value in (("company", company), ("position", position)) if _is_blank(value)]


def validate_create(payload: JobCreate) -> None:
    missing = _missing_required(payload.company, payload.position)
    if missing:
        raise ValidationError(", ".join(f"Please provide {name}" for name in missing))


def validate_update(payload: JobUpdate, strict: bool | None = None) -> None:
    """company and position are always required. strict also rejects an explicitly empty jobLocation."""
    strict_val = settings.strict_update_validation if strict is None else strict
    if _missing_required(payload.company, payload.position):
        raise ValidationError("Company or Position fields cannot be empty")
    if strict_val and "jobLocation" in payload.model_fields_set and _is_blank(payload.jobLocation):
        raise ValidationError("Job location cannot be empty")


class JobService:
    """Service for job operations. All methods take the caller identity explicitly."""

    @staticmethod
    def _owned(db: Session, identity: Identity, job_id: str):
        return db.query(Job).filter(Job.id == job_id, Job.created_by == identity.user_id)

    @staticmethod
    def list_jobs(db: Session, identity: Identity, query: JobQuery, page: PageRequest) -> dict:
        """Filtered, sorted page of the caller's jobs plus the total match count."""
        filters = build_filters(identity, query)
        jobs = (
            db.query(Job)
            .filter(*filters)
            .order_by(*build_ordering(query.sort))
            .offset(page.skip)
            .limit(page.limit)
            .all()
        )
        total_jobs = db.query(Job).filter(*filters).count()
        return {
            "jobs": jobs,
            "totalJobs": total_jobs,
            "numOfPages": count_pages(total_jobs, page.limit),
        }

    @staticmethod
    def get_job(db: Session, identity: Identity, job_id: str) -> Job:
        job = JobService._owned(db, identity, job_id).first()
        if not job:
            logger.info("Job not found user_id=%s job_id=%s", identity.user_id, job_id)
            raise NotFoundError(f"No job with id {job_id}")
        return job

    @staticmethod
    def create_job(db: Session, identity: Identity, payload: JobCreate) -> Job:
        """Create a job owned by the caller, whatever the body says."""
        validate_create(payload)
        job = Job(
            created_by=identity.user_id,
            company=payload.company,
            position=payload.position,
            status=payload.status,
            job_type=payload.jobType,
            job_location=(
                payload.jobLocation if payload.jobLocation is not None else settings.default_job_location
            ),
        )
        db.add(job)
        db.commit()
        db.refresh(job)
        logger.info("Job created user_id=%s job_id=%s company=%s", identity.user_id, job.id, job.company)
        return job

    @staticmethod
    def update_job(db: Session, identity: Identity, job_id: str, payload: JobUpdate) -> Job:
        """Apply the fields present in payload to the caller's job."""
        validate_update(payload)
        job = JobService.get_job(db, identity, job_id)
        for key, value in payload.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(job, PAYLOAD_TO_COLUMN[key], value)
        job.updated_at = datetime.utcnow()
        db.commit()
        db.refresh(job)
        logger.info("Job updated user_id=%s job_id=%s", identity.user_id, job.id)
        return job

    @staticmethod
    def delete_job(db: Session, identity: Identity, job_id: str) -> None:
        deleted = JobService._owned(db, identity, job_id).delete(synchronize_session=False)
        if not deleted:
            logger.info("Job not found for delete user_id=%s job_id=%s", identity.user_id, job_id)
            raise NotFoundError(f"No job with id {job_id}")
        db.commit()
        logger.info("Job deleted user_id=%s job_id=%s", identity.user_id, job_id)

    @staticmethod
    def show_stats(db: Session, identity: Identity) -> dict:
        return build_job_stats(db, identity)
