"""
Job - one tracked job application, owned by the user who created it
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String

from jobify.app.core.config import settings
from jobify.app.db.base import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(32), primary_key=True, default=_new_id)
    created_by = Column(String(64), nullable=False, index=True)

    company = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, interview, declined
    job_type = Column(String(20), nullable=False, default="full-time")  # full-time, part-time, remote, internship
    job_location = Column(String(255), nullable=False, default=lambda: settings.default_job_location)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
