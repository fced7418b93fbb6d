"""
Job statistics - status summary and recent monthly application counts, scoped to one owner.
"""
from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from jobify.app.core.config import JOB_STATUSES, settings
from jobify.app.core.identity import Identity
from jobify.app.models.job import Job

# Fixed English abbreviations; strftime("%b") would follow the process locale.
MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def month_label(year: int, month: int) -> str:
    """(2024, 3) -> "Mar 2024" """
    return f"{MONTH_ABBR[int(month) - 1]} {int(year)}"


def status_counts(db: Session, identity: Identity) -> dict[str, int]:
    """Count the caller's jobs per status string."""
    rows = (
        db.query(Job.status, func.count(Job.id))
        .filter(Job.created_by == identity.user_id)
        .group_by(Job.status)
        .all()
    )
    return {row[0]: row[1] for row in rows}


def default_stats(counts: dict[str, int]) -> dict[str, int]:
    """Reshape status counts to exactly pending/interview/declined; other statuses are dropped."""
    return {s: counts.get(s, 0) for s in JOB_STATUSES}


def recent_month_counts(
    db: Session, identity: Identity, months: int | None = None
) -> list[tuple[int, int, int]]:
    """(year, month, count) for the caller's most recent months with jobs, newest first."""
    months_val = months if months is not None else settings.stats_recent_months
    year = extract("year", Job.created_at).label("year")
    month = extract("month", Job.created_at).label("month")
    rows = (
        db.query(year, month, func.count(Job.id).label("count"))
        .filter(Job.created_by == identity.user_id, Job.created_at.isnot(None))
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
        .limit(months_val)
        .all()
    )
    return [(int(r[0]), int(r[1]), int(r[2])) for r in rows]


def monthly_series(rows: list[tuple[int, int, int]]) -> list[dict]:
    """Label newest-first (year, month, count) rows and return them oldest first."""
    return [{"date": month_label(y, m), "count": c} for y, m, c in rows][::-1]


def build_job_stats(db: Session, identity: Identity) -> dict:
    return {
        "defaultStats": default_stats(status_counts(db, identity)),
        "monthlyApplications": monthly_series(recent_month_counts(db, identity)),
    }
