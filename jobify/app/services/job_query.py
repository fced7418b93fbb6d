"""
Job list query building: owner-scoped filters, sort order and page bounds.
"""
from dataclasses import dataclass

from jobify.app.core.config import ALL_SENTINEL, MAX_PAGE_PARAM, SORT_OPTIONS, settings
from jobify.app.core.identity import Identity
from jobify.app.models.job import Job

_LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class JobQuery:
    """List filters. None means "no constraint" for every field."""
    search: str | None = None
    status: str | None = None
    job_type: str | None = None
    sort: str | None = None

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        status: str | None = None,
        job_type: str | None = None,
        sort: str | None = None,
    ) -> "JobQuery":
        """Build from raw query-string values; "all" and empty strings become None."""
        return cls(
            search=search or None,
            status=_drop_sentinel(status),
            job_type=_drop_sentinel(job_type),
            sort=sort or None,
        )


def _drop_sentinel(value: str | None) -> str | None:
    if not value or value == ALL_SENTINEL:
        return None
    return value


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def build_filters(identity: Identity, query: JobQuery) -> list:
    """Filter criteria for a list query. Owner scope is always the first criterion."""
    filters = [Job.created_by == identity.user_id]
    if query.search:
        filters.append(Job.position.ilike(f"%{escape_like(query.search)}%", escape=_LIKE_ESCAPE))
    # Unknown status/jobType strings are applied as-is and simply match nothing.
    if query.status:
        filters.append(Job.status == query.status)
    if query.job_type:
        filters.append(Job.job_type == query.job_type)
    return filters


def build_ordering(sort: str | None) -> list:
    """ORDER BY clauses for a sort value; empty for absent or unrecognized values."""
    option = SORT_OPTIONS.get(sort or "")
    if option is None:
        return []
    attr, descending = option
    column = getattr(Job, attr)
    return [column.desc() if descending else column.asc()]


def parse_positive_int(raw: str | int | None, default: int) -> int:
    """Parse a query-string number. Absent, non-numeric, < 1 or > MAX_PAGE_PARAM falls back to default."""
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if 0 < value <= MAX_PAGE_PARAM else default


def count_pages(total: int, limit: int) -> int:
    """ceil(total / limit)"""
    return -(-total // limit)


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(cls, page: str | int | None = None, limit: str | int | None = None) -> "PageRequest":
        return cls(
            page=parse_positive_int(page, settings.jobs_default_page),
            limit=parse_positive_int(limit, settings.jobs_default_limit),
        )
