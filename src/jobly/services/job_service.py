"""Job record access: CRUD over the jobs table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobly.database import execute
from jobly.exceptions import BadRequestError, NotFoundError
from jobly.schemas.job import JobCreate, JobFilter, JobUpdate
from jobly.utils.sql import SqlFragment, build_filtered_query, like_pattern, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_JOB_FIELDS = "id, title, salary, equity, company_handle"


def job_filter_predicates(filters: JobFilter) -> list[tuple[str, Any]]:
    """
    Translate job search criteria into (expression, value) predicates.

    Emission order is fixed: title, minSalary, hasEquity. ``hasEquity`` adds a
    predicate only when true; it excludes both NULL and zero equity.
    """
    predicates: list[tuple[str, Any]] = []
    if filters.title:
        predicates.append(("LOWER(title) LIKE LOWER({}) ESCAPE '\\'", like_pattern(filters.title)))
    if filters.min_salary is not None:
        predicates.append(("salary >= {}", filters.min_salary))
    if filters.has_equity:
        predicates.append(("equity IS NOT NULL AND equity > {}", 0))
    return predicates


def build_job_query(filters: JobFilter | None = None) -> SqlFragment:
    """Build the job list query for the given (optional) filters."""
    predicates = job_filter_predicates(filters) if filters else []
    return build_filtered_query(f"SELECT {_JOB_FIELDS} FROM jobs", predicates, "ORDER BY title")


class JobService:
    """Service for creating, finding, updating and removing jobs."""

    def __init__(self, db: Session):
        self.db = db

    def _ensure_title_free(self, title: str, exclude_id: int | None = None) -> None:
        """Raise BadRequestError if another job already uses ``title``."""
        if exclude_id is None:
            rows = execute(self.db, "SELECT id FROM jobs WHERE title = $1", [title])
        else:
            rows = execute(self.db, "SELECT id FROM jobs WHERE title = $1 AND id <> $2", [title, exclude_id])
        if rows:
            raise BadRequestError(f"Duplicate job: {title}")

    def create(self, data: JobCreate) -> dict[str, Any]:
        """
        Create a job and return its data.

        Returns:
            {id, title, salary, equity, company_handle}

        Raises:
            BadRequestError: If the title is taken or the company does not exist
        """
        self._ensure_title_free(data.title)

        company = execute(self.db, "SELECT handle FROM companies WHERE handle = $1", [data.company_handle])
        if not company:
            raise BadRequestError(f"No company: {data.company_handle}")

        rows = execute(
            self.db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {_JOB_FIELDS}""",
            [data.title, data.salary, data.equity, data.company_handle],
        )
        self.db.commit()
        job = rows[0]
        logger.info("Created job %s (%s) at %s", job["id"], data.title, data.company_handle)
        return job

    def find_all(self, filters: JobFilter | None = None) -> list[dict[str, Any]]:
        """List jobs ordered by title, optionally filtered."""
        query = build_job_query(filters)
        return execute(self.db, query.sql, query.values)

    def get(self, job_id: int) -> dict[str, Any]:
        """
        Get a job by id.

        Raises:
            NotFoundError: If no job has the id
        """
        rows = execute(self.db, f"SELECT {_JOB_FIELDS} FROM jobs WHERE id = $1", [job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return rows[0]

    def update(self, job_id: int, data: JobUpdate) -> dict[str, Any]:
        """
        Partially update a job's title, salary or equity.

        Raises:
            BadRequestError: If ``data`` sets no fields or renames onto a taken title
            NotFoundError: If no job has the id
        """
        changes = data.model_dump(exclude_unset=True)
        set_clause, values = sql_for_partial_update(changes, JOB_COLUMNS)
        if "title" in changes:
            self.get(job_id)
            self._ensure_title_free(changes["title"], exclude_id=job_id)

        id_idx = f"${len(values) + 1}"
        rows = execute(
            self.db,
            f"UPDATE jobs SET {set_clause} WHERE id = {id_idx} RETURNING {_JOB_FIELDS}",
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        self.db.commit()
        logger.info("Updated job %s: %s", job_id, ", ".join(changes))
        return rows[0]

    def remove(self, job_id: int) -> None:
        """
        Delete a job.

        Raises:
            NotFoundError: If no job has the id
        """
        rows = execute(self.db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        self.db.commit()
        logger.info("Deleted job %s", job_id)
