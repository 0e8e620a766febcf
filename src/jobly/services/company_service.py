"""Company record access: CRUD over the companies table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobly.database import execute
from jobly.exceptions import BadRequestError, NotFoundError
from jobly.schemas.company import CompanyCreate, CompanyFilter, CompanyUpdate
from jobly.utils.slug import create_slug
from jobly.utils.sql import SqlFragment, build_filtered_query, like_pattern, sql_for_partial_update

logger = logging.getLogger(__name__)

# External field name -> column name; fields not listed share their name
COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COMPANY_FIELDS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


def company_filter_predicates(filters: CompanyFilter) -> list[tuple[str, Any]]:
    """
    Translate company search criteria into (expression, value) predicates.

    Emission order is fixed: minEmployees, maxEmployees, name. A bound of 0
    is a real bound.

    Raises:
        BadRequestError: If minEmployees is greater than maxEmployees
    """
    min_employees = filters.min_employees
    max_employees = filters.max_employees

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees must not be greater than maxEmployees")

    predicates: list[tuple[str, Any]] = []
    if min_employees is not None:
        predicates.append(("num_employees >= {}", min_employees))
    if max_employees is not None:
        predicates.append(("num_employees <= {}", max_employees))
    if filters.name:
        predicates.append(("LOWER(name) LIKE LOWER({}) ESCAPE '\\'", like_pattern(filters.name)))
    return predicates


def build_company_query(filters: CompanyFilter | None = None) -> SqlFragment:
    """Build the company list query for the given (optional) filters."""
    predicates = company_filter_predicates(filters) if filters else []
    return build_filtered_query(f"SELECT {_COMPANY_FIELDS} FROM companies", predicates, "ORDER BY name")


class CompanyService:
    """Service for creating, finding, updating and removing companies."""

    def __init__(self, db: Session):
        """
        Initialize the company service.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create(self, data: CompanyCreate) -> dict[str, Any]:
        """
        Create a company and return its data.

        Args:
            data: Validated company payload; a missing handle is derived from the name

        Returns:
            {handle, name, description, numEmployees, logoUrl}

        Raises:
            BadRequestError: If a company with the handle already exists
        """
        payload = data.model_dump(mode="json")
        handle = payload["handle"] or create_slug(payload["name"])
        if not handle:
            raise BadRequestError(f"Cannot derive a handle from name: {payload['name']!r}")

        duplicate = execute(self.db, "SELECT handle FROM companies WHERE handle = $1", [handle])
        if duplicate:
            raise BadRequestError(f"Duplicate company: {handle}")

        rows = execute(
            self.db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {_COMPANY_FIELDS}""",
            [handle, payload["name"], payload["description"], payload["num_employees"], payload["logo_url"]],
        )
        self.db.commit()
        logger.info("Created company %s", handle)
        return rows[0]

    def find_all(self, filters: CompanyFilter | None = None) -> list[dict[str, Any]]:
        """
        List companies ordered by name, optionally filtered.

        Raises:
            BadRequestError: If minEmployees is greater than maxEmployees
        """
        query = build_company_query(filters)
        return execute(self.db, query.sql, query.values)

    def get(self, handle: str) -> dict[str, Any]:
        """
        Get a company and the jobs it offers.

        Returns:
            {handle, name, description, numEmployees, logoUrl, jobs}
            where jobs is [{id, title, salary, equity}, ...]

        Raises:
            NotFoundError: If no company has the handle
        """
        rows = execute(self.db, f"SELECT {_COMPANY_FIELDS} FROM companies WHERE handle = $1", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        company = rows[0]
        company["jobs"] = execute(
            self.db,
            "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
            [handle],
        )
        return company

    def update(self, handle: str, data: CompanyUpdate) -> dict[str, Any]:
        """
        Partially update a company; only the fields present in ``data`` change.

        Raises:
            BadRequestError: If ``data`` sets no fields
            NotFoundError: If no company has the handle
        """
        changes = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        set_clause, values = sql_for_partial_update(changes, COMPANY_COLUMNS)
        handle_idx = f"${len(values) + 1}"

        rows = execute(
            self.db,
            f"""UPDATE companies
                SET {set_clause}
                WHERE handle = {handle_idx}
                RETURNING {_COMPANY_FIELDS}""",
            [*values, handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        self.db.commit()
        logger.info("Updated company %s: %s", handle, ", ".join(changes))
        return rows[0]

    def remove(self, handle: str) -> None:
        """
        Delete a company; its jobs go with it.

        Raises:
            NotFoundError: If no company has the handle
        """
        rows = execute(self.db, "DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        self.db.commit()
        logger.info("Deleted company %s", handle)
