"""Jobs API router - create, list, detail, update and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.auth import ensure_admin
from jobly.database import get_db
from jobly.schemas.job import JobCreate, JobFilter, JobListResponse, JobResponse, JobUpdate
from jobly.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobResponse, status_code=201, dependencies=[Depends(ensure_admin)])
def create_job(data: JobCreate, db: Session = Depends(get_db)) -> dict:
    """
    Create a job at an existing company.

    Authorization required: admin

    Raises:
        BadRequestError: If the title is taken or the company does not exist.
    """
    return {"job": JobService(db).create(data)}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: str | None = Query(default=None),
    min_salary: int | None = Query(default=None, ge=0, alias="minSalary"),
    has_equity: bool | None = Query(default=None, alias="hasEquity"),
    db: Session = Depends(get_db),
) -> dict:
    """
    List jobs ordered by title.

    Optional filters: ``title`` (case-insensitive substring), ``minSalary``
    (inclusive) and ``hasEquity`` (only jobs with non-zero equity when true).
    """
    filters = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": JobService(db).find_all(filters)}


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)) -> dict:
    """
    Get a job by id.

    Raises:
        NotFoundError: If the job does not exist.
    """
    return {"job": JobService(db).get(job_id)}


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[Depends(ensure_admin)])
def update_job(job_id: int, data: JobUpdate, db: Session = Depends(get_db)) -> dict:
    """
    Partially update a job: title, salary, equity.

    Authorization required: admin
    """
    return {"job": JobService(db).update(job_id, data)}


@router.delete("/{job_id}", dependencies=[Depends(ensure_admin)])
def delete_job(job_id: int, db: Session = Depends(get_db)) -> dict[str, int]:
    """
    Delete a job.

    Authorization required: admin
    """
    JobService(db).remove(job_id)
    return {"deleted": job_id}
