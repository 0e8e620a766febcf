"""Companies API router - create, list, detail, update and delete endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.auth import ensure_admin
from jobly.database import get_db
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyFilter,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=201,
    dependencies=[Depends(ensure_admin)],
)
def create_company(data: CompanyCreate, db: Session = Depends(get_db)) -> dict:
    """
    Create a company.

    Authorization required: admin

    Raises:
        BadRequestError: If the handle is already taken.
    """
    return {"company": CompanyService(db).create(data)}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: str | None = Query(default=None),
    min_employees: int | None = Query(default=None, ge=0, alias="minEmployees"),
    max_employees: int | None = Query(default=None, ge=0, alias="maxEmployees"),
    db: Session = Depends(get_db),
) -> dict:
    """
    List companies ordered by name.

    Optional filters: ``name`` (case-insensitive substring), ``minEmployees``
    and ``maxEmployees`` (inclusive bounds).

    Raises:
        BadRequestError: If minEmployees is greater than maxEmployees.
    """
    filters = CompanyFilter(name=name, min_employees=min_employees, max_employees=max_employees)
    return {"companies": CompanyService(db).find_all(filters)}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, db: Session = Depends(get_db)) -> dict:
    """
    Get a company with the jobs it offers.

    Raises:
        NotFoundError: If the company does not exist.
    """
    return {"company": CompanyService(db).get(handle)}


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(ensure_admin)])
def update_company(handle: str, data: CompanyUpdate, db: Session = Depends(get_db)) -> dict:
    """
    Partially update a company: name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    return {"company": CompanyService(db).update(handle, data)}


@router.delete("/{handle}", dependencies=[Depends(ensure_admin)])
def delete_company(handle: str, db: Session = Depends(get_db)) -> dict[str, str]:
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    CompanyService(db).remove(handle)
    return {"deleted": handle}
