"""Pydantic schemas package."""

from jobly.schemas.company import (
    Company,
    CompanyBase,
    CompanyCreate,
    CompanyDetail,
    CompanyDetailResponse,
    CompanyFilter,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.schemas.job import (
    Job,
    JobBase,
    JobCreate,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobSummary,
    JobUpdate,
)

__all__ = [
    "Company",
    "CompanyBase",
    "CompanyCreate",
    "CompanyDetail",
    "CompanyDetailResponse",
    "CompanyFilter",
    "CompanyListResponse",
    "CompanyResponse",
    "CompanyUpdate",
    "Job",
    "JobBase",
    "JobCreate",
    "JobFilter",
    "JobListResponse",
    "JobResponse",
    "JobSummary",
    "JobUpdate",
]
