"""Services package."""

from jobly.services.company_service import CompanyService
from jobly.services.job_service import JobService

__all__ = ["CompanyService", "JobService"]
