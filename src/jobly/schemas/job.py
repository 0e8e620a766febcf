"""Job-related Pydantic schemas."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

# "0", "0.05", "1.0" ... a fraction of the company between 0 and 1
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"


def _equity_to_str(value):
    """Render NUMERIC column values (Decimal, float, int) as a plain decimal string."""
    if value is None or isinstance(value, str):
        return value
    return format(Decimal(str(value)), "f")


EquityStr = Annotated[str | None, BeforeValidator(_equity_to_str)]


class JobBase(BaseModel):
    """Base job schema with common fields."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)


class JobCreate(JobBase):
    """Schema for creating a new job."""

    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Schema for a partial job update; the owning company cannot change."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("title may not be null")
        return value


class JobFilter(BaseModel):
    """Optional search criteria for listing jobs."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    min_salary: int | None = Field(default=None, ge=0, alias="minSalary")
    has_equity: bool | None = Field(default=None, alias="hasEquity")


class JobSummary(BaseModel):
    """Job as listed under its company."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    salary: int | None
    equity: EquityStr


class Job(JobSummary):
    """Complete job schema with database fields."""

    company_handle: str


class JobResponse(BaseModel):
    """Single-job response envelope."""

    job: Job


class JobListResponse(BaseModel):
    """Job list response envelope."""

    jobs: list[Job]
