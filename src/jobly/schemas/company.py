"""Company Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobly.schemas.job import JobSummary

# Absolute http(s) URL; stored exactly as sent
LOGO_URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"


class CompanyBase(BaseModel):
    """Base company schema with common fields."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0, alias="numEmployees")
    logo_url: str | None = Field(default=None, max_length=2048, pattern=LOGO_URL_PATTERN, alias="logoUrl")


class CompanyCreate(CompanyBase):
    """Schema for creating a new company; the handle defaults to a slug of the name."""

    handle: str | None = Field(default=None, min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")


class CompanyUpdate(BaseModel):
    """Schema for a partial company update; the handle is immutable."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0, alias="numEmployees")
    logo_url: str | None = Field(default=None, max_length=2048, pattern=LOGO_URL_PATTERN, alias="logoUrl")

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("field may not be null")
        return value


class CompanyFilter(BaseModel):
    """Optional search criteria for listing companies."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    min_employees: int | None = Field(default=None, ge=0, alias="minEmployees")
    max_employees: int | None = Field(default=None, ge=0, alias="maxEmployees")


class Company(BaseModel):
    """Complete company schema with database fields."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    handle: str
    name: str
    description: str
    num_employees: int | None = Field(default=None, alias="numEmployees")
    logo_url: str | None = Field(default=None, alias="logoUrl")


class CompanyDetail(Company):
    """Company with the jobs it offers."""

    jobs: list[JobSummary] = []


class CompanyResponse(BaseModel):
    """Single-company response envelope."""

    company: Company


class CompanyDetailResponse(BaseModel):
    """Single-company response envelope including jobs."""

    company: CompanyDetail


class CompanyListResponse(BaseModel):
    """Company list response envelope."""

    companies: list[Company]
