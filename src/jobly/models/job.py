"""Job database model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String

from jobly.database import Base


class Job(Base):
    """
    Job model representing openings at a company.

    Attributes:
        id: Primary key
        title: Job title
        salary: Yearly salary (non-negative)
        equity: Fraction of the company offered, between 0 and 1
        company_handle: Foreign key to companies table
    """

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False, index=True)
    salary = Column(Integer, CheckConstraint("salary >= 0"), nullable=True)
    equity = Column(Numeric, CheckConstraint("equity <= 1.0"), nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation of Job."""
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
