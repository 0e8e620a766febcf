"""Company database model."""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from jobly.database import Base


class Company(Base):
    """
    Company model representing employers.

    Attributes:
        handle: Primary key, URL-friendly identifier
        name: Company name
        description: Free-form description
        num_employees: Head count (non-negative)
        logo_url: URL of the company logo
    """

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"), nullable=True)
    logo_url = Column(String, nullable=True)

    def __repr__(self) -> str:
        """String representation of Company."""
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
