from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from biztime.core.database import Base


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    comp_code = Column(
        String(255),
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amt = Column(Float, nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    add_date = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    # Set when paid flips to true, cleared when it flips back
    paid_date = Column(DateTime(timezone=True), nullable=True)

    company = relationship("Company", back_populates="invoices")
