from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from biztime.core.database import Base


class Company(Base):
    __tablename__ = "companies"

    code = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Invoices are removed by the database (ON DELETE CASCADE)
    invoices = relationship(
        "Invoice",
        back_populates="company",
        order_by="Invoice.id",
        passive_deletes=True,
    )
