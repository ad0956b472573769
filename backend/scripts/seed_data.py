"""Load the sample companies and invoices into the configured database.

Safe to run repeatedly: companies that already exist are left alone and
their invoices are not duplicated.
"""

import logging

from sqlalchemy.orm import Session

from biztime.core import database
from biztime.repositories.company_repository import CompanyRepository
from biztime.repositories.invoice_repository import InvoiceRepository
from biztime.schemas.company import CompanyCreate
from biztime.schemas.invoice import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

COMPANIES = [
    {"code": "apple", "name": "Apple Computer", "description": "Maker of OSX."},
    {"code": "ibm", "name": "IBM", "description": "Big blue."},
]

# (comp_code, amt, paid)
INVOICES = [
    ("apple", 100, False),
    ("apple", 200, False),
    ("apple", 300, True),
    ("ibm", 400, False),
]


def seed(db: Session) -> int:
    """Insert the sample data, returning the number of invoices created."""
    companies = CompanyRepository(db)
    invoices = InvoiceRepository(db)

    created_codes = set()
    for row in COMPANIES:
        if companies.get_by_code(row["code"]) is None:
            companies.create(CompanyCreate(**row))
            created_codes.add(row["code"])

    count = 0
    for comp_code, amt, paid in INVOICES:
        if comp_code not in created_codes:
            continue
        invoice = invoices.create(InvoiceCreate(comp_code=comp_code, amt=amt))
        if paid:
            invoices.update(invoice.id, InvoiceUpdate(paid=True))
        count += 1
    return count


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    database.init_db()
    session = database.SessionLocal()
    try:
        logger.info("Seeded %d invoices", seed(session))
    finally:
        session.close()
