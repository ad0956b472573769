from biztime.repositories.company_repository import CompanyRepository
from biztime.repositories.invoice_repository import InvoiceRepository

__all__ = [
    "CompanyRepository",
    "InvoiceRepository",
]
