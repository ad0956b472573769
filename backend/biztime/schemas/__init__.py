from biztime.schemas.company import (
    CompanyCreate,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
    DeleteResponse,
)
from biztime.schemas.invoice import (
    CompanyWithInvoicesEnvelope,
    CompanyWithInvoicesResponse,
    InvoiceCreate,
    InvoiceEnvelope,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
    InvoiceWithCompanyEnvelope,
    InvoiceWithCompanyResponse,
)

__all__ = [
    "CompanyCreate",
    "CompanyEnvelope",
    "CompanyListResponse",
    "CompanyResponse",
    "CompanyUpdate",
    "CompanyWithInvoicesEnvelope",
    "CompanyWithInvoicesResponse",
    "DeleteResponse",
    "InvoiceCreate",
    "InvoiceEnvelope",
    "InvoiceListResponse",
    "InvoiceResponse",
    "InvoiceSummary",
    "InvoiceUpdate",
    "InvoiceWithCompanyEnvelope",
    "InvoiceWithCompanyResponse",
]
