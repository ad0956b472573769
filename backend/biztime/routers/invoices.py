from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.core.database import get_db
from biztime.repositories.company_repository import CompanyRepository
from biztime.repositories.invoice_repository import InvoiceRepository
from biztime.schemas.company import DeleteResponse
from biztime.schemas.invoice import (
    CompanyWithInvoicesEnvelope,
    CompanyWithInvoicesResponse,
    InvoiceCreate,
    InvoiceEnvelope,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
    InvoiceWithCompanyEnvelope,
    InvoiceWithCompanyResponse,
)

router = APIRouter()


@router.get(
    "",
    response_model=InvoiceListResponse,
    summary="List invoices",
)
async def list_invoices(db: Session = Depends(get_db)) -> InvoiceListResponse:
    """List every invoice."""
    repo = InvoiceRepository(db)
    return InvoiceListResponse(
        invoices=[InvoiceResponse.model_validate(i) for i in repo.get_all()]
    )


@router.get(
    "/companies/{code}",
    response_model=CompanyWithInvoicesEnvelope,
    summary="Get company with invoices",
    responses={404: {"description": "Company not found"}},
)
async def get_company_invoices(
    code: str,
    db: Session = Depends(get_db),
) -> CompanyWithInvoicesEnvelope:
    """Get a company with its invoices embedded (possibly none)."""
    repo = CompanyRepository(db)
    company = repo.get_with_invoices(code)
    return CompanyWithInvoicesEnvelope(
        company=CompanyWithInvoicesResponse.model_validate(company)
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceWithCompanyEnvelope,
    summary="Get invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def get_invoice(
    invoice_id: str,
    db: Session = Depends(get_db),
) -> InvoiceWithCompanyEnvelope:
    """Get an invoice together with the company it is billed to."""
    repo = InvoiceRepository(db)
    return InvoiceWithCompanyEnvelope(
        invoice=InvoiceWithCompanyResponse.model_validate(repo.get(invoice_id))
    )


@router.post(
    "",
    response_model=InvoiceEnvelope,
    status_code=201,
    summary="Create invoice",
    responses={400: {"description": "Invalid body or unknown company code"}},
)
async def create_invoice(data: InvoiceCreate, db: Session = Depends(get_db)) -> InvoiceEnvelope:
    repo = InvoiceRepository(db)
    return InvoiceEnvelope(invoice=InvoiceResponse.model_validate(repo.create(data)))


@router.put(
    "/{invoice_id}",
    response_model=InvoiceEnvelope,
    summary="Update invoice",
    responses={
        400: {"description": "Neither amt nor paid supplied"},
        404: {"description": "Invoice not found"},
    },
)
async def update_invoice(
    invoice_id: str,
    data: InvoiceUpdate,
    db: Session = Depends(get_db),
) -> InvoiceEnvelope:
    """Update the amount and/or payment state of an invoice."""
    repo = InvoiceRepository(db)
    return InvoiceEnvelope(invoice=InvoiceResponse.model_validate(repo.update(invoice_id, data)))


@router.delete(
    "/{invoice_id}",
    response_model=DeleteResponse,
    summary="Delete invoice",
    responses={404: {"description": "Invoice not found"}},
)
async def delete_invoice(invoice_id: str, db: Session = Depends(get_db)) -> DeleteResponse:
    repo = InvoiceRepository(db)
    repo.delete(invoice_id)
    return DeleteResponse()
