from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from biztime.schemas.company import CompanyResponse


class InvoiceCreate(BaseModel):
    comp_code: str = Field(..., min_length=1, max_length=255)
    amt: float = Field(..., gt=0)


class InvoiceUpdate(BaseModel):
    amt: float | None = Field(default=None, gt=0)
    paid: bool | None = None


class InvoiceSummary(BaseModel):
    """An invoice as embedded under its company; comp_code is implied."""

    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: datetime | None

    model_config = {"from_attributes": True}

    @field_validator("add_date", "paid_date")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite drops the offset; stored times are always UTC
        if value is None or value.tzinfo:
            return value
        return value.replace(tzinfo=UTC)


class InvoiceResponse(InvoiceSummary):
    comp_code: str


class InvoiceWithCompanyResponse(InvoiceResponse):
    company: CompanyResponse


class CompanyWithInvoicesResponse(CompanyResponse):
    invoices: list[InvoiceSummary]


class InvoiceEnvelope(BaseModel):
    invoice: InvoiceResponse


class InvoiceWithCompanyEnvelope(BaseModel):
    invoice: InvoiceWithCompanyResponse


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceResponse]


class CompanyWithInvoicesEnvelope(BaseModel):
    company: CompanyWithInvoicesResponse
