from pydantic import BaseModel, Field


class CompanyCreate(BaseModel):
    # Derived from name when omitted
    code: str | None = Field(default=None, min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class CompanyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class CompanyResponse(BaseModel):
    code: str
    name: str
    description: str | None

    model_config = {"from_attributes": True}


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyListResponse(BaseModel):
    companies: list[CompanyResponse]


class DeleteResponse(BaseModel):
    status: str = "deleted"
