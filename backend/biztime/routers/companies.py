from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from biztime.core.database import get_db
from biztime.repositories.company_repository import CompanyRepository
from biztime.schemas.company import (
    CompanyCreate,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
    DeleteResponse,
)

router = APIRouter()


@router.get(
    "",
    response_model=CompanyListResponse,
    summary="List companies",
)
async def list_companies(db: Session = Depends(get_db)) -> CompanyListResponse:
    """List every company."""
    repo = CompanyRepository(db)
    return CompanyListResponse(
        companies=[CompanyResponse.model_validate(c) for c in repo.get_all()]
    )


@router.get(
    "/{code}",
    response_model=CompanyEnvelope,
    summary="Get company",
    responses={404: {"description": "Company not found"}},
)
async def get_company(code: str, db: Session = Depends(get_db)) -> CompanyEnvelope:
    repo = CompanyRepository(db)
    return CompanyEnvelope(company=CompanyResponse.model_validate(repo.get(code)))


@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=201,
    summary="Create company",
    responses={400: {"description": "Invalid body or duplicate company code"}},
)
async def create_company(data: CompanyCreate, db: Session = Depends(get_db)) -> CompanyEnvelope:
    """Create a company. The code is derived from the name when omitted."""
    repo = CompanyRepository(db)
    return CompanyEnvelope(company=CompanyResponse.model_validate(repo.create(data)))


@router.put(
    "/{code}",
    response_model=CompanyEnvelope,
    summary="Update company",
    responses={
        400: {"description": "Neither name nor description supplied"},
        404: {"description": "Company not found"},
    },
)
async def update_company(
    code: str,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
) -> CompanyEnvelope:
    repo = CompanyRepository(db)
    return CompanyEnvelope(company=CompanyResponse.model_validate(repo.update(code, data)))


@router.delete(
    "/{code}",
    response_model=DeleteResponse,
    summary="Delete company",
    responses={404: {"description": "Company not found"}},
)
async def delete_company(code: str, db: Session = Depends(get_db)) -> DeleteResponse:
    """Delete a company together with its invoices."""
    repo = CompanyRepository(db)
    repo.delete(code)
    return DeleteResponse()
