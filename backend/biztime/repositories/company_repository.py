import logging
import re

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from biztime.core.errors import ConstraintError, NotFoundError, ValidationError
from biztime.models.company import Company
from biztime.schemas.company import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify_code(name: str) -> str:
    """Derive a company code from its name ("Lorem Ipsum" -> "lorem-ipsum")."""
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")


class CompanyRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Company]:
        return self.db.query(Company).all()

    def get_by_code(self, code: str) -> Company | None:
        return self.db.query(Company).filter(Company.code == code).first()

    def get(self, code: str) -> Company:
        company = self.get_by_code(code)
        if company is None:
            raise NotFoundError()
        return company

    def get_with_invoices(self, code: str) -> Company:
        """Load a company and, in a second query, all of its invoices.

        A company without invoices is returned with an empty list; only a
        missing company raises NotFoundError.
        """
        company = (
            self.db.query(Company)
            .options(selectinload(Company.invoices))
            .filter(Company.code == code)
            .first()
        )
        if company is None:
            raise NotFoundError()
        return company

    def create(self, data: CompanyCreate) -> Company:
        code = data.code or slugify_code(data.name)
        if not code:
            raise ValidationError("Cannot derive a company code from name")

        company = Company(code=code, name=data.name, description=data.description)
        self.db.add(company)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Rejected duplicate company code %s", code)
            raise ConstraintError(f"Company code '{code}' already exists") from None
        self.db.refresh(company)
        logger.info("Created company %s", code)
        return company

    def update(self, code: str, data: CompanyUpdate) -> Company:
        # Empty strings keep the stored value, like omitted or null fields
        changes = {k: v for k, v in data.model_dump().items() if v not in (None, "")}
        if not changes:
            raise ValidationError("Need at least one property to update")

        result = self.db.execute(
            update(Company)
            .where(Company.code == code)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            raise NotFoundError()
        self.db.commit()
        logger.info("Updated company %s (%s)", code, ", ".join(sorted(changes)))
        return self.get(code)

    def delete(self, code: str) -> None:
        result = self.db.execute(
            delete(Company)
            .where(Company.code == code)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            raise NotFoundError()
        self.db.commit()
        logger.info("Deleted company %s", code)
