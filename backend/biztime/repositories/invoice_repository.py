import logging

from sqlalchemy import DateTime, case, delete, literal, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from biztime.core.errors import ConstraintError, NotFoundError, ValidationError
from biztime.models.invoice import Invoice, utc_now
from biztime.schemas.invoice import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

# Largest id a portable 32-bit INTEGER column can hold
MAX_INVOICE_ID = 2**31 - 1


def normalize_invoice_id(invoice_id: int | str) -> int:
    """Coerce an invoice id received as path text to the stored integer.

    Only plain ASCII digits in the column's range are ids; anything else
    can never match a row, so it is reported as NotFoundError rather than
    as a malformed request.
    """
    if isinstance(invoice_id, bool):
        raise NotFoundError()
    if isinstance(invoice_id, int):
        key = invoice_id
    elif invoice_id.isascii() and invoice_id.isdigit():
        key = int(invoice_id)
    else:
        raise NotFoundError()
    if not 1 <= key <= MAX_INVOICE_ID:
        raise NotFoundError()
    return key


class InvoiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Invoice]:
        return self.db.query(Invoice).order_by(Invoice.id).all()

    def get_by_id(self, invoice_id: int | str) -> Invoice | None:
        return (
            self.db.query(Invoice)
            .options(joinedload(Invoice.company))
            .filter(Invoice.id == normalize_invoice_id(invoice_id))
            .first()
        )

    def get(self, invoice_id: int | str) -> Invoice:
        invoice = self.get_by_id(invoice_id)
        if invoice is None:
            raise NotFoundError()
        return invoice

    def create(self, data: InvoiceCreate) -> Invoice:
        invoice = Invoice(
            comp_code=data.comp_code,
            amt=data.amt,
            paid=False,
            paid_date=None,
            add_date=utc_now(),
        )
        self.db.add(invoice)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Rejected invoice for unknown company %s", data.comp_code)
            raise ConstraintError(f"Company code '{data.comp_code}' does not exist") from None
        self.db.refresh(invoice)
        logger.info("Created invoice %s for company %s", invoice.id, invoice.comp_code)
        return invoice

    def update(self, invoice_id: int | str, data: InvoiceUpdate) -> Invoice:
        """Apply a partial update, driving paid_date from the paid transition.

        The whole change is one conditional UPDATE: paid_date is stamped when
        paid goes from false to true, kept when an already paid invoice is
        marked paid again, and cleared when paid is set to false. Omitted
        fields keep their stored values.
        """
        changes = data.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("Need at least one property to update")
        key = normalize_invoice_id(invoice_id)

        values: dict[str, object] = {}
        if "amt" in changes:
            values["amt"] = changes["amt"]
        if "paid" in changes:
            values["paid"] = changes["paid"]
            if changes["paid"]:
                values["paid_date"] = case(
                    (Invoice.paid.is_(True), Invoice.paid_date),
                    else_=literal(utc_now(), DateTime(timezone=True)),
                )
            else:
                values["paid_date"] = None

        try:
            result = self.db.execute(
                update(Invoice)
                .where(Invoice.id == key)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
        except IntegrityError:
            self.db.rollback()
            raise ConstraintError("Invoice update violates a constraint") from None
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            raise NotFoundError()
        self.db.commit()
        logger.info("Updated invoice %s (%s)", key, ", ".join(sorted(changes)))
        return self.get(key)

    def delete(self, invoice_id: int | str) -> None:
        key = normalize_invoice_id(invoice_id)
        result = self.db.execute(
            delete(Invoice)
            .where(Invoice.id == key)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            self.db.rollback()
            raise NotFoundError()
        self.db.commit()
        logger.info("Deleted invoice %s", key)
