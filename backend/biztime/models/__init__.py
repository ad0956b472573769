from biztime.models.company import Company
from biztime.models.invoice import Invoice

__all__ = [
    "Company",
    "Invoice",
]
