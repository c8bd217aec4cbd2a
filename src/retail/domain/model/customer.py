"""Customer aggregate.

The order core only reads customers: it checks that a customer exists and
copies the display name into new orders.  Everything else here serves the
customer directory screens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from retail.domain.exceptions import ValidationError


@dataclass
class Customer:

    id: str
    name: str
    document: str = ""
    email: str = ""
    phone: str = ""
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        document: str = "",
        email: str = "",
        phone: str = "",
        active: bool = True,
        created_at: datetime | None = None,
    ) -> Customer:
        """Register a new customer with a fresh opaque id."""
        return Customer(
            id=uuid4().hex,
            name=_required_name(name),
            document=document.strip(),
            email=email.strip(),
            phone=phone.strip(),
            active=active,
            created_at=created_at or datetime.now(timezone.utc),
        )

    def rename(self, new_name: str) -> None:
        self.name = _required_name(new_name)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, document or email."""
        needle = term.strip().lower()
        return (
            needle in self.name.lower()
            or needle in self.document.lower()
            or needle in self.email.lower()
        )


def _required_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Customer name is required")
    return name.strip()
