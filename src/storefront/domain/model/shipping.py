"""ShippingDetails value object: who the order goes to."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields

from storefront.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ShippingDetails:
    """Contact and delivery address captured at checkout.

    Every field is required.  A missing-fields error names all of them at
    once so the shopper can fix the form in one pass.
    """

    name: str
    email: str
    address: str
    city: str
    postal_code: str
    phone: str

    def __post_init__(self) -> None:
        missing = [f.name for f in fields(self) if not (getattr(self, f.name) or "").strip()]
        if missing:
            raise ValidationError(
                f"Please fill in all required fields: {', '.join(missing)}"
            )
        if not _EMAIL_RE.match(self.email.strip()):
            raise ValidationError("Please enter a valid email address")
