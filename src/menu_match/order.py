"""Customer orders and their receipt text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from menu_match.exceptions import InvalidCustomerError
from menu_match.render import describe_entry
from menu_match.schema import CatalogEntry, CustomOrder

CONTACT_DIGITS = 9


class Customer(BaseModel):
    """Person placing an order."""

    model_config = ConfigDict(frozen=True)

    name: str
    contact: int

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a valid name")
        return value

    @field_validator("contact", mode="before")
    @classmethod
    def _check_contact(cls, value: object) -> int:
        text = str(value).strip() if value is not None else ""
        if not text.isdigit() or len(str(int(text))) != CONTACT_DIGITS:
            raise ValueError("Please enter a valid number")
        return int(text)

    @classmethod
    def create(cls, name: str | None, contact: str | int | None) -> "Customer":
        """Validate form input, raising InvalidCustomerError on bad values."""
        try:
            return cls(name=name or "", contact=contact)
        except ValidationError as exc:
            message = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidCustomerError(message) from exc


class Order(BaseModel):
    """A customer's order for one catalog entry or custom item."""

    model_config = ConfigDict(frozen=True)

    customer: Customer
    item: CatalogEntry | CustomOrder
    special_requests: str = ""

    def receipt_text(self) -> str:
        text = f"Order details:\n\tName: {self.customer.name} (0{self.customer.contact})"
        if isinstance(self.item, CustomOrder):
            text += "\n\nCUSTOM ORDER...\n" + describe_entry(self.item)
        else:
            text += f"\n\tItem: {self.item.name} ({self.item.identifier})"
        text += "\n\nCustomisation Requests:\n" + self.special_requests
        return text
