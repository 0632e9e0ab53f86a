"""Address value object.

An Address is immutable and can only be obtained through
``Address.create()``, so every instance in circulation satisfies the
address rules. Code that receives an Address never has to re-check it.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.domain.validator import ValidationError, validate_address


@dataclass(frozen=True)
class Address:
    """A validated postal address.

    Invariants:
    - ``street`` and ``city`` are non-empty
    - ``postal_code`` is within 1..99950, or ``None`` when unset

    ``__init__`` always refuses, which also blocks ``dataclasses.replace``;
    a corrected address is a new ``Address.create()`` call.
    """

    street: str
    city: str
    postal_code: int | None = None

    def __post_init__(self) -> None:
        raise TypeError("Address instances must be obtained via Address.create()")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        street: str, city: str, postal_code: int | None = None
    ) -> Address | ValidationError:
        """Build an Address, or return the rule that blocked it."""
        error = validate_address(street, city, postal_code)
        if error is not None:
            return error

        address = object.__new__(Address)
        object.__setattr__(address, "street", street)
        object.__setattr__(address, "city", city)
        object.__setattr__(address, "postal_code", postal_code)
        return address

    # --- Display --------------------------------------------------------------

    def describe(self) -> str:
        postal = "-" if self.postal_code is None else self.postal_code
        return f"Street: {self.street}, City: {self.city}, Postal Code: {postal}"

    def __str__(self) -> str:
        if self.postal_code is None:
            return self.street
        return f"{self.street}, {self.postal_code}"
