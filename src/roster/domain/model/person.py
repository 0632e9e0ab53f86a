"""Person aggregate.

A Person owns an Address by value. Only ``Person.create()`` (and its
``create_with_address`` convenience) can build one, and neither re-checks
the address: an Address can only exist if it was valid when created.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.domain.model.address import Address
from roster.domain.validator import ValidationError, validate_person


@dataclass(frozen=True)
class Person:
    """A validated person with a home address.

    Invariants:
    - ``name`` is non-empty
    - ``age`` is within 1..120
    - ``address`` came from ``Address.create()``

    Like Address, the raw constructor always refuses.
    """

    name: str
    age: int
    address: Address

    def __post_init__(self) -> None:
        raise TypeError("Person instances must be obtained via Person.create()")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(name: str, age: int, address: Address) -> Person | ValidationError:
        """Build a Person around an existing Address."""
        error = validate_person(name, age)
        if error is not None:
            return error

        person = object.__new__(Person)
        object.__setattr__(person, "name", name)
        object.__setattr__(person, "age", age)
        object.__setattr__(person, "address", address)
        return person

    @staticmethod
    def create_with_address(
        name: str,
        age: int,
        street: str,
        city: str,
        postal_code: int | None = None,
    ) -> Person | ValidationError:
        """Build the Address from raw fields first, then the Person.

        Address errors take precedence over person errors because the
        address is built first.
        """
        address = Address.create(street, city, postal_code)
        if isinstance(address, ValidationError):
            return address
        return Person.create(name, age, address)

    # --- Display --------------------------------------------------------------

    def describe(self) -> str:
        return f"Name: {self.name}, Age: {self.age}, {self.address.describe()}"

    def __str__(self) -> str:
        return f"{self.name} {self.age}"
