"""Application service: Register Person use case.

Builds the Address and then the Person through the creation harness,
so every rejection is reported with a context naming who it was for.
"""

from __future__ import annotations

from roster.application.creation import (
    CreationCounter,
    create_and_check,
    create_safely,
)
from roster.application.dto import AddressDTO, PersonDTO
from roster.config import Settings
from roster.domain.model.address import Address
from roster.domain.model.person import Person
from roster.domain.validator import ValidationError


class RegisterPersonHandler:

    def __init__(
        self,
        counter: CreationCounter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._counter = counter if counter is not None else CreationCounter()
        self._settings = settings

    @property
    def counter(self) -> CreationCounter:
        return self._counter

    def handle(
        self,
        name: str,
        age: int,
        street: str,
        city: str,
        postal_code: int | None = None,
        strict: bool = False,
    ) -> PersonDTO | ValidationError:
        """Register a person with a home address.

        Steps:
        1. Build the Address (fail fast on an address rule).
        2. Build the Person around it.
        3. Return a DTO.

        With ``strict`` the construction is mandatory and a failure
        raises CreationAborted instead of returning the error.
        """
        create = create_and_check if strict else create_safely

        address = create(
            Address,
            f"address of {name!r}",
            street,
            city,
            postal_code,
            counter=self._counter,
            settings=self._settings,
        )
        if isinstance(address, ValidationError):
            return address

        person = create(
            Person,
            f"person {name!r}",
            name,
            age,
            address,
            counter=self._counter,
            settings=self._settings,
        )
        if isinstance(person, ValidationError):
            return person

        return to_person_dto(person)

    def handle_address(
        self,
        street: str,
        city: str,
        postal_code: int | None = None,
        strict: bool = False,
    ) -> AddressDTO | ValidationError:
        """Validate a standalone address."""
        create = create_and_check if strict else create_safely
        address = create(
            Address,
            "standalone address",
            street,
            city,
            postal_code,
            counter=self._counter,
            settings=self._settings,
        )
        if isinstance(address, ValidationError):
            return address
        return to_address_dto(address)


# --- Mapping ------------------------------------------------------------------


def to_address_dto(address: Address) -> AddressDTO:
    return AddressDTO(
        street=address.street,
        city=address.city,
        postal_code=address.postal_code,
        summary=address.describe(),
    )


def to_person_dto(person: Person) -> PersonDTO:
    return PersonDTO(
        name=person.name,
        age=person.age,
        address=to_address_dto(person.address),
        summary=person.describe(),
    )
