"""Read-only views of registered records, as handed to the CLI.

The CLI prints these instead of touching Address and Person directly,
so display code never depends on how the entities are constructed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AddressDTO:
    street: str
    city: str
    postal_code: int | None
    summary: str  # formatted, e.g. "Street: ..., City: ..., Postal Code: ..."


@dataclass(frozen=True)
class PersonDTO:
    name: str
    age: int
    address: AddressDTO
    summary: str
