"""Tests for the Register Person use case."""

import logging

import pytest

from roster.application.creation import CreationCounter
from roster.application.dto import AddressDTO, PersonDTO
from roster.application.register_person import RegisterPersonHandler
from roster.config import Settings
from roster.domain.exceptions import CreationAborted
from roster.domain.validator import ValidationError


@pytest.fixture
def handler() -> RegisterPersonHandler:
    return RegisterPersonHandler(counter=CreationCounter())


class TestRegisterPerson:

    def test_registers_person(self, handler):
        dto = handler.handle("Maria", 27, "Main St", "Athens", 19840)

        assert isinstance(dto, PersonDTO)
        assert dto.name == "Maria"
        assert dto.age == 27
        assert dto.address.city == "Athens"
        assert dto.summary == (
            "Name: Maria, Age: 27, Street: Main St, City: Athens, Postal Code: 19840"
        )
        assert handler.counter.created == 2

    def test_address_error_stops_before_person(self, handler):
        result = handler.handle("", 0, "Main St", "", 19840)

        assert result is ValidationError.EMPTY_CITY
        assert handler.counter.rejected == 1
        assert handler.counter.created == 0

    def test_person_error_after_address(self, handler):
        result = handler.handle("Maria", 130, "Main St", "Athens", 19840)

        assert result is ValidationError.INVALID_AGE
        assert handler.counter.created == 1
        assert handler.counter.rejected == 1

    def test_strict_mode_aborts(self, handler):
        with pytest.raises(CreationAborted) as exc_info:
            handler.handle("", 27, "Main St", "Athens", 19840, strict=True)

        assert exc_info.value.report.error is ValidationError.EMPTY_NAME
        assert exc_info.value.report.context == "person ''"

    def test_settings_are_passed_to_the_harness(self, caplog):
        handler = RegisterPersonHandler(settings=Settings(developer_mode=False))

        with caplog.at_level(logging.DEBUG, logger="roster"):
            result = handler.handle("", 27, "Main St", "Athens", 19840)

        assert result is ValidationError.EMPTY_NAME
        assert caplog.records == []

    def test_default_counter(self):
        assert RegisterPersonHandler().counter.attempts == 0


class TestRegisterAddress:

    def test_valid_address(self, handler):
        dto = handler.handle_address("Main St", "Athens")

        assert isinstance(dto, AddressDTO)
        assert dto.postal_code is None

    def test_invalid_address(self, handler):
        assert handler.handle_address("Main St", "Athens", 99951) is (
            ValidationError.INVALID_POSTAL_CODE
        )

    def test_strict_invalid_address(self, handler):
        with pytest.raises(CreationAborted):
            handler.handle_address("", "Athens", 19840, strict=True)
