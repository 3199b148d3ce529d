from __future__ import annotations

import math

import pytest

from econ_forecast.domain.entities.errors import ValidationErrorKind, ValidationFailure
from econ_forecast.domain.entities.indicators import REQUIRED_FIELDS, ValidatedInput
from econ_forecast.domain.entities.vocabulary import Vocabulary
from econ_forecast.domain.services.input_validator import validate


@pytest.fixture()
def countries() -> Vocabulary:
    return Vocabulary.from_countries(["Brazil", "Germany"])


def test_valid_payload_returns_validated_input(brazil_payload, countries) -> None:
    result = validate(brazil_payload, countries)

    assert isinstance(result, ValidatedInput)
    assert result.country == "Brazil"
    assert result.indicators() == (0.8, 3.5, 4.2, 2.1, 2.8, 1.5)


def test_missing_fields_are_all_reported(brazil_payload, countries) -> None:
    del brazil_payload["exports_growth"]
    brazil_payload["govt_spend_growth"] = None

    result = validate(brazil_payload, countries)

    assert isinstance(result, ValidationFailure)
    assert result.kind is ValidationErrorKind.MISSING_FIELDS
    assert result.fields == ("exports_growth", "govt_spend_growth")


def test_empty_payload_reports_every_field(countries) -> None:
    result = validate({}, countries)

    assert result.kind is ValidationErrorKind.MISSING_FIELDS
    assert result.fields == REQUIRED_FIELDS


def test_non_mapping_payload_reports_every_field(countries) -> None:
    result = validate(["Brazil", 1, 2], countries)

    assert result.kind is ValidationErrorKind.MISSING_FIELDS
    assert set(result.fields) == set(REQUIRED_FIELDS)


def test_misnamed_field_surfaces_as_missing(brazil_payload, countries) -> None:
    brazil_payload["govt_spending_growth"] = brazil_payload.pop("govt_spend_growth")

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.MISSING_FIELDS
    assert result.fields == ("govt_spend_growth",)


@pytest.mark.parametrize("value", ["abc", True, [1.0], math.nan, math.inf])
def test_invalid_numbers_are_rejected(brazil_payload, countries, value) -> None:
    brazil_payload["imports_growth"] = value

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.INVALID_TYPE
    assert result.fields == ("imports_growth",)


def test_numeric_strings_are_coerced(brazil_payload, countries) -> None:
    brazil_payload["population_growth"] = " 1.25 "

    result = validate(brazil_payload, countries)

    assert isinstance(result, ValidatedInput)
    assert result.population_growth == 1.25


def test_out_of_range_names_field_value_and_bounds(brazil_payload, countries) -> None:
    brazil_payload["population_growth"] = 150

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.OUT_OF_RANGE
    assert result.fields == ("population_growth",)
    assert result.context == {"value": 150.0, "min": -100.0, "max": 100.0}
    assert "population_growth" in result.message
    assert "150" in result.message
    assert "-100" in result.message and "100" in result.message


@pytest.mark.parametrize("value", [-100, 100])
def test_bounds_are_inclusive(brazil_payload, countries, value) -> None:
    brazil_payload["investment_growth"] = value

    assert isinstance(validate(brazil_payload, countries), ValidatedInput)


def test_range_checked_before_country(brazil_payload, countries) -> None:
    brazil_payload["country"] = "Atlantis"
    brazil_payload["exports_growth"] = -101

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.OUT_OF_RANGE


def test_blank_country_is_empty(brazil_payload, countries) -> None:
    brazil_payload["country"] = "   "

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.EMPTY_COUNTRY
    assert result.fields == ("country",)


def test_non_string_country_is_invalid_type(brazil_payload, countries) -> None:
    brazil_payload["country"] = 42

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.INVALID_TYPE
    assert result.fields == ("country",)


def test_unknown_country_is_reported_with_name(brazil_payload, countries) -> None:
    brazil_payload["country"] = "Atlantis"

    result = validate(brazil_payload, countries)

    assert result.kind is ValidationErrorKind.UNKNOWN_COUNTRY
    assert result.context == {"country": "Atlantis"}


def test_country_is_trimmed(brazil_payload, countries) -> None:
    brazil_payload["country"] = "  Germany "

    result = validate(brazil_payload, countries)

    assert isinstance(result, ValidatedInput)
    assert result.country == "Germany"


def test_integer_too_large_for_a_float_is_invalid_type(
    brazil_payload, countries
) -> None:
    brazil_payload["population_growth"] = 10**400

    result = validate(brazil_payload, countries)

    assert isinstance(result, ValidationFailure)
    assert result.kind is ValidationErrorKind.INVALID_TYPE
    assert result.fields == ("population_growth",)
