"""
Domain Service - Input Validator

Turns an untrusted prediction payload into a ``ValidatedInput`` or a
``ValidationFailure``. Checks run in a fixed order and the first failing
check decides the result:

  1. every required field is present (all missing names reported at once)
  2. every indicator coerces to a finite number
  3. every indicator lies within [MIN_RATE, MAX_RATE]
  4. the trimmed country is not empty
  5. the trimmed country is part of the vocabulary
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Union

from econ_forecast.domain.entities.errors import ValidationErrorKind, ValidationFailure
from econ_forecast.domain.entities.indicators import (
    COUNTRY_FIELD,
    INDICATOR_FIELDS,
    MAX_RATE,
    MIN_RATE,
    REQUIRED_FIELDS,
    ValidatedInput,
)
from econ_forecast.domain.entities.vocabulary import Vocabulary

ValidationResult = Union[ValidatedInput, ValidationFailure]


def _coerce_rate(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _missing_fields(raw: Mapping[str, Any]) -> List[str]:
    return [name for name in REQUIRED_FIELDS if raw.get(name) is None]


def validate(raw: Any, vocabulary: Vocabulary) -> ValidationResult:
    """Validate a raw prediction payload against the current vocabulary."""

    if not isinstance(raw, Mapping):
        return ValidationFailure(
            kind=ValidationErrorKind.MISSING_FIELDS,
            message="Missing required fields: " + ", ".join(REQUIRED_FIELDS),
            fields=REQUIRED_FIELDS,
        )

    missing = _missing_fields(raw)
    if missing:
        return ValidationFailure(
            kind=ValidationErrorKind.MISSING_FIELDS,
            message="Missing required fields: " + ", ".join(missing),
            fields=tuple(missing),
        )

    rates: Dict[str, float] = {}
    for name in INDICATOR_FIELDS:
        number = _coerce_rate(raw[name])
        if number is None:
            return ValidationFailure(
                kind=ValidationErrorKind.INVALID_TYPE,
                message=f"Field '{name}' must be a finite number",
                fields=(name,),
                context={"value": raw[name]},
            )
        rates[name] = number

    for name in INDICATOR_FIELDS:
        number = rates[name]
        if not MIN_RATE <= number <= MAX_RATE:
            return ValidationFailure(
                kind=ValidationErrorKind.OUT_OF_RANGE,
                message=(
                    f"Field '{name}' is {number:g}, expected a value between "
                    f"{MIN_RATE:g} and {MAX_RATE:g}"
                ),
                fields=(name,),
                context={"value": number, "min": MIN_RATE, "max": MAX_RATE},
            )

    country_raw = raw[COUNTRY_FIELD]
    if not isinstance(country_raw, str):
        return ValidationFailure(
            kind=ValidationErrorKind.INVALID_TYPE,
            message=f"Field '{COUNTRY_FIELD}' must be a string",
            fields=(COUNTRY_FIELD,),
            context={"value": country_raw},
        )

    country = country_raw.strip()
    if not country:
        return ValidationFailure(
            kind=ValidationErrorKind.EMPTY_COUNTRY,
            message="Country must not be empty",
            fields=(COUNTRY_FIELD,),
        )

    if country not in vocabulary:
        return ValidationFailure(
            kind=ValidationErrorKind.UNKNOWN_COUNTRY,
            message=f"Unknown country '{country}'",
            fields=(COUNTRY_FIELD,),
            context={"country": country},
        )

    return ValidatedInput(country=country, **rates)
