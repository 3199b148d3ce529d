from __future__ import annotations

from econ_forecast.application.dtos.history_dto import ChartPointDTO, to_chart_point_dtos
from econ_forecast.application.dtos.prediction_dto import (
    PredictionResponseDTO,
    ValidationErrorResponseDTO,
)
from econ_forecast.domain.entities.errors import ValidationErrorKind, ValidationFailure
from econ_forecast.domain.entities.indicators import PredictionMethod, PredictionResult
from econ_forecast.domain.entities.timeline import ChartPoint, PointKind


def test_prediction_response_serializes_method_as_string() -> None:
    dto = PredictionResponseDTO.from_domain(
        PredictionResult(predicted_growth=1.77, method=PredictionMethod.SIMULATION)
    )

    assert dto.model_dump(mode="json") == {
        "predicted_growth": 1.77,
        "method": "simulation",
    }


def test_validation_error_envelope() -> None:
    failure = ValidationFailure(
        kind=ValidationErrorKind.MISSING_FIELDS,
        message="Missing required fields: country",
        fields=("country",),
    )

    body = ValidationErrorResponseDTO.from_failure(failure).model_dump()

    assert body == {
        "kind": "Validation",
        "detail": "MissingFields",
        "message": "Missing required fields: country",
        "fields": ["country"],
        "context": {},
        "retryable": False,
    }


def test_validation_error_envelope_echoes_value_and_bounds() -> None:
    failure = ValidationFailure(
        kind=ValidationErrorKind.OUT_OF_RANGE,
        message="Field 'population_growth' is 150",
        fields=("population_growth",),
        context={"value": 150.0, "min": -100.0, "max": 100.0},
    )

    body = ValidationErrorResponseDTO.from_failure(failure).model_dump()

    assert body["context"] == {"value": 150.0, "min": -100.0, "max": 100.0}


def test_validation_error_envelope_keeps_context_json_safe() -> None:
    failure = ValidationFailure(
        kind=ValidationErrorKind.INVALID_TYPE,
        message="Field 'imports_growth' must be a finite number",
        fields=("imports_growth",),
        context={"value": float("nan")},
    )
    huge = ValidationFailure(
        kind=ValidationErrorKind.INVALID_TYPE,
        message="Field 'imports_growth' must be a finite number",
        fields=("imports_growth",),
        context={"value": 10**400},
    )

    nan_body = ValidationErrorResponseDTO.from_failure(failure).model_dump()
    huge_body = ValidationErrorResponseDTO.from_failure(huge).model_dump()

    assert nan_body["context"] == {"value": "nan"}
    assert isinstance(huge_body["context"]["value"], str)
    assert len(huge_body["context"]["value"]) <= 64


def test_chart_point_dto_maps_both_ways() -> None:
    point = ChartPoint(year="2019", growth=1.41, kind=PointKind.PREDICTION)

    (dto,) = to_chart_point_dtos([point])

    assert dto.model_dump(mode="json") == {
        "year": "2019",
        "growth": 1.41,
        "kind": "prediction",
    }
    assert ChartPointDTO.model_validate(dto.model_dump()).to_domain() == point
