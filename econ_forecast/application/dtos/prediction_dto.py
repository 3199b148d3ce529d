"""
Application DTOs - Prediction

Data Transfer Objects for the prediction and scenario analysis responses.
Request bodies are not modelled here: they are validated by the domain
input validator so that every defect maps onto the validation taxonomy.
"""

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from econ_forecast.application.dtos.history_dto import ChartPointDTO
from econ_forecast.domain.entities.errors import ValidationFailure
from econ_forecast.domain.entities.indicators import PredictionMethod, PredictionResult
from econ_forecast.domain.services.scenario_analysis import Contribution

MAX_ECHOED_LENGTH = 64


def _wire_value(value: Any) -> Any:
    """Make a rejected value safe to embed in a JSON body."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value[:MAX_ECHOED_LENGTH]
    if isinstance(value, (int, float)):
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = False
        if finite:
            return value
    return repr(value)[:MAX_ECHOED_LENGTH]


class PredictionResponseDTO(BaseModel):
    """DTO returned by the prediction endpoint."""

    predicted_growth: float = Field(description="Predicted GDP growth rate (%)")
    method: PredictionMethod = Field(
        description="Estimator that produced the prediction"
    )

    @classmethod
    def from_domain(cls, result: PredictionResult) -> "PredictionResponseDTO":
        return cls(predicted_growth=result.predicted_growth, method=result.method)

    model_config = {
        "json_schema_extra": {
            "example": {"predicted_growth": 2.77, "method": "model"}
        }
    }


class ValidationErrorResponseDTO(BaseModel):
    """Body of a rejected prediction request."""

    kind: str = Field(default="Validation")
    detail: str = Field(description="Validation failure kind, e.g. MissingFields")
    message: str
    fields: List[str] = Field(default_factory=list)
    context: Dict[str, Any] = Field(
        default_factory=dict,
        description="Offending value and bounds, or the unknown country",
    )
    retryable: bool = False

    @classmethod
    def from_failure(cls, failure: ValidationFailure) -> "ValidationErrorResponseDTO":
        return cls(
            detail=failure.kind.value,
            message=failure.message,
            fields=list(failure.fields),
            context={
                key: _wire_value(value) for key, value in failure.context.items()
            },
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "kind": "Validation",
                "detail": "OutOfRange",
                "message": (
                    "Field 'population_growth' is 150, expected a value "
                    "between -100 and 100"
                ),
                "fields": ["population_growth"],
                "context": {"value": 150.0, "min": -100.0, "max": 100.0},
                "retryable": False,
            }
        }
    }


class ContributionDTO(BaseModel):
    name: str
    value: float
    percentage: float

    @classmethod
    def from_domain(cls, contribution: Contribution) -> "ContributionDTO":
        return cls(
            name=contribution.name,
            value=contribution.value,
            percentage=contribution.percentage,
        )


class ScenarioAnalysisResponseDTO(BaseModel):
    """Prediction enriched with its breakdown and the merged timeline."""

    predicted_growth: float
    method: PredictionMethod
    confidence_score: float = Field(ge=0, le=100)
    contributions: List[ContributionDTO]
    recent_trend: Optional[float] = Field(
        default=None, description="Average growth of the recent historical window"
    )
    timeline: List[ChartPointDTO] = Field(default_factory=list)
