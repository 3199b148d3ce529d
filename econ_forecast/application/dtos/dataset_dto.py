"""DTOs describing the lagged training dataset and its evaluation."""

from typing import List, Optional

from pydantic import BaseModel, Field


class PartitionSummaryDTO(BaseModel):
    rows: int = Field(ge=0)
    first_year: Optional[int] = None
    last_year: Optional[int] = None
    countries: int = Field(ge=0)


class EvaluationMetricsDTO(BaseModel):
    """Error of the loaded model on the test partition."""

    mae: float
    rmse: float
    r2: Optional[float] = Field(
        default=None, description="Undefined for fewer than two test rows"
    )


class DatasetSummaryDTO(BaseModel):
    cut_year: int
    feature_names: List[str]
    train: PartitionSummaryDTO
    test: PartitionSummaryDTO
    evaluation: Optional[EvaluationMetricsDTO] = None
