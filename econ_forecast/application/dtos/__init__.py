"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .dataset_dto import DatasetSummaryDTO, EvaluationMetricsDTO, PartitionSummaryDTO
from .health_dto import (
    ApplicationInfoDTO,
    CorpusStatsDTO,
    ForecastHealthDTO,
    ResourceCheckDTO,
)
from .history_dto import ChartPointDTO, to_chart_point_dtos
from .prediction_dto import (
    ContributionDTO,
    PredictionResponseDTO,
    ScenarioAnalysisResponseDTO,
    ValidationErrorResponseDTO,
)

__all__ = [
    "ChartPointDTO",
    "to_chart_point_dtos",
    "PredictionResponseDTO",
    "ValidationErrorResponseDTO",
    "ContributionDTO",
    "ScenarioAnalysisResponseDTO",
    "DatasetSummaryDTO",
    "PartitionSummaryDTO",
    "EvaluationMetricsDTO",
    "ForecastHealthDTO",
    "ResourceCheckDTO",
    "CorpusStatsDTO",
    "ApplicationInfoDTO",
]
