"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .history_use_cases import GetCountriesUseCase, GetHistoryUseCase
from .prediction_use_cases import (
    AnalyzeScenarioUseCase,
    PredictGrowthUseCase,
    PredictionService,
)
from .training_dataset_use_case import BuildTrainingDatasetUseCase

__all__ = [
    "PredictionService",
    "PredictGrowthUseCase",
    "AnalyzeScenarioUseCase",
    "GetHistoryUseCase",
    "GetCountriesUseCase",
    "BuildTrainingDatasetUseCase",
]
