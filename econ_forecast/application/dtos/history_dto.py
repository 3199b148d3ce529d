"""DTOs for historical series and the country listing."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from econ_forecast.domain.entities.timeline import ChartPoint, PointKind


class ChartPointDTO(BaseModel):
    """Serializable chart point."""

    year: str = Field(description="Calendar year as a string")
    growth: float = Field(description="GDP growth rounded to 2 decimals")
    kind: PointKind

    @classmethod
    def from_domain(cls, point: ChartPoint) -> "ChartPointDTO":
        return cls(year=point.year, growth=point.growth, kind=point.kind)

    def to_domain(self) -> ChartPoint:
        return ChartPoint(year=self.year, growth=self.growth, kind=self.kind)

    model_config = {
        "json_schema_extra": {
            "example": {"year": "2019", "growth": 1.41, "kind": "historical"}
        }
    }


def to_chart_point_dtos(points: List[ChartPoint]) -> List[ChartPointDTO]:
    return [ChartPointDTO.from_domain(point) for point in points]
