from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ChartMode(str, Enum):
    """@brief Values plotted on a country line chart."""

    DAILY = "daily"
    CUMULATIVE = "cumulative"


class ChartSeries(BaseModel):
    name: str
    values: list[int]


class PieSlice(BaseModel):
    label: str
    value: int = Field(..., ge=0)
    description: str | None = None


class PieRing(BaseModel):
    """@brief One ring of a pie chart as an ordered list of slices."""

    name: str
    slices: list[PieSlice] = Field(default_factory=list)


class ChartDescription(BaseModel):
    """@brief Renderer-agnostic description of a single chart.

    @details Built by `coviddash/core/charts.py` and turned into plotly
    figures by `coviddash/services/render.py`. Line and scatter charts use
    `x_labels` and `series`; pie charts use `rings`. Every list keeps the
    order in which it was assembled.
    """

    kind: Literal["line", "scatter", "pie"]
    title: str
    subtitle: str | None = None
    x_labels: list[str] = Field(default_factory=list)
    series: list[ChartSeries] = Field(default_factory=list)
    rings: list[PieRing] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_shape(self) -> "ChartDescription":
        """@brief Ensure every series is aligned with the x-axis labels."""
        for item in self.series:
            if len(item.values) != len(self.x_labels):
                raise ValueError(
                    f"Series '{item.name}' has {len(item.values)} values "
                    f"for {len(self.x_labels)} x-axis labels."
                )
        if self.kind == "pie" and self.series:
            raise ValueError("Pie charts are described by rings, not series.")
        return self
