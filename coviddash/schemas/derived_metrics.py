from pydantic import BaseModel, ConfigDict, Field, model_validator


class DerivedMetrics(BaseModel):
    """@brief Metrics computed once from a non-empty `CountrySeries`.

    @details Produced by `coviddash.core.metrics.derive` and consumed by the
    chart builders (`coviddash/core/charts.py`).

    @note Both delta series are index-aligned with the source records: the
    first delta is measured against a zero baseline, so no sentinel is added.
    """

    model_config = ConfigDict(frozen=True)

    death_rate_percent: int = Field(..., ge=0, le=100)
    days_to_first_death: int = Field(..., ge=0)
    daily_delta_confirmed: list[int]
    daily_delta_deaths: list[int]
    confirmed_total: int = Field(..., ge=0)
    deaths_total: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_lengths(self) -> "DerivedMetrics":
        """@brief Ensure delta series share the same x-axis."""
        if len(self.daily_delta_confirmed) != len(self.daily_delta_deaths):
            raise ValueError("daily delta series must have the same length.")
        return self


class CountrySummary(BaseModel):
    """@brief Aggregation input for one country that was fetched successfully."""

    country_code: str
    country: str
    metrics: DerivedMetrics
