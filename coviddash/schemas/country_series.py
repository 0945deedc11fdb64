from pydantic import BaseModel, Field, model_validator

from coviddash.schemas.daily_record import DailyRecord


class CountrySeries(BaseModel):
    """@brief Day-one series of a single country, ordered by date.

    @note Validation rules:
    record dates must be non-decreasing. Cumulative counters are kept as
    sourced; upstream corrections may lower them.
    """

    country_code: str
    records: list[DailyRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_order(self) -> "CountrySeries":
        """@brief Ensure records are sorted by date ascending."""
        dates = [record.date for record in self.records]
        if any(curr < prev for prev, curr in zip(dates, dates[1:])):
            raise ValueError("CountrySeries records must be ordered by date.")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def last(self) -> DailyRecord:
        """@brief Return the most recent record.

        @throws IndexError When the series is empty.
        """
        return self.records[-1]

    @property
    def country_name(self) -> str:
        """@brief Return the country display name, falling back to the code."""
        if self.records and self.records[0].country:
            return self.records[0].country
        return self.country_code
