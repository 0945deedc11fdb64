from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DailyRecord(BaseModel):
    """@brief Cumulative COVID-19 counters of one country on one day.

    @details Parsed from the upstream `total/dayone/country/{code}` payload,
    whose field names are capitalized (`Country`, `Confirmed`, ...). Python
    field names are accepted as well so tests and fixtures can build records
    directly.

    @note Validation rules:
    every counter must be a non-negative integer; booleans are rejected.
    Dates without an offset are taken as UTC so a series stays comparable.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    country: str = Field(..., alias="Country")
    country_code: str = Field(default="", alias="CountryCode")
    province: str = Field(default="", alias="Province")
    city: str = Field(default="", alias="City")
    city_code: str = Field(default="", alias="CityCode")
    lat: str = Field(default="", alias="Lat")
    lon: str = Field(default="", alias="Lon")
    confirmed: int = Field(..., alias="Confirmed")
    deaths: int = Field(..., alias="Deaths")
    recovered: int = Field(default=0, alias="Recovered")
    active: int = Field(default=0, alias="Active")
    date: datetime = Field(..., alias="Date")

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: datetime) -> datetime:
        """@brief Read timestamps without an offset as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("confirmed", "deaths", "recovered", "active", mode="before")
    @classmethod
    def validate_counter(cls, value: object) -> object:
        """@brief Reject booleans and negative counters."""
        if isinstance(value, bool):
            raise ValueError("counters must be integers.")
        if isinstance(value, (int, float)) and value < 0:
            raise ValueError("counters must be greater than or equal to 0.")
        return value
