from coviddash.schemas.chart import (
    ChartDescription,
    ChartMode,
    ChartSeries,
    PieRing,
    PieSlice,
)
from coviddash.schemas.country_code import CountryCode, CountryCodeList
from coviddash.schemas.country_series import CountrySeries
from coviddash.schemas.daily_record import DailyRecord
from coviddash.schemas.derived_metrics import CountrySummary, DerivedMetrics

__all__ = [
    "ChartDescription",
    "ChartMode",
    "ChartSeries",
    "CountryCode",
    "CountryCodeList",
    "CountrySeries",
    "CountrySummary",
    "DailyRecord",
    "DerivedMetrics",
    "PieRing",
    "PieSlice",
]
