"""Airing: should I open the window?"""

# Define public API
__all__ = [
    "Sample",
    "DailyAverage",
    "ProjectedRow",
    "HumidityTable",
    "Forecast",
    "AppSettings",
    "ForecastClient",
    "saturation_pressure",
    "project",
    "window",
    "aggregate_by_day",
]

# Import models
from .models import DailyAverage, Forecast, HumidityTable, ProjectedRow, Sample

# Import settings
from .settings import AppSettings

# Import core computations
from .psychrometrics import project, saturation_pressure
from .series import aggregate_by_day, window

# Import forecast client
from .forecast_client import ForecastClient
