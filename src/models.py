# ABOUTME: Pydantic BaseModels for weather metrics input, derived indices, and API responses.
# ABOUTME: Defines the immutable value types passed between the engine and the web layer.

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ComfortLevel(str, Enum):
    """Comfort categories derived from the discomfort index."""

    COMFORTABLE = "Comfortable"
    SLIGHTLY_WARM = "Slightly Warm"
    UNCOMFORTABLE = "Uncomfortable"
    VERY_UNCOMFORTABLE = "Very Uncomfortable"
    EXTREMELY_UNCOMFORTABLE = "Extremely Uncomfortable"


class RainLikelihood(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class WindWarning(str, Enum):
    STRONG_WINDS = "Strong Winds"
    BREEZY = "Breezy"
    NONE = "None"


class UvRisk(str, Enum):
    """Coarse UV risk estimated from temperature and humidity."""

    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"


class MetricsInput(BaseModel):
    """Validated raw observation: °C, % relative humidity, km/h and a direction label."""

    model_config = _WIRE_CONFIG

    temperature: float
    humidity: float
    wind_speed: float
    wind_direction: str = "Unknown"


class Indices(BaseModel):
    """Numeric apparent-temperature indices plus the UV risk label."""

    model_config = _WIRE_CONFIG

    discomfort_index: float
    heat_index: float
    wind_chill: float | None = None
    dew_point: float | None = None
    feels_like: float
    uv_risk: UvRisk


class WeatherForecast(BaseModel):
    """Categorical outlook derived from the raw observation."""

    model_config = _WIRE_CONFIG

    rain_prediction: RainLikelihood
    wind_warning: WindWarning
    comfort_level: ComfortLevel
    clothing_suggestion: str


class Meta(BaseModel):
    model_config = _WIRE_CONFIG

    server_time: str
    location: str


class MetricsResult(BaseModel):
    """Complete response for one evaluation."""

    model_config = _WIRE_CONFIG

    input: MetricsInput
    indices: Indices
    weather_forecast: WeatherForecast
    meta: Meta


class ErrorResponse(BaseModel):
    """Body returned when required fields are missing or non-numeric."""

    model_config = _WIRE_CONFIG

    error: str = "Validation error"
    details: list[str] = []
