# ABOUTME: Validation and evaluation entry points for the weather metrics engine.
# ABOUTME: Turns raw request values into a MetricsInput and assembles the full MetricsResult.

import logging
import math
from datetime import datetime, timezone

from src import metrics
from src.exceptions import MetricsValidationError
from src.models import Indices, Meta, MetricsInput, MetricsResult, WeatherForecast

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Plaksha University, Mohali, Punjab"
DEFAULT_WIND_DIRECTION = "Unknown"


def parse_number(raw) -> float | None:
    """Parse a raw request value into a finite float, or None if it is missing or invalid."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def validate_input(temperature, humidity, wind_speed, wind_direction=None) -> MetricsInput:
    """Validate all three required fields in one pass.

    Raises:
        MetricsValidationError: listing every field that is missing or non-numeric,
            in the order temperature, humidity, windSpeed.
    """
    fields = {"temperature": temperature, "humidity": humidity, "windSpeed": wind_speed}
    parsed = {name: parse_number(raw) for name, raw in fields.items()}
    errors = [f"Invalid or missing {name}" for name, value in parsed.items() if value is None]
    if errors:
        raise MetricsValidationError(errors)

    if wind_direction is None or wind_direction == "":
        direction = DEFAULT_WIND_DIRECTION
    else:
        direction = wind_direction if isinstance(wind_direction, str) else str(wind_direction)

    return MetricsInput(
        temperature=parsed["temperature"],
        humidity=parsed["humidity"],
        wind_speed=parsed["windSpeed"],
        wind_direction=direction,
    )


def format_server_time(moment: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a trailing Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compute_metrics(
    metrics_input: MetricsInput,
    location: str = DEFAULT_LOCATION,
    now: datetime | None = None,
) -> MetricsResult:
    """Run every formula and classifier against an already validated input.

    Raises:
        MetricsValidationError: when a finite input overflows an index to infinity or NaN.
    """
    t = metrics_input.temperature
    rh = metrics_input.humidity
    wind = metrics_input.wind_speed

    numeric = {
        "discomfortIndex": metrics.discomfort_index(t, rh),
        "heatIndex": metrics.heat_index(t, rh),
        "windChill": metrics.exposed_wind_chill(t, wind),
        "feelsLike": metrics.feels_like(t, rh, wind),
    }
    overflowed = [name for name, value in numeric.items() if value is not None and not math.isfinite(value)]
    if overflowed:
        raise MetricsValidationError([f"Inputs out of range: {name} is not a finite number" for name in overflowed])

    level = metrics.comfort_level(numeric["discomfortIndex"])
    indices = Indices(
        discomfort_index=numeric["discomfortIndex"],
        heat_index=numeric["heatIndex"],
        wind_chill=numeric["windChill"],
        dew_point=metrics.dew_point(t, rh),
        feels_like=numeric["feelsLike"],
        uv_risk=metrics.uv_risk(t, rh),
    )
    forecast = WeatherForecast(
        rain_prediction=metrics.rain_prediction(t, rh, wind),
        wind_warning=metrics.wind_warning(wind),
        comfort_level=level,
        clothing_suggestion=metrics.clothing_suggestion(level),
    )
    meta = Meta(
        server_time=format_server_time(now or datetime.now(timezone.utc)),
        location=location,
    )
    return MetricsResult(input=metrics_input, indices=indices, weather_forecast=forecast, meta=meta)


def evaluate(
    temperature,
    humidity,
    wind_speed,
    wind_direction=None,
    *,
    location: str = DEFAULT_LOCATION,
    now: datetime | None = None,
) -> MetricsResult:
    """Validate raw values and compute the full metrics result.

    Nothing is computed unless all three required fields validate.

    Raises:
        MetricsValidationError: when any required field is missing or non-numeric, or the
            inputs are too large for the indices to stay finite.
    """
    metrics_input = validate_input(temperature, humidity, wind_speed, wind_direction)
    if metrics_input.humidity <= 0:
        logger.warning("Humidity %s <= 0, dew point left undefined", metrics_input.humidity)
    return compute_metrics(metrics_input, location=location, now=now)
