# ABOUTME: Closed-form comfort formulas and threshold classifiers for weather metrics.
# ABOUTME: Pure functions of temperature (°C), relative humidity (%) and wind speed (km/h).

import math
from decimal import ROUND_HALF_UP, Decimal

from src.models import ComfortLevel, RainLikelihood, UvRisk, WindWarning

# Rothfusz regression coefficients (Celsius form)
HEAT_INDEX_COEFFICIENTS = (
    -8.784695,
    1.61139411,
    2.338549,
    -0.14611605,
    -0.01230809,
    -0.01642482,
    0.00221173,
    0.00072546,
    -0.00000358,
)

HEAT_INDEX_MIN_TEMPERATURE = 27.0
HEAT_INDEX_MIN_HUMIDITY = 40.0
WIND_CHILL_MAX_TEMPERATURE = 20.0
WIND_CHILL_MIN_WIND_SPEED = 4.8

# Magnus formula constants
MAGNUS_A = 17.27
MAGNUS_B = 237.7

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round to two decimals, halves away from zero, as the number reads in decimal.

    Uses the shortest repr of the float so that 21.005 becomes 21.01 rather than
    falling victim to its binary approximation.
    """
    # Beyond 2**53 every float is integral; Decimal quantize would also exceed its precision.
    if not math.isfinite(value) or abs(value) >= 2**53:
        return value
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def discomfort_index(temperature: float, humidity: float) -> float:
    """Thom's discomfort index."""
    return round2(temperature - (0.55 - 0.0055 * humidity) * (temperature - 14.5))


def heat_index(temperature: float, humidity: float) -> float:
    """Rothfusz heat index; the temperature unchanged outside the hot-humid regime."""
    if temperature < HEAT_INDEX_MIN_TEMPERATURE or humidity < HEAT_INDEX_MIN_HUMIDITY:
        return temperature
    t, rh = temperature, humidity
    c1, c2, c3, c4, c5, c6, c7, c8, c9 = HEAT_INDEX_COEFFICIENTS
    hi = (
        c1
        + c2 * t
        + c3 * rh
        + c4 * t * rh
        + c5 * t * t
        + c6 * rh * rh
        + c7 * t * t * rh
        + c8 * t * rh * rh
        + c9 * t * t * rh * rh
    )
    return round2(hi)


def wind_chill(temperature: float, wind_speed: float) -> float:
    """Wind chill index; the temperature unchanged below 4.8 km/h."""
    if wind_speed < WIND_CHILL_MIN_WIND_SPEED:
        return temperature
    factor = wind_speed**0.16
    return round2(13.12 + 0.6215 * temperature - 11.37 * factor + 0.3965 * temperature * factor)


def exposed_wind_chill(temperature: float, wind_speed: float) -> float | None:
    """Wind chill as reported to callers: only below 20 °C, otherwise None."""
    if temperature < WIND_CHILL_MAX_TEMPERATURE:
        return wind_chill(temperature, wind_speed)
    return None


def dew_point(temperature: float, humidity: float) -> float | None:
    """Magnus dew point, or None wherever the formula is undefined.

    That covers humidity <= 0 (logarithm), temperature == -237.7 °C and
    saturation at MAGNUS_A (zero denominators), and any non-finite result.
    """
    if humidity <= 0 or MAGNUS_B + temperature == 0:
        return None
    alpha = (MAGNUS_A * temperature) / (MAGNUS_B + temperature) + math.log(humidity / 100)
    if MAGNUS_A - alpha == 0:
        return None
    value = (MAGNUS_B * alpha) / (MAGNUS_A - alpha)
    return round2(value) if math.isfinite(value) else None


def feels_like(temperature: float, humidity: float, wind_speed: float) -> float:
    """Pick heat index, wind chill or the raw temperature by regime."""
    if temperature >= HEAT_INDEX_MIN_TEMPERATURE:
        return heat_index(temperature, humidity)
    if temperature < WIND_CHILL_MAX_TEMPERATURE:
        return wind_chill(temperature, wind_speed)
    return temperature


def rain_prediction(temperature: float, humidity: float, wind_speed: float) -> RainLikelihood:
    if humidity > 85 and temperature < 30 and wind_speed < 6:
        return RainLikelihood.HIGH
    if humidity > 75 and temperature < 32:
        return RainLikelihood.MEDIUM
    return RainLikelihood.LOW


def wind_warning(wind_speed: float) -> WindWarning:
    if wind_speed > 25:
        return WindWarning.STRONG_WINDS
    if wind_speed > 15:
        return WindWarning.BREEZY
    return WindWarning.NONE


def comfort_level(discomfort: float) -> ComfortLevel:
    """Map a discomfort index onto the five comfort bands."""
    if discomfort < 21:
        return ComfortLevel.COMFORTABLE
    if discomfort < 24:
        return ComfortLevel.SLIGHTLY_WARM
    if discomfort < 27:
        return ComfortLevel.UNCOMFORTABLE
    if discomfort < 29:
        return ComfortLevel.VERY_UNCOMFORTABLE
    return ComfortLevel.EXTREMELY_UNCOMFORTABLE


def clothing_suggestion(level: ComfortLevel) -> str:
    match level:
        case ComfortLevel.COMFORTABLE:
            return "Wear anything light."
        case ComfortLevel.SLIGHTLY_WARM:
            return "Light clothes are best."
        case ComfortLevel.UNCOMFORTABLE:
            return "Wear cotton, avoid sun."
        case ComfortLevel.VERY_UNCOMFORTABLE:
            return "Stay hydrated, loose cotton clothing."
        case ComfortLevel.EXTREMELY_UNCOMFORTABLE:
            return "Avoid outdoor activity, stay in shade."
        case _:
            return "Dress as needed."


def uv_risk(temperature: float, humidity: float) -> UvRisk:
    """Rough UV risk from temperature and humidity alone."""
    if temperature > 30 and humidity < 50:
        return UvRisk.HIGH
    if temperature > 25:
        return UvRisk.MODERATE
    return UvRisk.LOW
