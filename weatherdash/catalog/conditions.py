"""WMO weather condition codes: icons, descriptions, and wind labels.

Code table follows the Open-Meteo documentation (https://open-meteo.com/en/docs).
"""

from types import MappingProxyType

FALLBACK_ICON = "🌈"
UNKNOWN_CONDITION = "Unknown"

CONDITION_ICONS = MappingProxyType({
    0: "☀️",
    1: "🌤️",
    2: "⛅",
    3: "☁️",
    45: "🌫️",
    48: "🌫️",
    51: "🌧️",
    53: "🌧️",
    55: "🌧️",
    61: "🌧️",
    63: "🌧️",
    65: "🌧️",
    71: "❄️",
    73: "❄️",
    75: "❄️",
    77: "❄️",
    80: "🌧️",
    81: "🌧️",
    82: "🌧️",
    85: "❄️",
    86: "❄️",
    95: "⛈️",
    96: "⛈️",
    99: "⛈️",
})

CONDITION_DESCRIPTIONS = MappingProxyType({
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with light hail",
    99: "Thunderstorm with heavy hail",
})

# (exclusive upper bound km/h, label), ascending; first match wins
WIND_LADDER: tuple[tuple[float, str], ...] = (
    (1, "Calm"),
    (5, "Light Breeze"),
    (11, "Gentle Breeze"),
    (19, "Moderate Breeze"),
    (28, "Fresh Breeze"),
    (38, "Strong Breeze"),
)
HIGH_WIND = "High Wind"


def icon_for(code: int) -> str:
    """Return the display glyph for a condition code, or the fallback glyph."""
    return CONDITION_ICONS.get(code, FALLBACK_ICON)


def describe_condition(code: int) -> str:
    return CONDITION_DESCRIPTIONS.get(code, UNKNOWN_CONDITION)


def wind_label(speed_kmh: float) -> str:
    """Describe a wind speed. A speed equal to a threshold falls in the higher bucket."""
    for upper, label in WIND_LADDER:
        if speed_kmh < upper:
            return label
    return HIGH_WIND
