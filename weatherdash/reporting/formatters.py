"""Output formatters for dashboard state: text cards, JSON, and HTML."""

import html
import json
from typing import Any

from weatherdash.catalog.conditions import describe_condition, icon_for, wind_label
from weatherdash.models.forecast import ForecastSnapshot
from weatherdash.models.location import Location
from weatherdash.models.state import DashboardState, Error, Loading, Ready

LOADING_TEXT = "Loading Weather Data..."
MISSING = "–"


def _hhmm(dt) -> str:
    return dt.strftime("%H:%M")


def _value(value: float | None, unit: str = "", spec: str = "") -> str:
    """Format a forecast value, or a dash where the provider sent null."""
    if value is None:
        return MISSING
    return f"{value:{spec}}{unit}"


def overview_rows(snapshot: ForecastSnapshot) -> list[tuple[str, str, str]]:
    """(icon, label, value) rows for the Daily Overview card, from the first day."""
    if not snapshot.daily:
        return []
    today = snapshot.daily[0]
    return [
        ("🔥", "Max Temperature", _value(today.temp_max, "°C")),
        ("❄️", "Min Temperature", _value(today.temp_min, "°C")),
        ("☀️", "UV Index", _value(today.uv_index_max)),
        ("🌅", "Sunrise", _hhmm(today.sunrise)),
        ("🌇", "Sunset", _hhmm(today.sunset)),
    ]


def detail_rows(snapshot: ForecastSnapshot) -> list[tuple[str, str, str]]:
    """(icon, label, value) rows for the Additional Details card."""
    rows = []
    if snapshot.hourly:
        first = snapshot.hourly[0]
        rows.append(("💧", "Humidity", _value(first.humidity, "%", "g")))
        rows.append(("🌧️", "Precipitation", _value(first.precipitation_chance, "%", "g")))
    rows.append(("🍃", "Wind", wind_label(snapshot.current.wind_speed)))
    return rows


def format_ready_text(location: Location, snapshot: ForecastSnapshot, hours: int = 12) -> str:
    """Plain text cards for a ready dashboard."""
    current = snapshot.current
    lines = [
        f"{icon_for(current.condition_code)} {location.display_name} Weather",
        "",
        "== Current Conditions ==",
        f"  {current.temperature}°C  {describe_condition(current.condition_code)}",
        f"  Wind: {current.wind_speed} km/h",
    ]
    overview = overview_rows(snapshot)
    if overview:
        lines.append("")
        lines.append("== Daily Overview ==")
        lines.extend(f"  {icon} {label}: {value}" for icon, label, value in overview)
    lines.append("")
    lines.append("== Additional Details ==")
    lines.extend(
        f"  {icon} {label}: {value}" for icon, label, value in detail_rows(snapshot)
    )
    if snapshot.hourly:
        lines.append("")
        lines.append("== Hourly Forecast ==")
        for h in snapshot.hourly[:hours]:
            lines.append(
                f"  {_hhmm(h.timestamp)}  {icon_for(h.condition_code)}  "
                f"{_value(h.temperature, '°C')}  💧 {_value(h.precipitation_chance, '%', 'g')}"
            )
    return "\n".join(lines)


def format_state_text(state: DashboardState, hours: int = 12) -> str:
    if isinstance(state, Loading):
        return f"🌀 {LOADING_TEXT}"
    if isinstance(state, Error):
        return f"⚠️ Error: {state.message}"
    return format_ready_text(state.location, state.snapshot, hours)


def state_to_dict(state: DashboardState, hours: int = 12) -> dict[str, Any]:
    """JSON-ready view of a dashboard state."""
    data: dict[str, Any] = {"status": state.status.value}
    if isinstance(state, Error):
        data["message"] = state.message
    elif isinstance(state, Ready):
        loc, snap = state.location, state.snapshot
        data["location"] = {
            "name": loc.display_name,
            "latitude": loc.latitude,
            "longitude": loc.longitude,
        }
        data["timezone"] = snap.timezone
        data["current"] = {
            "temperature": snap.current.temperature,
            "wind_speed": snap.current.wind_speed,
            "wind_label": wind_label(snap.current.wind_speed),
            "condition_code": snap.current.condition_code,
            "icon": icon_for(snap.current.condition_code),
            "description": describe_condition(snap.current.condition_code),
        }
        data["daily"] = [
            {
                "sunrise": d.sunrise.isoformat(),
                "sunset": d.sunset.isoformat(),
                "uv_index_max": d.uv_index_max,
                "temp_max": d.temp_max,
                "temp_min": d.temp_min,
                "icon": icon_for(d.condition_code),
            }
            for d in snap.daily
        ]
        data["hourly"] = [
            {
                "time": h.timestamp.isoformat(),
                "temperature": h.temperature,
                "humidity": h.humidity,
                "precipitation_chance": h.precipitation_chance,
                "icon": icon_for(h.condition_code),
            }
            for h in snap.hourly[:hours]
        ]
    return data


def format_state_json(state: DashboardState, hours: int = 12) -> str:
    return json.dumps(state_to_dict(state, hours), indent=2, ensure_ascii=False)


def _html_rows(rows: list[tuple[str, str, str]]) -> str:
    return "".join(
        f'<div class="row"><span>{icon} {html.escape(label)}</span>'
        f"<b>{html.escape(value)}</b></div>"
        for icon, label, value in rows
    )


def format_state_html(state: DashboardState, hours: int = 12) -> str:
    """Self-contained HTML page for the browser dashboard."""
    if isinstance(state, Loading):
        body = f'<div class="screen">🌀<p>{LOADING_TEXT}</p></div>'
    elif isinstance(state, Error):
        body = (
            '<div class="screen error">⚠️'
            f"<p>Error: {html.escape(state.message)}</p></div>"
        )
    else:
        loc, snap = state.location, state.snapshot
        current = snap.current
        hourly = "".join(
            f'<div class="hour"><p>{_hhmm(h.timestamp)}</p>'
            f"<p>{icon_for(h.condition_code)}</p><p>{_value(h.temperature, '°C')}</p>"
            f"<p>💧 {_value(h.precipitation_chance, '%', 'g')}</p></div>"
            for h in snap.hourly[:hours]
        )
        body = (
            f"<header><h1>{icon_for(current.condition_code)} "
            f"{html.escape(loc.display_name)} Weather</h1>"
            '<form method="get" action="/">'
            '<input name="city" placeholder="Search City"><button>🔍</button>'
            "</form></header>"
            '<section class="card"><h2>Current Conditions</h2>'
            f"<p class=\"big\">{current.temperature}°C "
            f"{icon_for(current.condition_code)}</p>"
            f"<p>Wind: {current.wind_speed} km/h</p></section>"
            '<section class="card"><h2>Daily Overview</h2>'
            f"{_html_rows(overview_rows(snap))}</section>"
            '<section class="card"><h2>Additional Details</h2>'
            f"{_html_rows(detail_rows(snap))}</section>"
            '<section class="card wide"><h2>Hourly Forecast</h2>'
            f'<div class="hours">{hourly}</div></section>'
        )
    return (
        "<!doctype html><html><head><meta charset=\"utf-8\">"
        "<title>Weather Dashboard</title>"
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
        "<style>body{font-family:system-ui,sans-serif;margin:0;padding:2rem;"
        "color:#fff;background:linear-gradient(135deg,#3b82f6,#9333ea)}"
        ".card{background:rgba(255,255,255,.2);border-radius:1rem;padding:1.5rem;"
        "margin:1rem 0}.row{display:flex;justify-content:space-between}"
        ".hours{display:flex;overflow-x:auto;gap:1rem}.big{font-size:3rem}"
        ".screen{text-align:center;font-size:3rem}.error{color:#fecaca}</style>"
        f"</head><body>{body}</body></html>"
    )
