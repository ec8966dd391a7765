"""Output formatters for snapshots and widget descriptors."""

import json
from dataclasses import asdict
from typing import Any

from weatherdash.formatting.units import (
    format_date,
    format_datetime,
    format_temperature,
    format_time,
    wind_direction_label,
)
from weatherdash.formatting.weather_codes import describe_weather_code, icon_for_weather_code
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.location import Coordinate
from weatherdash.models.weather import WeatherSnapshot
from weatherdash.models.widget import WidgetDescriptor

HOURLY_TEXT_STEP = 3


def format_snapshot_text(
    coordinate: Coordinate,
    snapshot: WeatherSnapshot,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
) -> str:
    """Plain text report for the terminal."""
    c = snapshot.current
    lines = [
        f"=== {coordinate.name} ({coordinate.latitude:.4f}, {coordinate.longitude:.4f}) ===",
        f"Timezone: {snapshot.location.timezone} | Updated: {format_datetime(c.time)}",
        f"{icon_for_weather_code(c.weather_code)} {format_temperature(c.temperature, unit)} "
        f"{describe_weather_code(c.weather_code)}",
    ]
    if c.apparent_temperature is not None:
        lines.append(f"Feels like: {format_temperature(c.apparent_temperature, unit)}")
    lines.append(
        f"Wind: {c.wind_speed} km/h {wind_direction_label(c.wind_direction)} | "
        f"Humidity: {c.humidity}% | Precipitation: {c.precipitation} mm"
    )

    lines.append("")
    lines.append("Hourly:")
    h = snapshot.hourly
    for i in range(0, len(h), HOURLY_TEXT_STEP):
        lines.append(
            f"  {format_time(h.time[i])}  {format_temperature(h.temperature[i], unit):>6}  "
            f"{h.precipitation[i]:.1f}mm  {h.wind_speed[i]}km/h"
        )

    lines.append("")
    lines.append("Daily:")
    d = snapshot.daily
    for i, day in enumerate(d.time):
        label = "Today" if i == 0 else format_date(day)
        lines.append(
            f"  {label:<12} {icon_for_weather_code(d.weather_code[i])} "
            f"{format_temperature(d.temperature_max[i], unit)} / "
            f"{format_temperature(d.temperature_min[i], unit)}  "
            f"{d.precipitation[i]:.1f}mm  {describe_weather_code(d.weather_code[i])}"
        )
    return "\n".join(lines)


def snapshot_to_dict(coordinate: Coordinate, snapshot: WeatherSnapshot) -> dict[str, Any]:
    return {
        "coordinate": asdict(coordinate),
        "current": asdict(snapshot.current),
        "hourly": {k: list(v) for k, v in asdict(snapshot.hourly).items()},
        "daily": {k: list(v) for k, v in asdict(snapshot.daily).items()},
        "location": asdict(snapshot.location),
    }


def format_snapshot_json(coordinate: Coordinate, snapshot: WeatherSnapshot) -> str:
    """JSON snapshot for programmatic consumption."""
    return json.dumps(snapshot_to_dict(coordinate, snapshot), indent=2, ensure_ascii=False)


def widget_to_dict(widget: WidgetDescriptor) -> dict[str, Any]:
    """Evaluate a descriptor's producers into a JSON-ready dict."""
    return {
        "title": widget.title,
        "description": widget.description,
        "icon": widget.icon,
        "header": asdict(widget.header()),
        "content": asdict(widget.content()),
        "definition": asdict(widget.definition),
        "static_min_height": widget.static_min_height,
    }
