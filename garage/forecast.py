"""Daily summaries of a 5-day / 3-hour weather forecast."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

REPRESENTATIVE_HOUR = "12:00:00"


@dataclass
class DailyForecast:
    date: str
    temp_min: float
    temp_max: float
    description: str
    icon: str


def summarize_forecast(payload: Any) -> List[DailyForecast]:
    """
    Group forecast entries by day.

    Min/max temperatures span the whole day. Description and icon come from
    the 12:00 entry, or the middle entry of the day when there is none.
    Returns an empty list for payloads without a usable ``list``.
    """
    entries = payload.get("list") if isinstance(payload, dict) else None
    if not isinstance(entries, list) or not entries:
        logger.warning("Forecast payload has no entries")
        return []

    days: Dict[str, Dict[str, list]] = {}
    for item in entries:
        try:
            day, hour = item["dt_txt"].split(" ")
            temp = float(item["main"]["temp"])
            weather = item["weather"][0]
            description = weather.get("description") or ""
            icon = weather.get("icon") or ""
        except (KeyError, IndexError, TypeError, ValueError, AttributeError):
            logger.warning("Skipping malformed forecast entry: %r", item)
            continue
        bucket = days.setdefault(day, {"temps": [], "hours": [], "descriptions": [], "icons": []})
        bucket["temps"].append(temp)
        bucket["hours"].append(hour)
        bucket["descriptions"].append(str(description))
        bucket["icons"].append(str(icon))

    summaries = []
    for day, bucket in days.items():
        hours = bucket["hours"]
        index = hours.index(REPRESENTATIVE_HOUR) if REPRESENTATIVE_HOUR in hours else len(hours) // 2
        description = bucket["descriptions"][index] or bucket["descriptions"][0] or "No description"
        icon = bucket["icons"][index] or bucket["icons"][0] or "01d"
        summaries.append(DailyForecast(
            date=day,
            temp_min=round(min(bucket["temps"]), 1),
            temp_max=round(max(bucket["temps"]), 1),
            description=description[:1].upper() + description[1:],
            icon=icon,
        ))
    return summaries
