"""Pure entry domain logic - no I/O dependencies."""

from datetime import date, datetime, timezone
from pathlib import Path

TEMPLATE_TOKEN = "{}"


def today_utc(now: datetime | None = None) -> date:
    """Calendar date in UTC, regardless of the operator's timezone."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date()


def entry_dir(entry_path: str | Path, day: date) -> Path:
    """Directory holding entries for the day's month: <entry_path>/<year>/<month>."""
    return Path(entry_path) / str(day.year) / str(day.month)


def entry_filename(day: date) -> str:
    """
    Entry file name for a day.

    Month and day are not zero-padded (2024-03-07 -> 2024_3_7.md) so that
    names stay consistent with existing journals.
    """
    return f"{day.year}_{day.month}_{day.day}.md"


def entry_heading_date(day: date) -> str:
    """Zero-padded date used inside the entry body, e.g. 2024/03/07."""
    return day.strftime("%Y/%m/%d")


def render_entry(template: str, day: date) -> str:
    """Replace every template token with the entry date.

    A template without the token is returned unchanged.
    """
    return template.replace(TEMPLATE_TOKEN, entry_heading_date(day))
