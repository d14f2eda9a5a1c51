from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from membership_engine.application.errors import DateParseError


def parse_end_date(value: str) -> date:
    """Read a membership end date given as YYYY-MM-DD or a full ISO timestamp."""
    if not isinstance(value, str) or not value.strip():
        raise DateParseError(str(value))
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as e:
        raise DateParseError(value) from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def next_start_date(current_end_date: str) -> str:
    """Day after the current membership ends, formatted YYYY-MM-DD."""
    end = parse_end_date(current_end_date)
    try:
        return (end + timedelta(days=1)).isoformat()
    except OverflowError as e:
        raise DateParseError(current_end_date, f"No calendar day follows {current_end_date!r}") from e
