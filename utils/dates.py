"""Event date handling. Dates are ISO strings or the TBD sentinel."""

from datetime import date, datetime, timezone

TBD = "TBD"


def now_utc() -> datetime:
    """
    Current time in UTC.

    Use this instead of datetime.now() everywhere.
    """
    return datetime.now(timezone.utc)


def normalize_event_date(value: str | date | None) -> str:
    """
    Normalize an event date to YYYY-MM-DD.

    Blank values and "TBD" (any case) become the TBD sentinel. Full ISO
    datetimes keep only their calendar date.

    Raises:
        ValueError: If the value is not an ISO date or datetime
    """
    if value is None:
        return TBD
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        raise ValueError(f"Invalid event date: {value!r}")

    text = value.strip()
    if not text or text.upper() == TBD:
        return TBD

    if len(text) > 10 and text[10] in "T ":
        text = text[:10]

    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValueError(f"Invalid event date: {value!r}")


def sort_event_dates(dates) -> list[str]:
    """Unique dates in chronological order with TBD last."""
    unique = {normalize_event_date(d) for d in dates}
    known = sorted(d for d in unique if d != TBD)
    if TBD in unique:
        known.append(TBD)
    return known
