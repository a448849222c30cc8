"""Utility modules for cross-cutting concerns."""

from utils.dates import TBD, now_utc, normalize_event_date, sort_event_dates
