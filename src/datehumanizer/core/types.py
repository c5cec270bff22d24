"""Type definitions for datehumanizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TypedDict


class MessageKey(str, Enum):
    """Every message kind a locale table must provide."""

    JUST_NOW = "just_now"
    SECONDS_AGO = "seconds_ago"
    MINUTE_AGO = "minute_ago"
    MINUTES_AGO = "minutes_ago"
    HOUR_AGO = "hour_ago"
    HOURS_AGO = "hours_ago"
    YESTERDAY = "yesterday"
    DAYS_AGO = "days_ago"
    LAST_WEEK = "last_week"
    WEEKS_AGO = "weeks_ago"
    LAST_MONTH = "last_month"
    MONTHS_AGO = "months_ago"
    LAST_YEAR = "last_year"
    YEARS_AGO = "years_ago"
    IN_SECONDS = "in_seconds"
    IN_MINUTE = "in_minute"
    IN_MINUTES = "in_minutes"
    IN_HOUR = "in_hour"
    IN_HOURS = "in_hours"
    TOMORROW = "tomorrow"
    IN_DAYS = "in_days"
    IN_WEEK = "in_week"
    IN_WEEKS = "in_weeks"
    IN_MONTH = "in_month"
    IN_MONTHS = "in_months"
    IN_YEAR = "in_year"
    IN_YEARS = "in_years"


class Thresholds(TypedDict, total=False):
    """Upper bound per unit before the next larger unit is used."""

    second: int
    minute: int
    hour: int
    day: int
    week: int
    month: int
    year: float


@dataclass(frozen=True)
class FormattingRequest:
    """One humanize call, resolved to concrete instants and options."""

    target: datetime
    reference: datetime
    locale: str
    # Defaults merged with overrides; only the minute bound affects bucketing
    thresholds: Thresholds = field(default_factory=dict)
    include_seconds: bool = True
    # Units the caller overrode; the minute bound applies only when listed here
    overrides: Thresholds = field(default_factory=dict)
