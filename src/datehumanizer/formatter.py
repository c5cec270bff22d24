"""Relative-time formatting: turn an instant into "3 hours ago" or "in 5 minutes".

Months are 30 days and years 365 days. No calendar arithmetic is done.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any

from .core.types import FormattingRequest, MessageKey, Thresholds
from .locales.builtin import DEFAULT_LOCALE
from .locales.registry import LocaleRegistry, LocaleTable, default_registry

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid date"

DEFAULT_THRESHOLDS: Thresholds = {
    "second": 60,
    "minute": 60,
    "hour": 24,
    "day": 7,
    "week": 4,
    "month": 12,
    "year": math.inf,
}

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# (past, future) keys per bucket
_DIRECTIONAL: dict[str, tuple[MessageKey, MessageKey]] = {
    "seconds": (MessageKey.SECONDS_AGO, MessageKey.IN_SECONDS),
    "minute": (MessageKey.MINUTE_AGO, MessageKey.IN_MINUTE),
    "minutes": (MessageKey.MINUTES_AGO, MessageKey.IN_MINUTES),
    "hour": (MessageKey.HOUR_AGO, MessageKey.IN_HOUR),
    "hours": (MessageKey.HOURS_AGO, MessageKey.IN_HOURS),
    "days": (MessageKey.DAYS_AGO, MessageKey.IN_DAYS),
    "weeks": (MessageKey.WEEKS_AGO, MessageKey.IN_WEEKS),
    "months": (MessageKey.MONTHS_AGO, MessageKey.IN_MONTHS),
    "years": (MessageKey.YEARS_AGO, MessageKey.IN_YEARS),
}


class InvalidDateError(ValueError):
    """Raised when a value cannot be turned into a valid instant."""


def coerce_date(value: Any) -> datetime:
    """Turn *value* into a timezone-aware datetime.

    Accepts a ``datetime`` (naive values are taken as UTC), a ``date``
    (midnight UTC), a number of milliseconds since the Unix epoch, or an
    ISO 8601 string such as ``"2025-04-27T12:00:00Z"``.

    Raises:
        InvalidDateError: For unsupported types, non-finite or out-of-range
            numbers, and strings that do not parse.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        raise InvalidDateError("Invalid date format: bool")
    elif isinstance(value, numbers.Real):
        millis = float(value)
        if not math.isfinite(millis):
            raise InvalidDateError(f"Invalid date: {value!r}")
        try:
            dt = _EPOCH + timedelta(milliseconds=millis)
        except OverflowError as exc:
            raise InvalidDateError(f"Invalid date: {value!r} is out of range") from exc
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidDateError(f"Invalid date: {value!r}") from exc
    else:
        raise InvalidDateError(f"Invalid date format: {type(value).__name__}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def merge_thresholds(overrides: Mapping | None) -> Thresholds:
    """Validate caller threshold overrides.

    Unknown units and values that are not positive integers are dropped with
    a warning. The year bound may also be ``math.inf``. The result holds only the accepted overrides; merge it over
    :data:`DEFAULT_THRESHOLDS` for the full set.
    """
    accepted: Thresholds = {}
    if overrides is None:
        return accepted
    if not isinstance(overrides, Mapping):
        logger.warning("Ignoring thresholds: expected a mapping, got %s", type(overrides).__name__)
        return accepted

    for unit, bound in overrides.items():
        if unit not in DEFAULT_THRESHOLDS:
            logger.warning("Ignoring threshold for unknown unit %r", unit)
            continue
        unbounded_year = unit == "year" and bound == math.inf
        if not unbounded_year and (
            isinstance(bound, bool) or not isinstance(bound, numbers.Integral) or bound <= 0
        ):
            logger.warning("Ignoring threshold %s=%r: not a positive integer", unit, bound)
            continue
        accepted[unit] = bound
    return accepted


def format_message(table: LocaleTable, key: MessageKey, count: int) -> str:
    """Render the template for *key*, substituting every ``{count}`` token."""
    return table[key].replace("{count}", str(count))


def select_message(request: FormattingRequest) -> tuple[MessageKey, int]:
    """Pick the message key and count for a formatting request.

    Checks run in a fixed order and the first match wins. The exact-day
    idioms ("yesterday", "last week", ...) are checked after the hour bucket
    and before the day bucket, so a difference of exactly 31 days reads
    "last month" rather than "4 weeks ago". Every key comes with a count, so
    locales may put ``{count}`` in any template.
    """
    diff_seconds = (request.target - request.reference) // timedelta(seconds=1)
    is_past = diff_seconds < 0
    abs_diff = abs(diff_seconds)

    diff_minutes = abs_diff // MINUTE
    diff_hours = abs_diff // HOUR
    diff_days = abs_diff // DAY
    diff_weeks = abs_diff // WEEK
    diff_months = abs_diff // MONTH
    diff_years = abs_diff // YEAR

    def directional(bucket: str) -> MessageKey:
        past, future = _DIRECTIONAL[bucket]
        return past if is_past else future

    # Only the minute bucket can be widened by an override
    minute_bound = request.thresholds.get("minute", DEFAULT_THRESHOLDS["minute"])
    if "minute" in request.overrides and 60 < diff_minutes <= minute_bound:
        return directional("minutes"), diff_minutes

    if abs_diff < 5 and request.include_seconds:
        return MessageKey.JUST_NOW, abs_diff

    if abs_diff < 60:
        return directional("seconds"), abs_diff

    if diff_minutes < 60:
        if diff_minutes == 1:
            return directional("minute"), 1
        return directional("minutes"), diff_minutes

    if diff_hours < 24:
        if diff_hours == 1:
            return directional("hour"), 1
        return directional("hours"), diff_hours

    if is_past:
        if diff_days == 1:
            return MessageKey.YESTERDAY, 1
        if diff_days == 7:
            return MessageKey.LAST_WEEK, 1
        if diff_days == 21:
            return MessageKey.WEEKS_AGO, 3
        if diff_days == 31:
            return MessageKey.LAST_MONTH, 1
        if diff_days == 365:
            return MessageKey.LAST_YEAR, 1
    elif diff_days == 1:
        return MessageKey.TOMORROW, 1

    if diff_days < 7:
        return directional("days"), diff_days
    if diff_weeks < 4:
        return directional("weeks"), diff_weeks
    if diff_months < 12:
        return directional("months"), diff_months
    return directional("years"), diff_years


def humanize(
    value: Any,
    *,
    locale: str = DEFAULT_LOCALE,
    thresholds: Mapping | None = None,
    include_seconds: bool = True,
    now: Any = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Describe *value* relative to *now* in the given locale.

    Examples (en): "just now", "5 minutes ago", "yesterday", "in 3 days".

    Args:
        value: The instant to describe. See :func:`coerce_date` for the
            accepted forms.
        locale: Locale code. Unknown codes fall back to the default locale.
        thresholds: Partial per-unit overrides, merged over the defaults.
        include_seconds: When False, differences under 5 seconds render as
            seconds instead of "just now".
        now: Reference instant. Defaults to the current UTC time.
        registry: Locale registry to read from. Defaults to the process-wide
            :data:`default_registry`.

    Returns:
        The phrase, or ``"Invalid date"`` if *value* or *now* cannot be
        interpreted as an instant.
    """
    registry = registry if registry is not None else default_registry

    try:
        target = coerce_date(value)
        reference = datetime.now(timezone.utc) if now is None else coerce_date(now)
    except InvalidDateError as exc:
        logger.warning("datehumanizer: %s", exc)
        return INVALID_DATE

    if locale not in registry:
        logger.warning(
            "Locale %r not found. Using default locale %r.",
            locale,
            registry.default_locale,
        )

    overrides = merge_thresholds(thresholds)
    request = FormattingRequest(
        target=target,
        reference=reference,
        locale=locale,
        thresholds={**DEFAULT_THRESHOLDS, **overrides},
        include_seconds=include_seconds is not False,
        overrides=overrides,
    )

    key, count = select_message(request)
    return format_message(registry.lookup(request.locale), key, count)
