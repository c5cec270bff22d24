"""Locale tables shipped with datehumanizer."""

from __future__ import annotations

DEFAULT_LOCALE = "en"

EN: dict[str, str] = {
    "just_now": "just now",
    "seconds_ago": "{count} seconds ago",
    "minute_ago": "a minute ago",
    "minutes_ago": "{count} minutes ago",
    "hour_ago": "an hour ago",
    "hours_ago": "{count} hours ago",
    "yesterday": "yesterday",
    "days_ago": "{count} days ago",
    "last_week": "last week",
    "weeks_ago": "{count} weeks ago",
    "last_month": "last month",
    "months_ago": "{count} months ago",
    "last_year": "last year",
    "years_ago": "{count} years ago",
    "in_seconds": "in {count} seconds",
    "in_minute": "in a minute",
    "in_minutes": "in {count} minutes",
    "in_hour": "in an hour",
    "in_hours": "in {count} hours",
    "tomorrow": "tomorrow",
    "in_days": "in {count} days",
    "in_week": "in a week",
    "in_weeks": "in {count} weeks",
    "in_month": "in a month",
    "in_months": "in {count} months",
    "in_year": "in a year",
    "in_years": "in {count} years",
}

ES: dict[str, str] = {
    "just_now": "ahora mismo",
    "seconds_ago": "hace {count} segundos",
    "minute_ago": "hace un minuto",
    "minutes_ago": "hace {count} minutos",
    "hour_ago": "hace una hora",
    "hours_ago": "hace {count} horas",
    "yesterday": "ayer",
    "days_ago": "hace {count} días",
    "last_week": "la semana pasada",
    "weeks_ago": "hace {count} semanas",
    "last_month": "el mes pasado",
    "months_ago": "hace {count} meses",
    "last_year": "el año pasado",
    "years_ago": "hace {count} años",
    "in_seconds": "en {count} segundos",
    "in_minute": "en un minuto",
    "in_minutes": "en {count} minutos",
    "in_hour": "en una hora",
    "in_hours": "en {count} horas",
    "tomorrow": "mañana",
    "in_days": "en {count} días",
    "in_week": "en una semana",
    "in_weeks": "en {count} semanas",
    "in_month": "en un mes",
    "in_months": "en {count} meses",
    "in_year": "en un año",
    "in_years": "en {count} años",
}

FR: dict[str, str] = {
    "just_now": "à l'instant",
    "seconds_ago": "il y a {count} secondes",
    "minute_ago": "il y a une minute",
    "minutes_ago": "il y a {count} minutes",
    "hour_ago": "il y a une heure",
    "hours_ago": "il y a {count} heures",
    "yesterday": "hier",
    "days_ago": "il y a {count} jours",
    "last_week": "la semaine dernière",
    "weeks_ago": "il y a {count} semaines",
    "last_month": "le mois dernier",
    "months_ago": "il y a {count} mois",
    "last_year": "l'année dernière",
    "years_ago": "il y a {count} ans",
    "in_seconds": "dans {count} secondes",
    "in_minute": "dans une minute",
    "in_minutes": "dans {count} minutes",
    "in_hour": "dans une heure",
    "in_hours": "dans {count} heures",
    "tomorrow": "demain",
    "in_days": "dans {count} jours",
    "in_week": "dans une semaine",
    "in_weeks": "dans {count} semaines",
    "in_month": "dans un mois",
    "in_months": "dans {count} mois",
    "in_year": "dans un an",
    "in_years": "dans {count} ans",
}

# Registration order: default first
BUILTIN_LOCALES: dict[str, dict[str, str]] = {
    DEFAULT_LOCALE: EN,
    "es": ES,
    "fr": FR,
}
