"""Frontmatter validation and normalization of date, tags, and author"""

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from mdindex.core.errors import ValidationError


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "author", "tags", "category")

# Accepted besides ISO-8601, which datetime.fromisoformat handles.
_DATE_FORMATS = ("%Y/%m/%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y")


def _author_value(value: Any) -> Any:
    """Unwrap an `{name: ...}` author mapping to its name."""
    if isinstance(value, Mapping):
        return value.get("name")
    return value


def missing_fields(raw: Mapping[str, Any]) -> list[str]:
    """Return required fields that are absent or falsy, in REQUIRED_FIELDS order."""
    missing = []
    for field in REQUIRED_FIELDS:
        value = raw.get(field)
        if field == "author":
            value = _author_value(value)
        if not value:
            missing.append(field)
    return missing


def iso_timestamp(dt: datetime) -> str:
    """Render dt as a UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_date(value: Any) -> str:
    """Return value as an ISO-8601 UTC timestamp string.

    Accepts datetime/date objects (as decoded by YAML), epoch milliseconds,
    and strings in ISO-8601 or a few common written forms. Naive values are
    taken as UTC. Raises ValidationError for anything else.
    """
    if isinstance(value, datetime):
        return iso_timestamp(value)
    if isinstance(value, date):
        return iso_timestamp(datetime(value.year, value.month, value.day))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return iso_timestamp(datetime.fromtimestamp(value / 1000, tz=timezone.utc))
        except (OverflowError, OSError, ValueError) as e:
            raise ValidationError(f"Invalid date: {value!r}") from e
    if isinstance(value, str):
        text = value.strip()
        try:
            return iso_timestamp(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError:
            pass
        for fmt in _DATE_FORMATS:
            try:
                return iso_timestamp(datetime.strptime(text, fmt))
            except ValueError:
                continue
    raise ValidationError(f"Invalid date: {value!r}")


def normalize_tags(value: Any) -> list[str]:
    """Keep list/tuple tags (as strings); wrap a scalar, dropping it when falsy."""
    if isinstance(value, (list, tuple)):
        return [str(t) for t in value]
    return [str(t) for t in [value] if t]


def normalize_author(value: Any) -> str:
    """Return the author as a string, using `name` when the author is a mapping."""
    value = _author_value(value)
    return "" if value is None else str(value)


def validate_metadata(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return a normalized copy of raw; raise ValidationError naming every missing field.

    The input mapping is never mutated. All original keys are kept; only
    date, tags, and author are replaced by their normalized values.
    """
    missing = missing_fields(raw)
    if missing:
        raise ValidationError(
            f"Missing required metadata fields: {', '.join(missing)}", missing=missing,
        )
    metadata = dict(raw)
    metadata["date"] = normalize_date(raw["date"])
    metadata["tags"] = normalize_tags(raw["tags"])
    metadata["author"] = normalize_author(raw["author"])
    logger.debug("Validated metadata for %r", metadata["title"])
    return metadata
