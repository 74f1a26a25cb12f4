"""
Query filters for the catalog stores.

A filter maps field names to matchers. A matcher is either an exact value or
a pattern:

- a compiled ``re.Pattern`` (``re.compile("^Foo", re.IGNORECASE)``)
- the JSON form ``{"$regex": "^Foo", "$options": "i"}``, as sent by clients

Fields are AND-combined and an empty filter matches every document. There are
no OR, range or negation operators.
"""
import re
from typing import Any, Mapping, Optional

REGEX_OPTIONS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
REGEX_KEYS = {"$regex", "$options"}


class InvalidFilterError(ValueError):
    """Raised when a filter uses an unsupported field or operator."""


def build_query(filter: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Translate a filter into a MongoDB query document.

    Args:
        filter: Mapping of field name to exact value or pattern

    Returns:
        Query document for ``find``/``find_one``

    Raises:
        InvalidFilterError: On operator fields, unknown operators or bad patterns
    """
    query: dict[str, Any] = {}
    for field, matcher in (filter or {}).items():
        if not isinstance(field, str) or not field or field.startswith("$"):
            raise InvalidFilterError(f"Unsupported filter field: {field!r}")
        query[field] = _to_matcher(field, matcher)
    return query


def _to_matcher(field: str, matcher: Any) -> Any:
    if isinstance(matcher, re.Pattern):
        return matcher
    if isinstance(matcher, Mapping) and any(
        isinstance(k, str) and k.startswith("$") for k in matcher
    ):
        return _compile_regex(field, matcher)
    return matcher


def _compile_regex(field: str, matcher: Mapping[str, Any]) -> re.Pattern:
    unknown = set(matcher) - REGEX_KEYS
    if unknown:
        raise InvalidFilterError(
            f"Unsupported operator(s) for {field!r}: {sorted(map(str, unknown))}"
        )
    pattern = matcher.get("$regex")
    if not isinstance(pattern, str):
        raise InvalidFilterError(f"$regex for {field!r} must be a string")

    options = matcher.get("$options", "")
    if not isinstance(options, str):
        raise InvalidFilterError(f"$options for {field!r} must be a string")

    flags = 0
    for option in options:
        if option not in REGEX_OPTIONS:
            raise InvalidFilterError(f"Unsupported regex option {option!r} for {field!r}")
        flags |= REGEX_OPTIONS[option]

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidFilterError(f"Invalid pattern for {field!r}: {e}") from e


def exact_name_pattern(name: str) -> re.Pattern:
    """Anchored, case-insensitive pattern matching ``name`` literally."""
    return re.compile("^" + re.escape(name) + "$", re.IGNORECASE)


def describe(query: Mapping[str, Any]) -> str:
    """Render a query for log messages, showing patterns as /pattern/flags."""
    parts = []
    for field, matcher in query.items():
        if isinstance(matcher, re.Pattern):
            options = "".join(k for k, v in REGEX_OPTIONS.items() if matcher.flags & v)
            parts.append(f"{field}: /{matcher.pattern}/{options}")
        else:
            parts.append(f"{field}: {matcher!r}")
    return "{" + ", ".join(parts) + "}"
