"""
Translate list-request query parameters into a ListQuery.

Supported parameters:
    select=name,description        projection
    sort=-averageCost,name         sort order, ``-`` for descending
    page=2&limit=10                pagination
    averageCost[lte]=10000         comparison operators: gt, gte, lt, lte, in
    housing=true                   equality on any other field

Operator values for ``in`` are comma-separated. Values are passed through
as strings; the store casts them to the schema field types.
"""

import re
from typing import Any, Iterable

from devcamper.application.resources.dtos import ListQuery
from devcamper.domain.errors import FieldValidationError

RESERVED_PARAMS = frozenset({"select", "sort", "page", "limit"})
DEFAULT_SORT = (("createdAt", -1),)

_OPERATOR_KEY = re.compile(r"^(?P<field>[A-Za-z_][\w.]*)\[(?P<op>gt|gte|lt|lte|in)\]$")
_FIELD_KEY = re.compile(r"^[A-Za-z_][\w.]*$")


def parse_list_query(
    params: Iterable[tuple[str, str]],
    default_limit: int = 25,
    max_limit: int = 100,
) -> ListQuery:
    """Build a ListQuery from raw ``(key, value)`` query parameters.

    Args:
        params: Query-string items, repeated keys allowed.
        default_limit: Page size when ``limit`` is absent.
        max_limit: Upper bound for ``limit``.

    Returns:
        The parsed query.

    Raises:
        FieldValidationError: If a parameter is malformed.
    """
    filter_doc: dict[str, Any] = {}
    select = None
    sort = DEFAULT_SORT
    page = 1
    limit = default_limit
    errors: dict[str, str] = {}

    for key, value in params:
        if key == "select":
            select = _field_names(_split(value), "select", errors) or None
        elif key == "sort":
            keys = [_sort_key(part) for part in _split(value)]
            _field_names([name for name, _ in keys], "sort", errors)
            sort = tuple(keys) or DEFAULT_SORT
        elif key == "page":
            page = _positive_int(value, "page", errors) or page
        elif key == "limit":
            limit = _positive_int(value, "limit", errors) or limit
        else:
            _add_condition(filter_doc, key, value, errors)

    if limit > max_limit:
        errors["limit"] = f"must be at most {max_limit}"
    if errors:
        raise FieldValidationError(errors)

    return ListQuery(
        filter=filter_doc,
        select=tuple(select) if select else None,
        sort=sort,
        page=page,
        limit=limit,
    )


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _field_names(names: list[str], param: str, errors: dict[str, str]) -> list[str]:
    bad = [name for name in names if not _FIELD_KEY.match(name)]
    if bad:
        errors[param] = f"unsupported field name: {', '.join(bad)}"
    return names


def _sort_key(part: str) -> tuple[str, int]:
    if part.startswith("-"):
        return part[1:], -1
    return part, 1


def _positive_int(value: str, name: str, errors: dict[str, str]) -> int | None:
    try:
        number = int(value)
    except ValueError:
        errors[name] = "must be a positive integer"
        return None
    if number < 1:
        errors[name] = "must be a positive integer"
        return None
    return number


def _add_condition(
    filter_doc: dict[str, Any], key: str, value: str, errors: dict[str, str]
) -> None:
    match = _OPERATOR_KEY.match(key)
    if match:
        field, op = match.group("field"), match.group("op")
        operand: Any = _split(value) if op == "in" else value
        condition = filter_doc.get(field)
        if condition is None:
            condition = {}
        elif not isinstance(condition, dict):
            condition = {"$eq": condition}
        condition[f"${op}"] = operand
        filter_doc[field] = condition
        return

    if not _FIELD_KEY.match(key):
        errors[key] = "unsupported filter parameter"
        return

    existing = filter_doc.get(key)
    if existing is None:
        filter_doc[key] = value
    elif isinstance(existing, dict) and set(existing) == {"$in"}:
        existing["$in"].append(value)
    elif isinstance(existing, dict):
        existing["$eq"] = value
    else:
        # Repeated equality keys match any of the given values.
        filter_doc[key] = {"$in": [existing, value]}
