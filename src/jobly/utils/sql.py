"""Builders for parameterized SQL fragments.

Both builders are pure: they take plain Python data and return statement text
with positional ``$n`` placeholders plus the values to bind, in order. Nothing
here touches the database.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from jobly.exceptions import BadRequestError


class SqlFragment(NamedTuple):
    """SQL text and the values bound to its ``$1..$n`` placeholders."""

    sql: str
    values: list[Any]


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> SqlFragment:
    """
    Build the SET clause of an UPDATE from a sparse set of changed fields.

    Keys of ``data`` are external (API) field names; ``js_to_sql`` translates
    them to column names. Fields missing from ``js_to_sql`` are used as the
    column name unchanged. Placeholders follow the iteration order of ``data``.

    Args:
        data: Field name -> new value; must not be empty
        js_to_sql: Field name -> column name

    Returns:
        SqlFragment whose ``sql`` is e.g. ``"first_name"=$1, "age"=$2`` and
        whose ``values`` are ``["Jenny", 35]``

    Raises:
        BadRequestError: If ``data`` is empty

    Examples:
        >>> sql_for_partial_update({"firstName": "Jenny", "age": 35}, {"firstName": "first_name"})
        SqlFragment(sql='"first_name"=$1, "age"=$2', values=['Jenny', 35])
    """
    if not data:
        raise BadRequestError("No data")

    cols = [f'"{js_to_sql.get(name, name)}"=${idx}' for idx, name in enumerate(data, start=1)]
    return SqlFragment(", ".join(cols), list(data.values()))


def build_filtered_query(
    base_select: str,
    predicates: Iterable[tuple[str, Any]],
    order_clause: str,
) -> SqlFragment:
    """
    Extend a SELECT with AND-joined predicates and a trailing ORDER BY.

    Each predicate is an expression with a single ``{}`` slot, filled with the
    next placeholder. The placeholder counter is shared by all predicates, so
    the n-th predicate always gets ``$n``.

    Args:
        base_select: SELECT ... FROM ... without WHERE or ORDER BY
        predicates: (expression, value) pairs in the order to emit them
        order_clause: Appended after any WHERE clause, e.g. ``ORDER BY name``

    Returns:
        SqlFragment with the full statement and its bind values
    """
    where_checks: list[str] = []
    values: list[Any] = []

    for expression, value in predicates:
        values.append(value)
        where_checks.append(expression.format(f"${len(values)}"))

    sql = base_select
    if where_checks:
        sql += " WHERE " + " AND ".join(where_checks)

    return SqlFragment(f"{sql} {order_clause}", values)


def like_pattern(text: str, escape: str = "\\") -> str:
    """
    Wrap ``text`` in ``%...%`` for a substring LIKE, escaping its wildcards.

    Use with ``ESCAPE '\\'`` so ``%`` and ``_`` in ``text`` match literally.

    Examples:
        >>> like_pattern("50%_off")
        '%50\\\\%\\\\_off%'
    """
    escaped = text.replace(escape, escape * 2).replace("%", escape + "%").replace("_", escape + "_")
    return f"%{escaped}%"
