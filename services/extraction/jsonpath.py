"""JSONPath extraction over arbitrary API responses."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse

from core.result import Result, failure, success
from services.market.errors import FulfillmentError, InvalidPathError, NoMatchError

if TYPE_CHECKING:
    from jsonpath_ng import JSONPath


@lru_cache(maxsize=256)
def compile_path(expression: str) -> JSONPath:
    """
    Parse a JSONPath expression, caching the compiled form.

    Supports the extended syntax (filters, arithmetic) of jsonpath_ng.ext.

    Raises:
        JSONPathError: If the expression is not valid JSONPath.
    """
    return parse(expression)


def query(
    data: Any,
    expression: str,
    item_name: str = "",
) -> Result[list[Any], FulfillmentError]:
    """
    Evaluate a JSONPath expression against a JSON value.

    Args:
        data: Decoded JSON document.
        expression: JSONPath expression, e.g. ``$.data.url``.
        item_name: Item the query runs for, used in error reports.

    Returns:
        Result containing every matched value in document order,
        or an invalid_path error.
    """
    try:
        path = compile_path(expression)
    except (JSONPathError, ValueError) as e:
        return failure(InvalidPathError(item_name, expression, details=str(e)))
    return success([match.value for match in path.find(data)])


def first_match(
    data: Any,
    expression: str,
    item_name: str = "",
) -> Result[Any, FulfillmentError]:
    """
    Return the first value matched by a JSONPath expression.

    Args:
        data: Decoded JSON document.
        expression: JSONPath expression.
        item_name: Item the query runs for, used in error reports.

    Returns:
        Result containing the first match, or a no_match error when the
        expression matches nothing.
    """

    def take_first(matches: list[Any]) -> Result[Any, FulfillmentError]:
        if not matches:
            return failure(NoMatchError(item_name, expression))
        return success(matches[0])

    return query(data, expression, item_name).bind(take_first)
