"""
Result type for the fulfilment path.

Fetching and extraction steps return either a Success carrying a value or
a Failure carrying a FulfillmentError, so the purchase callback can turn
any failure into a uniform result without catching exceptions per step.

Example:
    >>> from services.extraction.jsonpath import first_match
    >>> first_match({"data": {"url": "https://img/1.png"}}, "$.data.url")
    Success(value='https://img/1.png')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    A successful step.

    Attributes:
        value: The produced value.
    """

    value: T

    def bind[U, E](self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a step that itself returns a Result.

        Args:
            func: Next step, called with the contained value.

        Returns:
            The Result produced by the next step.
        """
        return func(self.value)

    async def bind_async[U, E](
        self, func: Callable[[T], Awaitable[Result[U, E]]]
    ) -> Result[U, E]:
        """Chain an async step that returns a Result."""
        return await func(self.value)


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    A failed step.

    Attributes:
        error: The error value.
    """

    error: E

    def bind[T, U](self, _func: Callable[[T], Result[U, E]]) -> Failure[E]:
        """Short-circuit: the next step is skipped."""
        return self

    async def bind_async[T, U](
        self, _func: Callable[[T], Awaitable[Result[U, E]]]
    ) -> Failure[E]:
        """Short-circuit: the next async step is skipped."""
        return self


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Create a Success result."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create a Failure result."""
    return Failure(error)
