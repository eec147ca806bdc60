"""Error types for purchase fulfilment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for fulfilment errors."""

    UNKNOWN = "unknown"
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    INVALID_PATH = "invalid_path"
    NO_MATCH = "no_match"
    INVALID_MATCH = "invalid_match"
    DELIVERY = "delivery"


@dataclass(frozen=True, slots=True)
class FulfillmentError:
    """
    Error produced while fulfilling a purchase.

    Attributes:
        code: Error code identifying the failing step.
        message: Human-readable error message.
        item_name: Name of the item being purchased.
        details: Additional error details (optional).
    """

    code: ErrorCode
    message: str
    item_name: str
    details: str | None = None

    def __str__(self) -> str:
        """Return string representation of the error."""
        text = f"[{self.item_name}] {self.code.value}: {self.message}"
        if self.details:
            text = f"{text} ({self.details})"
        return text


def NetworkError(
    item_name: str,
    message: str = "Request failed",
    details: str | None = None,
) -> FulfillmentError:
    """Create a network error."""
    return FulfillmentError(
        code=ErrorCode.NETWORK,
        message=message,
        item_name=item_name,
        details=details,
    )


def RequestTimeoutError(
    item_name: str,
    message: str = "Request timeout",
    details: str | None = None,
) -> FulfillmentError:
    """Create a timeout error."""
    return FulfillmentError(
        code=ErrorCode.TIMEOUT,
        message=message,
        item_name=item_name,
        details=details,
    )


def HttpStatusError(
    item_name: str,
    status_code: int,
    details: str | None = None,
) -> FulfillmentError:
    """Create an error for a non-success HTTP status."""
    return FulfillmentError(
        code=ErrorCode.HTTP_STATUS,
        message=f"API returned status {status_code}",
        item_name=item_name,
        details=details,
    )


def ParseError(
    item_name: str,
    message: str = "Failed to parse response",
    details: str | None = None,
) -> FulfillmentError:
    """Create a parse error."""
    return FulfillmentError(
        code=ErrorCode.PARSE,
        message=message,
        item_name=item_name,
        details=details,
    )


def InvalidPathError(
    item_name: str,
    expression: str,
    details: str | None = None,
) -> FulfillmentError:
    """Create an error for a JSONPath expression that does not parse."""
    return FulfillmentError(
        code=ErrorCode.INVALID_PATH,
        message=f"Invalid JSONPath expression: {expression}",
        item_name=item_name,
        details=details,
    )


def NoMatchError(item_name: str, expression: str) -> FulfillmentError:
    """Create an error for a JSONPath expression with no matches."""
    return FulfillmentError(
        code=ErrorCode.NO_MATCH,
        message=f"No match for {expression}",
        item_name=item_name,
    )


def InvalidMatchError(
    item_name: str,
    expression: str,
    details: str | None = None,
) -> FulfillmentError:
    """Create an error for a match that is not a usable image URL."""
    return FulfillmentError(
        code=ErrorCode.INVALID_MATCH,
        message=f"Match for {expression} is not an image URL",
        item_name=item_name,
        details=details,
    )


def DeliveryError(
    item_name: str,
    message: str = "Failed to send message",
    details: str | None = None,
) -> FulfillmentError:
    """Create a message delivery error."""
    return FulfillmentError(
        code=ErrorCode.DELIVERY,
        message=message,
        item_name=item_name,
        details=details,
    )
