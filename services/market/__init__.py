"""Market host integration package."""

from services.market.base import (
    ItemDescriptor,
    MarketHost,
    PluginContext,
    PurchaseResult,
    Session,
)
from services.market.errors import (
    DeliveryError,
    ErrorCode,
    FulfillmentError,
    NetworkError,
    NoMatchError,
    ParseError,
)
from services.market.registry import (
    DuplicateItemError,
    InMemoryMarketHost,
    ItemNotFoundError,
)

__all__ = [
    "DeliveryError",
    "DuplicateItemError",
    "ErrorCode",
    "FulfillmentError",
    "InMemoryMarketHost",
    "ItemDescriptor",
    "ItemNotFoundError",
    "MarketHost",
    "NetworkError",
    "NoMatchError",
    "ParseError",
    "PluginContext",
    "PurchaseResult",
    "Session",
]
