"""Base types and protocols for the market host integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

# Payload tag attached to every purchase result
ITEM_TYPE = "api"
SUCCESS_CODE = 200
FAILURE_CODE = 500
SUCCESS_MESSAGE = "兑换成功"
FAILURE_MESSAGE = "兑换失败"


@dataclass(frozen=True, slots=True)
class PurchaseResult:
    """
    Outcome of one purchase attempt, returned to the host.

    Attributes:
        code: 200 on success, 500 on failure.
        msg: Message shown by the host.
        item_type: Payload tag, always 'api'.
    """

    code: int
    msg: str
    item_type: str = ITEM_TYPE

    @classmethod
    def ok(cls) -> PurchaseResult:
        """Create a successful result."""
        return cls(code=SUCCESS_CODE, msg=SUCCESS_MESSAGE)

    @classmethod
    def failed(cls) -> PurchaseResult:
        """Create a failed result."""
        return cls(code=FAILURE_CODE, msg=FAILURE_MESSAGE)

    @property
    def is_success(self) -> bool:
        """Check if the purchase succeeded."""
        return self.code == SUCCESS_CODE

    def to_dict(self) -> dict[str, Any]:
        """Return the host wire format."""
        return {
            "code": self.code,
            "msg": self.msg,
            "data": {"itemType": self.item_type},
        }


@runtime_checkable
class Session(Protocol):
    """Channel of the purchasing user."""

    async def send(self, content: str) -> Any:
        """
        Send a message to the user.

        Args:
            content: Message content, may embed an image element.
        """
        ...


type PurchaseCallback = Callable[[Session], Awaitable[PurchaseResult]]


@dataclass(frozen=True, slots=True)
class ItemDescriptor:
    """
    An item registered with the market host.

    Attributes:
        name: Item name, unique within a namespace.
        description: Item description.
        tags: Keyword tags.
        on_purchase: Callback fulfilling one purchase.
        id: Item identifier (optional).
        price: Item price (optional).
        stock: Available stock (optional, None for host default).
    """

    name: str
    description: str
    tags: tuple[str, ...]
    on_purchase: PurchaseCallback
    id: str | None = None
    price: float | None = None
    stock: int | None = None

    @property
    def key(self) -> str:
        """Return the key the host stores the item under."""
        return self.id if self.id is not None else self.name


@runtime_checkable
class MarketHost(Protocol):
    """
    Protocol for the marketplace host service.

    The host owns item storage and the economy; the adapter only
    registers and removes its own items.
    """

    async def unregister_items(self, namespace: str) -> int:
        """
        Remove all items registered under a namespace.

        Must tolerate a namespace with no items.

        Returns:
            Number of items removed.
        """
        ...

    async def register_item(self, namespace: str, descriptor: ItemDescriptor) -> None:
        """Register one item under a namespace."""
        ...


@runtime_checkable
class PluginContext(Protocol):
    """Host runtime context handed to the plugin entry point."""

    @property
    def market(self) -> MarketHost:
        """Return the market host service."""
        ...

    def on(self, event: str, handler: Callable[[], Awaitable[None]]) -> Any:
        """Subscribe a handler to a lifecycle event ('ready', 'dispose')."""
        ...
