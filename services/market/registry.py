"""In-memory market host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.logging import get_logger
from core.result import Failure, Success

if TYPE_CHECKING:
    from core.result import Result
    from services.market.base import ItemDescriptor, PurchaseResult, Session

logger = get_logger(__name__)


class ItemNotFoundError(Exception):
    """Raised when an item is not registered."""

    def __init__(self, namespace: str, key: str) -> None:
        """Initialize with the namespace and item key."""
        self.namespace = namespace
        self.key = key
        super().__init__(f"No item {key!r} registered in namespace: {namespace}")


class DuplicateItemError(Exception):
    """Raised when an item key is registered twice in one namespace."""

    def __init__(self, namespace: str, key: str) -> None:
        """Initialize with the namespace and item key."""
        self.namespace = namespace
        self.key = key
        super().__init__(f"Item {key!r} already registered in namespace: {namespace}")


class InMemoryMarketHost:
    """
    Market host keeping registered items in memory.

    Items are grouped by the namespace of the plugin that registered
    them and keyed by id (or name when no id is given). Implements the
    MarketHost protocol and is used by the CLI and the test suite.

    Example:
        >>> host = InMemoryMarketHost()
        >>> await host.register_item("pic", descriptor)
        >>> result = await host.purchase("pic", "Sunset", session)
    """

    def __init__(self) -> None:
        """Initialize the host with an empty registry."""
        self._items: dict[str, dict[str, ItemDescriptor]] = {}

    async def register_item(self, namespace: str, descriptor: ItemDescriptor) -> None:
        """
        Register an item under a namespace.

        Args:
            namespace: Namespace of the owning plugin.
            descriptor: The item to register.

        Raises:
            ValueError: If namespace is empty.
            DuplicateItemError: If the key is already registered.
        """
        if not namespace:
            msg = "namespace cannot be empty"
            raise ValueError(msg)
        items = self._items.setdefault(namespace, {})
        if descriptor.key in items:
            raise DuplicateItemError(namespace, descriptor.key)
        items[descriptor.key] = descriptor
        logger.debug("item_registered", namespace=namespace, item=descriptor.key)

    async def unregister_items(self, namespace: str) -> int:
        """
        Remove every item of a namespace.

        Args:
            namespace: Namespace of the owning plugin.

        Returns:
            Number of items removed (0 if none were registered).
        """
        removed = len(self._items.pop(namespace, {}))
        logger.debug("items_unregistered", namespace=namespace, count=removed)
        return removed

    def get_item(
        self,
        namespace: str,
        key: str,
    ) -> Result[ItemDescriptor, ItemNotFoundError]:
        """
        Get a registered item.

        Args:
            namespace: Namespace of the owning plugin.
            key: Item id, or name when the item has no id.

        Returns:
            Result containing the descriptor or ItemNotFoundError.
        """
        descriptor = self._items.get(namespace, {}).get(key)
        if descriptor is None:
            return Failure(ItemNotFoundError(namespace, key))
        return Success(descriptor)

    async def purchase(self, namespace: str, key: str, session: Session) -> PurchaseResult:
        """
        Run the purchase callback of a registered item.

        Args:
            namespace: Namespace of the owning plugin.
            key: Item key.
            session: Session of the purchasing user.

        Returns:
            The callback's PurchaseResult.

        Raises:
            ItemNotFoundError: If the item is not registered.
        """
        result = self.get_item(namespace, key)
        if isinstance(result, Failure):
            raise result.error
        return await result.value.on_purchase(session)

    def items(self, namespace: str) -> list[ItemDescriptor]:
        """Return the items of a namespace in registration order."""
        return list(self._items.get(namespace, {}).values())

    def item_count(self, namespace: str) -> int:
        """Return the number of items in a namespace."""
        return len(self._items.get(namespace, {}))
