"""Purchase adapter turning configured APIs into market items."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from core.logging import get_logger
from core.result import Failure, Result, failure, success
from services.extraction.jsonpath import first_match
from services.fetcher.client import ApiClient
from services.market.base import ItemDescriptor, PurchaseResult
from services.market.errors import (
    DeliveryError,
    ErrorCode,
    FulfillmentError,
    InvalidMatchError,
)
from services.market.messages import image_message

if TYPE_CHECKING:
    import structlog

    from core.config import ApiEntry, Settings
    from services.market.base import MarketHost, Session


class PurchaseAdapter:
    """
    Registers configured APIs as market items and fulfils purchases.

    ``start`` and ``stop`` are driven by the host's ``ready`` and
    ``dispose`` events. Both are idempotent: ``start`` always clears the
    namespace before registering, and ``stop`` may run before ``start``.

    A purchase performs at most one HTTP request, one JSONPath
    extraction and one message send. Any failure becomes a 500 result;
    the purchase callback never raises to the host.
    """

    def __init__(
        self,
        host: MarketHost,
        settings: Settings,
        *,
        client: ApiClient | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            host: Market host to register items with.
            settings: Plugin settings (timeout, api_list, debug, namespace).
            client: Optional pre-configured API client for testing.
            logger: Optional logger; defaults to one named after the namespace.
        """
        self._host = host
        self._settings = settings
        self._client = client or ApiClient(settings.timeout, debug=settings.debug)
        self._logger = (logger or get_logger(settings.namespace)).bind(
            plugin=settings.namespace
        )
        self._registered: list[str] = []

    @property
    def namespace(self) -> str:
        """Return the namespace owning this adapter's items."""
        return self._settings.namespace

    @property
    def registered_names(self) -> list[str]:
        """Return the names of items registered by the last start."""
        return list(self._registered)

    async def start(self) -> None:
        """
        Replace this namespace's items with the configured ones.

        Errors are logged, not raised. Items registered before a failing
        entry stay registered.
        """
        self._registered.clear()
        try:
            removed = await self._host.unregister_items(self.namespace)
            for entry in self._settings.api_list:
                await self._host.register_item(self.namespace, self.build_descriptor(entry))
                self._registered.append(entry.name)
        except Exception as e:
            self._logger.error(
                "registration_failed",
                error=str(e),
                registered=len(self._registered),
                configured=len(self._settings.api_list),
                exc_info=True,
            )
            return

        self._logger.info(
            "items_registered",
            count=len(self._registered),
            removed=removed,
        )

    async def stop(self) -> None:
        """Remove this namespace's items and release the HTTP client."""
        try:
            removed = await self._host.unregister_items(self.namespace)
            self._logger.info("items_unregistered", count=removed)
        except Exception as e:
            self._logger.error("unregistration_failed", error=str(e), exc_info=True)
        finally:
            self._registered.clear()
            await self._client.close()

    def build_descriptor(self, entry: ApiEntry) -> ItemDescriptor:
        """
        Build the market item for a configured entry.

        Args:
            entry: Configured API entry.

        Returns:
            Descriptor whose purchase callback fulfils from this entry.
        """
        return ItemDescriptor(
            name=entry.name,
            description=entry.description,
            tags=tuple(entry.tags),
            on_purchase=partial(self.purchase, entry),
            id=entry.id,
            price=entry.price,
            stock=entry.stock,
        )

    async def purchase(self, entry: ApiEntry, session: Session) -> PurchaseResult:
        """
        Fulfil one purchase of an entry.

        Args:
            entry: The purchased entry.
            session: Session of the purchasing user.

        Returns:
            PurchaseResult with code 200 on success, 500 on any failure.
        """
        log = self._logger.bind(item=entry.name)
        try:
            image = await self.resolve_image(entry)
            delivered = await image.bind_async(partial(self._deliver, entry, session))
        except Exception as e:
            log.error(
                "purchase_failed", code=ErrorCode.UNKNOWN.value, error=str(e), exc_info=True
            )
            return PurchaseResult.failed()

        if isinstance(delivered, Failure):
            log.error(
                "purchase_failed",
                code=delivered.error.code.value,
                error=str(delivered.error),
            )
            return PurchaseResult.failed()

        if self._settings.debug:
            log.debug("purchase_fulfilled", image=delivered.value)
        return PurchaseResult.ok()

    async def resolve_image(self, entry: ApiEntry) -> Result[str, FulfillmentError]:
        """
        Resolve the image URL for an entry.

        Without a response path the configured URL is the image and no
        request is made. Otherwise the API is called and the first
        JSONPath match is used.
        """
        if not entry.extracts:
            return success(entry.url)

        fetched = await self._client.fetch_json(entry.url, entry.method, entry.name)
        return fetched.bind(
            lambda data: first_match(data, entry.response, entry.name)
        ).bind(partial(self._as_image_url, entry))

    def _as_image_url(self, entry: ApiEntry, value: Any) -> Result[str, FulfillmentError]:
        if not isinstance(value, str) or not value.strip():
            return failure(
                InvalidMatchError(entry.name, entry.response, details=repr(value)[:200])
            )
        return success(value.strip())

    async def _deliver(
        self,
        entry: ApiEntry,
        session: Session,
        src: str,
    ) -> Result[str, FulfillmentError]:
        try:
            await session.send(image_message(src))
        except Exception as e:
            return failure(DeliveryError(entry.name, details=str(e)))
        return success(src)
