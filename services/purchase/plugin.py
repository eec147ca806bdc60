"""Plugin entry point wiring the adapter to host lifecycle events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.config import DEFAULT_NAMESPACE
from services.purchase.adapter import PurchaseAdapter

if TYPE_CHECKING:
    from core.config import Settings
    from services.fetcher.client import ApiClient
    from services.market.base import PluginContext

PLUGIN_NAME = DEFAULT_NAMESPACE


def apply(
    ctx: PluginContext,
    settings: Settings,
    *,
    client: ApiClient | None = None,
) -> PurchaseAdapter:
    """
    Attach the purchase adapter to a host context.

    Registration runs on ``ready`` and cleanup on ``dispose``.

    Args:
        ctx: Host runtime context exposing ``market`` and ``on``.
        settings: Plugin settings.
        client: Optional pre-configured API client.

    Returns:
        The adapter bound to the context.
    """
    adapter = PurchaseAdapter(ctx.market, settings, client=client)
    ctx.on("ready", adapter.start)
    ctx.on("dispose", adapter.stop)
    return adapter
