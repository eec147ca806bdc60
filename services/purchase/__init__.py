"""Purchase adapter package."""

from services.purchase.adapter import PurchaseAdapter
from services.purchase.plugin import PLUGIN_NAME, apply

__all__ = ["PLUGIN_NAME", "PurchaseAdapter", "apply"]
