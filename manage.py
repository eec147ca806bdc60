#!/usr/bin/env python
"""
Developer command-line utility for the purchase adapter.

Runs the adapter against an in-memory market host so configured items
can be listed and redeemed without the real host.

Usage:
    python manage.py items [--config config.json]
    python manage.py redeem NAME [--config config.json]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(env_path)

from core.config import Settings, load_settings
from core.logging import configure_from_settings
from services.market.console import ConsoleSession
from services.market.registry import InMemoryMarketHost, ItemNotFoundError
from services.purchase.adapter import PurchaseAdapter


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Image API market items")
    parser.add_argument("--config", help="JSON settings file (defaults to environment)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("items", help="List the registered items")
    redeem = subparsers.add_parser("redeem", help="Purchase one item and print the result")
    redeem.add_argument("name", help="Item id or name")
    return parser


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Start the adapter, run one command and stop it again."""
    host = InMemoryMarketHost()
    adapter = PurchaseAdapter(host, settings)
    await adapter.start()
    try:
        if args.command == "items":
            for item in host.items(adapter.namespace):
                tags = ", ".join(item.tags)
                print(f"{item.key}\t{item.price}\t{item.description}\t[{tags}]")
            return 0

        # Names of entries with an id resolve to that id
        entry = settings.get_entry(args.name)
        key = entry.key if entry is not None else args.name
        try:
            result = await host.purchase(adapter.namespace, key, ConsoleSession())
        except ItemNotFoundError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        print(json.dumps(result.to_dict(), ensure_ascii=False))
        return 0 if result.is_success else 2
    finally:
        await adapter.stop()


def main() -> None:
    """Parse arguments and run the requested command."""
    args = build_parser().parse_args()
    settings = load_settings(args.config) if args.config else Settings()
    configure_from_settings(settings)
    sys.exit(asyncio.run(run(args, settings)))


if __name__ == "__main__":
    main()
