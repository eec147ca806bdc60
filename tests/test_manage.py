"""Tests for the developer command-line utility."""

from __future__ import annotations

import json

import pytest

from core.config import ApiEntry, Settings
from manage import build_parser, run


class TestBuildParser:
    """Tests for argument parsing."""

    def test_items_command(self) -> None:
        """The items command should parse without arguments."""
        args = build_parser().parse_args(["items"])

        assert args.command == "items"
        assert args.config is None

    def test_redeem_command(self) -> None:
        """The redeem command should take an item name."""
        args = build_parser().parse_args(["--config", "c.json", "redeem", "Direct"])

        assert args.command == "redeem"
        assert args.name == "Direct"
        assert args.config == "c.json"

    def test_command_required(self) -> None:
        """A command should be required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestRun:
    """Tests for run."""

    @pytest.mark.asyncio
    async def test_items_lists_configured_items(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """items should print one line per registered item."""
        code = await run(build_parser().parse_args(["items"]), settings)

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert [line.split("\t")[0] for line in lines] == ["Sunset", "Direct"]

    @pytest.mark.asyncio
    async def test_redeem_direct_item(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """redeem should print the image message and the result."""
        code = await run(build_parser().parse_args(["redeem", "Direct"]), settings)

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0] == '<img src="https://img/2.png"/>'
        assert json.loads(lines[1]) == {
            "code": 200,
            "msg": "兑换成功",
            "data": {"itemType": "api"},
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["d-1", "Direct"])
    async def test_redeem_item_with_id_by_id_or_name(
        self, name: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """redeem should find an item with an id by either its id or its name."""
        settings = Settings(
            api_list=[ApiEntry(id="d-1", name="Direct", url="https://img/2.png")]
        )

        code = await run(build_parser().parse_args(["redeem", name]), settings)

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0] == '<img src="https://img/2.png"/>'
        assert json.loads(lines[1])["code"] == 200

    @pytest.mark.asyncio
    async def test_redeem_unknown_item(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """redeem should fail for an unknown item."""
        code = await run(build_parser().parse_args(["redeem", "Missing"]), settings)

        assert code == 1
        assert "Missing" in capsys.readouterr().err
