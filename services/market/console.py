"""Session that prints messages to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleSession:
    """
    Session writing sent messages to a stream (stdout by default).

    Keeps the sent messages so callers can inspect them afterwards.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize the session.

        Args:
            stream: Output stream; defaults to sys.stdout at send time.
        """
        self._stream = stream
        self.sent: list[str] = []

    async def send(self, content: str) -> list[str]:
        """Write the message and return it as a one-element list of ids."""
        stream = self._stream or sys.stdout
        stream.write(f"{content}\n")
        stream.flush()
        self.sent.append(content)
        return [str(len(self.sent))]
