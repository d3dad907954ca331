"""Newline-delimited JSON-RPC transport over standard streams."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

import structlog

from documents_mcp.dispatcher import Dispatcher

logger = structlog.get_logger()


def serve_stdio(dispatcher: Dispatcher, stdin: Iterable[str], stdout: TextIO) -> int:
    """Answer one request per input line until the input is exhausted.

    Returns:
        Number of requests handled.
    """
    handled = 0
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        stdout.write(dispatcher.handle(line) + "\n")
        stdout.flush()
        handled += 1
    logger.info("stdin closed", handled=handled)
    return handled
