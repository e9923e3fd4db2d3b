"""Logging setup for the specconf command line."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Send log records and diagnostics to stderr.

    stdout is reserved for the resolved configuration the CLI prints, so
    nothing else may write there. ``verbose`` enables debug output for each
    lookup; ``force`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
        force=force,
    )
    # httpx logs every request at INFO, which duplicates our own lookup logging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
