from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from specconf.adapters.w3c_groups import is_group_payload
from specconf.app import resolve_group_config
from specconf.config import ConfigurationError, configure_logging, get_groups_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve document configuration options")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser(
        "resolve",
        help="Resolve the `group` option into wg, wgId, wgURI and wgPatentURI",
    )
    resolve.add_argument(
        "--config",
        type=Path,
        help="JSON file holding the document configuration",
    )
    resolve.add_argument(
        "--group",
        action="append",
        help="Group id to resolve; repeat for several groups (overrides the file's group)",
    )
    resolve.add_argument(
        "--base-url",
        type=str,
        help="Groups lookup endpoint (defaults to SPECCONF_GROUPS_API_URL or respec.org)",
    )
    resolve.add_argument(
        "--verbose",
        action="store_true",
        help="Log lookups at debug level",
    )

    return parser.parse_args(list(argv))


def _load_conf(args: argparse.Namespace) -> dict[str, Any]:
    conf: dict[str, Any] = {}
    if args.config is not None:
        try:
            loaded = json.loads(args.config.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ValueError(f"Cannot read configuration {args.config}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration {args.config} must hold a JSON object")
        conf.update(loaded)
    if args.group:
        conf["group"] = args.group[0] if len(args.group) == 1 else list(args.group)
    return conf


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(verbose=parsed_args.verbose)
        conf = _load_conf(parsed_args)
        groups_config = get_groups_config(
            base_url=parsed_args.base_url,
            cache_predicate=is_group_payload,
        )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = resolve_group_config(conf, config=groups_config)
    except Exception:
        log.exception("Fatal error while resolving configuration")
        sys.exit(1)

    print(json.dumps(result.conf, indent=2, sort_keys=True))  # noqa: T201
    if result.has_errors:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
