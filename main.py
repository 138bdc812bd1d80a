#!/usr/bin/env python
"""CLI for the RepublicNews headline screen."""

import argparse
import asyncio
import logging
import sys
import threading
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from republic_news.config import create_from_config, get_default_config_path, load_config
from republic_news.controller import SearchController
from republic_news.render import render_screen

logger = logging.getLogger(__name__)

QUIT_COMMAND = ":q"


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str | None = None
    config: Path
    interactive: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def show(controller: SearchController) -> None:
    print(render_screen(controller.state, controller.device_state))
    print()


def _read_stdin(loop: asyncio.AbstractEventLoop, lines: "asyncio.Queue[str]") -> None:
    """Forward stdin lines to the event loop; an empty string marks EOF."""
    for line in iter(sys.stdin.readline, ""):
        try:
            loop.call_soon_threadsafe(lines.put_nowait, line)
        except RuntimeError:
            # Event loop already closed
            return
    try:
        loop.call_soon_threadsafe(lines.put_nowait, "")
    except RuntimeError:
        return


async def interactive_loop(controller: SearchController) -> None:
    """Read one query per line until EOF or the quit command.

    Stdin is read on a daemon thread so Ctrl-C exits without waiting for
    the pending line.
    """
    lines: asyncio.Queue[str] = asyncio.Queue()
    reader = threading.Thread(
        target=_read_stdin, args=(asyncio.get_running_loop(), lines), daemon=True
    )
    reader.start()
    while True:
        line = await lines.get()
        if not line:
            return
        query = line.rstrip("\n")
        if query.strip() == QUIT_COMMAND:
            return
        await controller.submit(query)
        show(controller)


async def run(args: CLIArgs) -> None:
    """Mount the screen, then run the requested searches.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    controller, search_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Config: {args.config}")

    await controller.mount()
    show(controller)

    if args.query is not None:
        await controller.submit(args.query)
        show(controller)

    if args.interactive:
        logger.info(f"Type a query and press Enter ({QUIT_COMMAND} to quit).")
        await interactive_loop(controller)

    if search_logger and search_logger.last_log_path:
        logger.info(f"Last search log written to: {search_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Show the latest headlines, sized to the device's network and battery."
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query to run after the initial headlines (may be empty)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        default=False,
        help="Keep reading queries from stdin, one per line",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable per-search logging to JSON files",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            interactive=ns.interactive,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (ValueError, yaml.YAMLError) as e:
        # Invalid or malformed config, or missing API key
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
