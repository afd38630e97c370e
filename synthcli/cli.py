"""Command-line entry point.

Usage::

    synthcli                         render every script in ./scripts
    synthcli -l [N|/progress|/complete]
    synthcli -i  <index|id>          inspect
    synthcli -ia <index|id>          inspect, full JSON
    synthcli -u  <index|id> <title>  rename
    synthcli -r  <index|id>          delete (asks first)
    synthcli -d  <index|id>          download video and captions
    synthcli -e  <index|id>          make public and print embed code
    synthcli -x  <index|id>          make private
    synthcli -a  <api key>           store the API key in .env
    synthcli -s  <title> [text]      render one test video

Indexes are 1-based positions in the current video list and can shift if
videos are added or removed in between; use the video id to be sure.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import httpx
from rich.prompt import Confirm

from . import commands
from .client import Synthesia
from .config import DEFAULT_ENV_FILE, DEFAULT_LOG_FILE, Settings, store_api_key
from .exceptions import MissingArgumentError, SynthCliError
from .logs import setup_logging

logger = logging.getLogger("synthcli")

_NEEDS_REF = {"-i", "-ia", "-u", "-r", "-d", "-e", "-x"}


def ask(question: str, default: bool) -> bool:
    return Confirm.ask(f"[bold yellow]{question}[/]", default=default)


def _arg(args: Sequence[str], position: int, what: str) -> str:
    if len(args) <= position or not args[position].strip():
        raise MissingArgumentError(f"{what} is missing")
    return args[position]


def run(
    args: Sequence[str],
    settings: Settings,
    confirm: Callable[[str, bool], bool] = ask,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Dispatch one command. Raises on any failure."""
    cmd = args[0] if args else None

    if cmd == "-a":
        store_api_key(settings.env_file, _arg(args, 1, "API key"))
        return

    if cmd is not None and cmd not in _NEEDS_REF | {"-l", "-s"}:
        raise SynthCliError(f"Unknown command {cmd!r}")

    ref = _arg(args, 1, "Video index") if cmd in _NEEDS_REF else None
    if cmd == "-u":
        new_title = _arg(args, 2, "New title of video")
    if cmd == "-s":
        title = _arg(args, 1, "Video title")

    with Synthesia(
        api_key=settings.require_api_key(),
        base_url=settings.base_url,
        timeout=settings.timeout,
        debug=settings.debug,
        transport=transport,
    ) as client:
        if cmd is None:
            commands.process_scripts(client, settings, confirm)
        elif cmd == "-l":
            commands.list_videos(client, settings, args[1] if len(args) > 1 else None)
        elif cmd == "-i":
            commands.inspect(client, settings, ref)
        elif cmd == "-ia":
            commands.inspect_raw(client, settings, ref)
        elif cmd == "-u":
            commands.rename(client, settings, ref, new_title)
        elif cmd == "-r":
            commands.delete(client, settings, ref, confirm)
        elif cmd == "-d":
            commands.download(client, settings, ref)
        elif cmd == "-e":
            commands.embed(client, settings, ref)
        elif cmd == "-x":
            commands.make_private(client, settings, ref)
        elif cmd == "-s":
            text = " ".join(args[2:]).strip() or commands.DEFAULT_SCRIPT_TEXT
            commands.submit_script(client, settings, title, text)


def main(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
    confirm: Callable[[str, bool], bool] = ask,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    """Run the CLI and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        if settings is None:
            # Settings.load may create .env; log that before the real config is known.
            setup_logging(Path(os.environ.get("SYNTHCLI_LOG_FILE") or DEFAULT_LOG_FILE))
            settings = Settings.load(DEFAULT_ENV_FILE)
        setup_logging(settings.log_file, settings.debug)
        run(args, settings, confirm=confirm, transport=transport)
    except SynthCliError as e:
        logger.error("%s", e)
        if e.detail and e.detail != str(e):
            logger.error("%s", e.detail)
        return 1
    except httpx.HTTPError as e:
        logger.error("Error in API call: %s", e)
        return 1
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    return 0


def main_entry() -> None:
    raise SystemExit(main())
