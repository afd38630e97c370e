from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .exceptions import NoScriptsError

logger = logging.getLogger("synthcli")

SCRIPT_SUFFIXES = (".docx", ".txt")


@dataclass(frozen=True)
class ScriptInput:
    """One document to render: its filename stem and its text."""

    title: str
    text: str
    path: Path


def find_scripts(directory: Path) -> list[Path]:
    """Return script documents in *directory*, sorted by name.

    Hidden files (``.DS_Store`` and friends) and other extensions are
    ignored.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NoScriptsError(f"Scripts directory {directory} does not exist")
    paths = sorted(
        p for p in directory.iterdir()
        if p.is_file() and not p.name.startswith(".") and p.suffix.lower() in SCRIPT_SUFFIXES
    )
    logger.info("%d script files found in %s directory.", len(paths), directory)
    return paths


def read_scripts(directory: Path) -> list[ScriptInput]:
    """Load every script in *directory*.

    Raises:
        NoScriptsError: if the directory is missing or holds no scripts.
    """
    paths = find_scripts(directory)
    if not paths:
        raise NoScriptsError(f"0 scripts found in {directory} directory.")

    scripts = []
    for path in paths:
        text = path.read_text(encoding="utf-8", errors="replace").strip()
        if not text:
            logger.warning("Skipping %s: file is empty", path.name)
            continue
        scripts.append(ScriptInput(title=path.stem, text=text, path=path))

    if not scripts:
        raise NoScriptsError(f"All scripts in {directory} directory are empty.")
    return scripts
