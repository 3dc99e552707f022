"""Locate and read mindmap files from the configured base directory.

User-supplied names are reduced to their final path component before being
joined with the base directory, and the resolved path must stay inside it
(symlinks pointing elsewhere are rejected).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from app.services.outline_parser import split_lines

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "mindmap.puml"
_DEFAULT_BASE_DIR = Path(__file__).resolve().parent.parent / "mindmaps"


class MindmapLoadError(Exception):
    """Base class for errors raised before a mindmap can be parsed."""


class MindmapNotFoundError(MindmapLoadError):
    """Raised when the requested mindmap file does not exist."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"The file '{file_name}' was not found.")
        self.file_name = file_name


class InvalidMindmapPathError(MindmapLoadError):
    """Raised when a mindmap path escapes the base directory."""

    def __init__(self, message: str = "Invalid file path.") -> None:
        super().__init__(message)


def get_base_dir() -> Path:
    """Return the mindmap directory (MINDMAP_BASE_DIR or the bundled default)."""
    env_dir = os.environ.get("MINDMAP_BASE_DIR")
    if env_dir:
        return Path(env_dir)
    return _DEFAULT_BASE_DIR


def sanitize_file_name(file_name: str) -> str:
    """Strip any directory components, leaving only the final name."""
    name = Path(file_name.replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise InvalidMindmapPathError()
    return name


def resolve_mindmap_path(file_name: str, base_dir: Path | None = None) -> Path:
    """Resolve a user-supplied name to a readable file inside ``base_dir``."""
    base = base_dir if base_dir is not None else get_base_dir()
    name = sanitize_file_name(file_name)
    candidate = base / name

    if not candidate.is_file():
        logger.warning("Mindmap file not found: %s", candidate)
        raise MindmapNotFoundError(name)

    real_base = base.resolve()
    real_path = candidate.resolve()
    if not real_path.is_relative_to(real_base):
        logger.warning("Rejected mindmap path outside base dir: %s -> %s", candidate, real_path)
        raise InvalidMindmapPathError()

    return real_path


def load_mindmap_lines(file_name: str, base_dir: Path | None = None) -> list[str]:
    """Read a mindmap file and return its trimmed, non-empty lines."""
    path = resolve_mindmap_path(file_name, base_dir)
    # Decoded from bytes so lone carriage returns are not turned into line breaks
    text = path.read_bytes().decode("utf-8", errors="replace")
    lines = split_lines(text)
    logger.info("Loaded mindmap %s (%d lines)", path.name, len(lines))
    return lines
