"""Text transforms behind the popup buttons.

Pure string helpers only; reading the selection and writing to the editor or
the vault is done by the caller.
"""

from __future__ import annotations

import re
from datetime import datetime

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
_MAX_TITLE_LENGTH = 50


def convert_to_link(text: str) -> str:
    """Wrap *text* as an internal ``[[link]]``, dropping any brackets inside."""
    cleaned = text.replace("[", "").replace("]", "")
    return f"[[{cleaned}]]"


def format_path_reference(path: str, line: int) -> str:
    """Format a ``@path:line`` reference (1-based line number)."""
    return f"@{path}:{line}"


def sanitize_file_name(text: str) -> str:
    """Turn the first line of *text* into a safe note title."""
    if not text or not text.strip():
        return "Untitled"

    first_line = text.split("\n")[0]
    sanitized = _UNSAFE_FILENAME_CHARS.sub("-", first_line).strip()
    return sanitized[:_MAX_TITLE_LENGTH]


def get_new_file_path(title: str, folder: str = "") -> str:
    """Build the ``.md`` path for a new note titled after *title*."""
    name = sanitize_file_name(title)
    folder = folder.rstrip("/")
    if folder:
        return f"{folder}/{name}.md"
    return f"{name}.md"


def format_memo_entry(text: str, now: datetime) -> str:
    """Format a quick-memo list entry: ``- HH:MM text``."""
    return f"- {now:%H:%M} {text.strip()}"


def build_daily_content(existing: str, text: str, now: datetime) -> str:
    """Append a memo entry for *text* to a daily note's content."""
    entry = format_memo_entry(text, now)
    trimmed = existing.rstrip("\n")
    return f"{trimmed}\n{entry}"


def build_note_content(text: str, source_url: str | None = None) -> str:
    """Body for a note created from a selection, with an optional source."""
    if source_url:
        return f"{text}\n\n---\nSource: {source_url}"
    return text
