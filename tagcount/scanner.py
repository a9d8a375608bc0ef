from __future__ import annotations
import re, pathlib
from typing import List, Sequence

from .utils import is_excluded

# " #tag": a literal space, then '#', then a run of non-whitespace.
# ASCII keeps \S to [^ \t\n\r\f\v]; non-breaking spaces belong to the tag.
TAG_PATTERN = re.compile(r" #(\S+)", re.ASCII)

def extract_tags(text: str) -> List[str]:
    return TAG_PATTERN.findall(text)

def list_entries(directory: pathlib.Path) -> List[pathlib.Path]:
    """Direct children of `directory`, sorted by name. Missing or unreadable
    directories raise OSError."""
    return sorted(directory.iterdir(), key=lambda p: p.name)

def select_notes(directory: pathlib.Path, file_exclusions: Sequence[re.Pattern]) -> List[pathlib.Path]:
    return [p for p in list_entries(directory) if not is_excluded(p.name, file_exclusions)]

def read_note(path: pathlib.Path) -> str:
    return path.read_text(encoding="utf-8")
