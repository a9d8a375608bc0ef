from __future__ import annotations
import sys, pathlib
from typing import List, Optional

from .config import DEFAULT_CONFIG, Extreme, RankerConfig
from .counts import RankedTag, TagCounts
from .scanner import extract_tags, read_note, select_notes
from .utils import is_excluded

class TagRanker:
    """Ranks the hashtags found in the notes of one directory.

    Counting ignores tag exclusions: excluded tags are only dropped after the
    whole table has been sorted, then the list is cut to `limit` entries from
    the head (Most) or the tail (Least).
    """

    def __init__(self, directory: str, config: Optional[RankerConfig] = None):
        self.directory = directory
        self.path = pathlib.Path(directory)
        self.config = config or DEFAULT_CONFIG

    def _log(self, msg: str):
        if self.config.verbose:
            print(msg, file=sys.stderr)

    def notes(self) -> List[pathlib.Path]:
        selected = select_notes(self.path, self.config.file_exclusions)
        notes = []
        for p in selected:
            if p.is_dir():
                self._log(f"    [-] {p.name} (directory, skipped)")
                continue
            notes.append(p)
        return notes

    def count(self) -> TagCounts:
        counts = TagCounts()
        self._log(f"[*] Scanning {self.directory}")
        for note in self.notes():
            tags = extract_tags(read_note(note))
            self._log(f"    [+] {note.name}: {len(tags)} tag(s)")
            counts.update(tags)
        self._log(f"[*] {len(counts)} distinct tag(s)")
        return counts

    def rank(self, counts: TagCounts) -> List[RankedTag]:
        kept = [(tag, n) for tag, n in counts.ranked()
                if not is_excluded(tag, self.config.tag_exclusions)]
        limit = self.config.limit
        if self.config.extreme == Extreme.MOST:
            return kept[:limit]
        return kept[max(len(kept) - limit, 0):]

    def run(self) -> List[RankedTag]:
        return self.rank(self.count())

    def to_markdown(self, entries: List[RankedTag]) -> str:
        lines = [f"{self.config.extreme.value} used tags in `{self.directory}`", ""]
        for tag, n in entries:
            lines += [
                f"## #{tag}: {n} time(s)",
                "",
                "```expander",
                f'tag:#{tag} path:"{self.directory}"',
                "```",
                "",
            ]
        return "\n".join(lines) + "\n"
