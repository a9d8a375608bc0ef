from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

RankedTag = Tuple[str, int]

class TagCounts:
    def __init__(self):
        self.counts: Dict[str, int] = {}

    def add(self, tag: str, n: int = 1):
        self.counts[tag] = self.counts.get(tag, 0) + n

    def update(self, tags: Iterable[str]):
        for tag in tags:
            self.add(tag)

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, tag: str) -> int:
        return self.counts.get(tag, 0)

    def ranked(self) -> List[RankedTag]:
        # count descending, ties by tag ascending
        out: List[RankedTag] = list(self.counts.items())
        out.sort(key=lambda x: (-x[1], x[0]))
        return out
