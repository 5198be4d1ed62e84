"""User bookmarks on the lines of an editor."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass
class BookmarkList:
    """A sorted list of bookmarked line numbers (1-based)."""

    lines: list[int] = field(default_factory=list)
    old_line_count: int = 0

    def __iter__(self) -> Iterator[int]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __contains__(self, line_number: object) -> bool:
        return line_number in self.lines

    def toggle(self, line_number: int, line_count: int) -> None:
        """Add the line if it is not bookmarked, remove it otherwise.

        Lines outside 1..line_count are ignored.
        """
        if line_number <= 0 or line_number > line_count:
            return
        index = bisect.bisect_left(self.lines, line_number)
        if index < len(self.lines) and self.lines[index] == line_number:
            del self.lines[index]
        else:
            self.lines.insert(index, line_number)

    def bookmark(self, which: int) -> int:
        """Return the line of bookmark number which, or -1 if there is none."""
        return self.lines[which] if 0 <= which < len(self.lines) else -1

    def set_bookmarks(self, bookmarks: Iterable[int], line_count: int) -> None:
        """Replace the bookmarks by the valid ones among bookmarks."""
        self.lines.clear()
        for line_number in bookmarks:
            if 0 < line_number <= line_count:
                self.toggle(line_number, line_count)

    def previous(self, line_number: int) -> Optional[int]:
        """Return the last bookmark before line_number, or None."""
        index = bisect.bisect_left(self.lines, line_number)
        return self.lines[index - 1] if index > 0 else None

    def next(self, line_number: int) -> Optional[int]:
        """Return the first bookmark after line_number, or None."""
        index = bisect.bisect_right(self.lines, line_number)
        return self.lines[index] if index < len(self.lines) else None

    def recalculate(self, line_number: int, line_count: int) -> None:
        """Follow an edit at line_number that changed the line count to line_count.

        Bookmarks on removed lines are dropped; bookmarks at or after the
        edited line are shifted by the number of added (or removed) lines.
        """
        added = line_count - self.old_line_count
        if added != 0:
            kept = []
            for mark in self.lines:
                if added < 0 and line_number <= mark < line_number - added:
                    continue
                kept.append(mark + added if line_number <= mark else mark)
            self.lines = kept
        self.old_line_count = line_count