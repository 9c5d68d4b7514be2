"""Base types used across the autosave runner."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class GitStatus:
    """Pending changes as reported by `git status --porcelain`."""

    lines: List[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return len(self.lines) > 0

    @classmethod
    def from_porcelain(cls, output: str) -> "GitStatus":
        """Parse porcelain output, one changed path per non-empty line."""
        return cls(lines=[line for line in output.split("\n") if line])


@dataclass
class CommitMessageData:
    """Values substituted into the autosave commit message."""

    datetime: str
    author: str
    datetime_verbose: str
