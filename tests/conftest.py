"""Shared fixtures for the autosave tests."""

from typing import List, Optional, Tuple

import pytest
from git import Repo
from git.exc import GitCommandError

from autosave.models.base import GitStatus
from autosave.models.config import AutosaveConfig


class FakeGitClient:
    """Records the git operations requested by the workflow."""

    def __init__(self, lines: Optional[List[str]] = None, fail_on: Optional[str] = None):
        self.lines = lines or []
        self.fail_on = fail_on
        self.calls: List[Tuple[str, ...]] = []

    def _maybe_fail(self, operation: str, args: List[str]) -> None:
        if self.fail_on == operation:
            raise GitCommandError(args, 128, "fatal: simulated failure")

    def status(self) -> GitStatus:
        self.calls.append(("status",))
        self._maybe_fail("status", ["git", "status", "--porcelain"])
        return GitStatus(lines=list(self.lines))

    def stage_all(self) -> None:
        self.calls.append(("stage_all",))
        self._maybe_fail("stage_all", ["git", "add", "."])

    def commit(self, message: str) -> None:
        self.calls.append(("commit", message))
        self._maybe_fail("commit", ["git", "commit", "--message", message])

    @property
    def operations(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_git():
    """A fake client with one pending change."""
    return FakeGitClient(lines=[" M journal.md"])


@pytest.fixture
def config(tmp_path):
    return AutosaveConfig(directory=str(tmp_path), dry_run=False, author="go-autosave")


@pytest.fixture
def dry_config(tmp_path):
    return AutosaveConfig(directory=str(tmp_path), dry_run=True, author="go-autosave")


@pytest.fixture
def notes_repo(tmp_path):
    """Create a temporary Git repository with one committed note."""
    repo_path = tmp_path / "notes"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    note = repo_path / "journal.md"
    note.write_text("# Journal\n")
    repo.index.add(["journal.md"])
    repo.index.commit("Initial commit")
    return repo


@pytest.fixture
def fake_git_factory():
    """Build fake clients with custom pending changes or a failing operation."""
    return FakeGitClient
