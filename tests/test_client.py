"""Tests for the GitPython-backed git client."""

from pathlib import Path
from unittest.mock import patch

import pytest
from git.exc import GitCommandError, NoSuchPathError

from autosave.client import GitCommandClient


def test_clean_repo_has_no_changes(notes_repo):
    client = GitCommandClient(notes_repo.working_dir)

    assert not client.status().has_changes


def test_status_lists_modified_and_untracked_files(notes_repo):
    repo_path = Path(notes_repo.working_dir)
    (repo_path / "journal.md").write_text("# Journal\n\nToday.\n")
    (repo_path / "todo.md").write_text("- buy milk\n")

    status = GitCommandClient(notes_repo.working_dir).status()

    assert status.lines == [" M journal.md", "?? todo.md"]


def test_stage_and_commit(notes_repo):
    repo_path = Path(notes_repo.working_dir)
    (repo_path / "todo.md").write_text("- buy milk\n")
    client = GitCommandClient(notes_repo.working_dir)

    client.stage_all()
    client.commit("autosave test\n\nbody\n")

    assert not client.status().has_changes
    assert notes_repo.head.commit.message == "autosave test\n\nbody\n"
    assert "todo.md" in notes_repo.head.commit.stats.files


def test_status_outside_repository_fails(tmp_path):
    client = GitCommandClient(str(tmp_path))

    with pytest.raises(GitCommandError) as excinfo:
        client.status()

    assert excinfo.value.status != 0


def test_commit_without_staged_changes_fails(notes_repo):
    client = GitCommandClient(notes_repo.working_dir)

    with pytest.raises(GitCommandError):
        client.commit("nothing to see here")


def test_missing_directory_fails(tmp_path):
    client = GitCommandClient(str(tmp_path / "does-not-exist"))

    with pytest.raises(NoSuchPathError):
        client.status()


def test_inaccessible_directory_fails_without_running_git(tmp_path):
    client = GitCommandClient(str(tmp_path))

    with patch("autosave.client.os.access", return_value=False), patch.object(client._git, "execute") as execute:
        with pytest.raises(PermissionError, match="cannot enter working directory"):
            client.stage_all()

    execute.assert_not_called()
