"""
Git collaborator used by the autosave nodes.

The runner only needs three git operations, so they sit behind a small
protocol that tests can replace with a fake.
"""

import os
import shlex
from typing import List, Protocol

from git import Git
from git.exc import CommandError, GitCommandError, NoSuchPathError
from loguru import logger

from autosave.models.base import GitStatus

# Raised by GitCommandClient when a git operation cannot complete.
GIT_ERRORS = (CommandError, NoSuchPathError, PermissionError)


class GitClient(Protocol):
    """The git operations the autosave workflow depends on."""

    def status(self) -> GitStatus: ...

    def stage_all(self) -> None: ...

    def commit(self, message: str) -> None: ...


class GitCommandClient:
    """Runs git commands in a working directory through GitPython."""

    def __init__(self, directory: str):
        self.directory = directory
        self._git = Git(directory)

    def _run(self, args: List[str]) -> str:
        """Run a git command, log it with its combined output and return stdout.

        Raises:
            GitCommandError: if git exits with a non-zero status.
            GitCommandNotFound: if git cannot be executed.
            NoSuchPathError: if the working directory does not exist.
            PermissionError: if the working directory cannot be entered.
        """
        # GitPython falls back to the process cwd for a missing or inaccessible directory.
        if not os.path.isdir(self.directory):
            raise NoSuchPathError(self.directory)
        if not os.access(self.directory, os.X_OK):
            raise PermissionError(f"cannot enter working directory: {self.directory}")

        status, stdout, stderr = self._git.execute(
            args,
            with_extended_output=True,
            with_exceptions=False,
        )
        logger.info(shlex.join(args))
        output = "\n".join(part for part in (stdout, stderr) if part)
        if output:
            logger.info(output)

        if status != 0:
            raise GitCommandError(args, status, stderr, stdout)
        return stdout

    def status(self) -> GitStatus:
        return GitStatus.from_porcelain(self._run(["git", "status", "--porcelain"]))

    def stage_all(self) -> None:
        self._run(["git", "add", "."])

    def commit(self, message: str) -> None:
        self._run(["git", "commit", "--message", message])
