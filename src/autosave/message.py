"""Commit message templating for autosave commits."""

from datetime import datetime
from importlib import metadata

from autosave.models.base import CommitMessageData

DISTRIBUTION_NAME = "git-autosave"
DEFAULT_AUTHOR = "git-autosave"

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATETIME_VERBOSE_FORMAT = "%A, %B %d %Y %H:%M:%S %Z"

COMMIT_MESSAGE_FORMAT = """{datetime} autosave

Autosaved by {author}
{datetime_verbose}
"""


def resolve_author() -> str:
    """Identify this program from its installed distribution metadata.

    Falls back to DEFAULT_AUTHOR when the package is not installed, e.g. when
    running straight from a source checkout.
    """
    try:
        dist = metadata.metadata(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return DEFAULT_AUTHOR
    return dist["Name"]


def build_commit_message_data(now: datetime, author: str) -> CommitMessageData:
    return CommitMessageData(
        datetime=now.strftime(DATETIME_FORMAT),
        author=author,
        datetime_verbose=now.strftime(DATETIME_VERBOSE_FORMAT),
    )


def render_commit_message(data: CommitMessageData) -> str:
    """Render the fixed autosave template.

    Raises:
        KeyError: if the template names a field missing from the data.
    """
    return COMMIT_MESSAGE_FORMAT.format(
        datetime=data.datetime,
        author=data.author,
        datetime_verbose=data.datetime_verbose,
    )
