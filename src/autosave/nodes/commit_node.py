"""
Commit node that records the staged changes under a generated autosave message.

The message is rendered from the current local time and the configured author,
so autosave commits stay recognisable in the history without any input from
the user.
"""

from datetime import datetime

from loguru import logger

from autosave.client import GIT_ERRORS
from autosave.message import build_commit_message_data, render_commit_message
from autosave.models.state import AutosaveState


def _record_error(state: AutosaveState, error: str) -> AutosaveState:
    logger.error(error)
    state.setdefault("errors", []).append({"node": "commit_node", "error": error, "timestamp": datetime.now()})
    state["committed"] = False
    return state


def commit_node(state: AutosaveState) -> AutosaveState:
    """Render the autosave message and run `git commit` with it.

    Args:
        state: Workflow state. An optional 'now' entry overrides the clock
            used for the message timestamps.

    Returns:
        Updated state with 'committed' and 'commit_message' set.
    """
    logger.info("Executing Commit Node")
    config = state["config"]

    if config.dry_run:
        logger.info("skipping git-commit in dry run")
        state["committed"] = False
        state["commit_message"] = None
        return state

    now = state.get("now") or datetime.now().astimezone()
    data = build_commit_message_data(now, config.author)
    try:
        message = render_commit_message(data)
    except (KeyError, IndexError, ValueError) as e:
        return _record_error(state, f"failed to render commit message: {e}")

    state["commit_message"] = message
    try:
        state["git"].commit(message)
    except GIT_ERRORS as e:
        return _record_error(state, f"no changes committed: {e}")

    state["committed"] = True
    return state
