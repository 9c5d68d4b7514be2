"""Status node: find out whether the working directory has anything to save."""

from datetime import datetime

from loguru import logger

from autosave.client import GIT_ERRORS
from autosave.models.state import AutosaveState


def status_node(state: AutosaveState) -> AutosaveState:
    """Query `git status --porcelain` and store the pending changes."""
    if "config" not in state:
        raise ValueError("config is required in AutosaveState")
    if "git" not in state:
        raise ValueError("git is required in AutosaveState")

    logger.info("Executing Status Node")

    try:
        status = state["git"].status()
    except GIT_ERRORS as e:
        logger.error(f"git status failed: {e}")
        state.setdefault("errors", []).append(
            {"node": "status_node", "error": f"git status failed: {e}", "timestamp": datetime.now()}
        )
        return state

    for line in status.lines:
        logger.debug(f"pending: {line}")

    if not status.has_changes:
        logger.info("no changes to commit: exiting")

    state["status"] = status
    return state
