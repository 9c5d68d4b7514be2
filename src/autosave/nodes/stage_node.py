"""Stage node: `git add` everything in the working directory."""

from datetime import datetime

from loguru import logger

from autosave.client import GIT_ERRORS
from autosave.models.state import AutosaveState


def stage_node(state: AutosaveState) -> AutosaveState:
    logger.info("Executing Stage Node")

    if state["config"].dry_run:
        logger.info("skipping git-add in dry run")
        state["staged"] = False
        return state

    try:
        state["git"].stage_all()
    except GIT_ERRORS as e:
        logger.error(f"git add failed: {e}")
        state.setdefault("errors", []).append(
            {"node": "stage_node", "error": f"git add failed: {e}", "timestamp": datetime.now()}
        )
        state["staged"] = False
        return state

    state["staged"] = True
    return state
