"""Autosave workflow integration using LangGraph for orchestration."""

import argparse
import os
import sys
from datetime import datetime
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from langgraph.graph import END, StateGraph
from loguru import logger
from pydantic import ValidationError

from autosave.client import GitClient, GitCommandClient
from autosave.message import DATETIME_FORMAT, resolve_author
from autosave.models.config import NOTES_ENV_VAR, AutosaveConfig, load_config
from autosave.models.state import AutosaveState
from autosave.nodes.commit_node import commit_node
from autosave.nodes.stage_node import stage_node
from autosave.nodes.status_node import status_node


def route_after_status(state: AutosaveState) -> str:
    """Stop on failure or a clean working directory, otherwise stage."""
    if state.get("errors"):
        return END
    if not state["status"].has_changes:
        return END
    return "stage_node"


def route_after_stage(state: AutosaveState) -> str:
    if state.get("errors"):
        return END
    return "commit_node"


def create_workflow():
    """Create the autosave workflow graph."""
    workflow = StateGraph(AutosaveState)

    # Add nodes
    workflow.add_node("status_node", status_node)
    workflow.add_node("stage_node", stage_node)
    workflow.add_node("commit_node", commit_node)

    workflow.set_entry_point("status_node")

    # Define edges
    workflow.add_conditional_edges("status_node", route_after_status, {"stage_node": "stage_node", END: END})
    workflow.add_conditional_edges("stage_node", route_after_stage, {"commit_node": "commit_node", END: END})
    workflow.add_edge("commit_node", END)

    return workflow.compile()


def run_workflow(config: AutosaveConfig, git: GitClient, now: Optional[datetime] = None) -> AutosaveState:
    """Run the autosave workflow and return the final state."""
    initial_state: AutosaveState = {
        "config": config,
        "git": git,
        "now": now,
        "errors": [],
        "warnings": [],
    }

    app = create_workflow()
    return app.invoke(initial_state)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Commit all pending changes in $NOTES with an autosave message")
    parser.add_argument("--dry", action="store_true", help="perform a dry run")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if not args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    load_dotenv(find_dotenv(usecwd=True))
    try:
        config = load_config(os.environ, dry_run=args.dry, author=resolve_author())
    except ValidationError:
        logger.error(f"error: ${NOTES_ENV_VAR} is not set")
        return 1

    logger.info(f"{datetime.now().strftime(DATETIME_FORMAT)} Autosaving notes at: {config.directory}")

    final_state = run_workflow(config, GitCommandClient(config.directory))

    if final_state.get("errors"):
        logger.error("Errors encountered during autosave:")
        for error in final_state["errors"]:
            logger.error(f"- {error['node']}: {error['error']}")
        return 1

    if final_state.get("committed"):
        logger.info("Autosave completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
