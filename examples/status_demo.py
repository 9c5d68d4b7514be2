#!/usr/bin/env python3
"""
examples/status_demo.py

Demonstrates the autosave workflow in dry-run mode: it reports what an
autosave would commit in a repository without staging or committing anything.
"""

import argparse
import os
import sys

from autosave.client import GitCommandClient
from autosave.message import resolve_author
from autosave.models.config import AutosaveConfig
from autosave.workflow import run_workflow


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Show what an autosave would commit")
    parser.add_argument(
        "--repo-path",
        type=str,
        default=os.getcwd(),
        help="Path to Git repository (default: current directory)",
    )
    return parser.parse_args()


def main():
    """Run the workflow in dry-run mode and print the pending changes."""
    args = parse_args()
    repo_path = os.path.abspath(args.repo_path)

    print(f"Checking repository: {repo_path}")

    config = AutosaveConfig(directory=repo_path, dry_run=True, author=resolve_author())
    state = run_workflow(config, GitCommandClient(repo_path))

    if state.get("errors"):
        for error in state["errors"]:
            print(f"Error in {error['node']}: {error['error']}", file=sys.stderr)
        return 1

    status = state["status"]
    if not status.has_changes:
        print("Nothing to autosave")
        return 0

    print(f"\nAn autosave would commit {len(status.lines)} change(s):")
    for line in status.lines:
        print(f"  {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
