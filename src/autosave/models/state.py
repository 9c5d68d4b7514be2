"""State management types for the autosave workflow."""

from datetime import datetime
from typing import Any, Dict, List, Optional, TypedDict

from autosave.client import GitClient
from autosave.models.base import GitStatus
from autosave.models.config import AutosaveConfig


class AutosaveState(TypedDict, total=False):
    """
    Shared state passed between nodes.
    Each node adds or modifies specific fields.
    """

    # Inputs
    config: AutosaveConfig
    git: GitClient
    now: Optional[datetime]

    # Status Node Output
    status: GitStatus

    # Stage Node Output
    staged: bool

    # Commit Node Output
    committed: bool
    commit_message: Optional[str]

    # Global State
    errors: List[Dict[str, Any]]
    warnings: List[Dict[str, Any]]
