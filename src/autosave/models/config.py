"""Runtime configuration for the autosave runner."""

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOTES_ENV_VAR = "NOTES"


class AutosaveConfig(BaseModel):
    """Settings read once at startup and never mutated afterwards."""

    model_config = ConfigDict(frozen=True)

    directory: str = Field(..., description="Working directory of the repository to autosave")
    dry_run: bool = Field(False, description="Check status only, skip git add and git commit")
    author: str = Field(..., description="Identifier rendered into the commit message")

    @field_validator("directory")
    @classmethod
    def directory_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(f"${NOTES_ENV_VAR} is not set")
        return value


def load_config(environ: Mapping[str, str], dry_run: bool, author: str) -> AutosaveConfig:
    """Build the configuration from an environment mapping.

    Raises:
        pydantic.ValidationError: if the directory variable is missing or empty.
    """
    return AutosaveConfig(
        directory=environ.get(NOTES_ENV_VAR, ""),
        dry_run=dry_run,
        author=author,
    )
