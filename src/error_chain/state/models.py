"""
Application state models read by the handler chain.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    """A repository tracked by the application."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Stable database identifier")
    name: str = Field(description="Display name")
    path: str = Field(description="Path of the working directory on disk")
    missing: bool = Field(
        default=False, description="Whether the working directory is gone"
    )

    def with_missing(self, missing: bool) -> Repository:
        """Create a copy with the missing flag set."""
        return self.model_copy(update={"missing": missing})


class SelectionType(str, Enum):
    """What kind of item is currently selected."""

    REPOSITORY = "repository"
    MISSING_REPOSITORY = "missing_repository"
    CLONING_REPOSITORY = "cloning_repository"


class SelectionState(BaseModel):
    """The current selection."""

    model_config = ConfigDict(frozen=True)

    type: SelectionType
    repository: Repository | None = None

    @classmethod
    def for_repository(cls, repository: Repository) -> SelectionState:
        """Create the selection state matching a repository's missing flag."""
        selection_type = (
            SelectionType.MISSING_REPOSITORY
            if repository.missing
            else SelectionType.REPOSITORY
        )
        return cls(type=selection_type, repository=repository)


class AppState(BaseModel):
    """Snapshot of application state."""

    model_config = ConfigDict(frozen=True)

    repositories: tuple[Repository, ...] = ()
    selected_state: SelectionState | None = None
