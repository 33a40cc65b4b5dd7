"""
Application state store.

Defines the store interface the handler chain depends on and an in-memory
implementation of it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from error_chain.state.models import (
    AppState,
    Repository,
    SelectionState,
    SelectionType,
)
from error_chain.telemetry.logger import get_logger

logger = get_logger("error_chain.state")


@runtime_checkable
class AppStore(Protocol):
    """Store holding the application state."""

    def get_state(self) -> AppState:
        """Get the current state snapshot."""
        ...

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        """Persist whether a repository's working directory is reachable."""
        ...


class InMemoryAppStore:
    """AppStore keeping state in memory.

    State snapshots are immutable; every mutation swaps in a new snapshot
    without awaiting in between, so concurrent updates are last-write-wins.

    Example:
        >>> store = InMemoryAppStore()
        >>> store.add_repository(repo)
        >>> store.select_repository(repo)
        >>> await store.update_repository_missing(repo, True)
    """

    def __init__(self, state: AppState | None = None) -> None:
        """Initialize store.

        Args:
            state: Initial state (empty if None)
        """
        self._state = state or AppState()

    def get_state(self) -> AppState:
        """Get the current state snapshot."""
        return self._state

    def add_repository(self, repository: Repository) -> Repository:
        """Start tracking a repository.

        Args:
            repository: Repository to add

        Returns:
            The added repository
        """
        others = tuple(r for r in self._state.repositories if r.id != repository.id)
        self._state = self._state.model_copy(
            update={"repositories": (*others, repository)}
        )
        return repository

    def select_repository(self, repository: Repository | None) -> None:
        """Select a repository, or clear the selection with None."""
        selected = (
            SelectionState.for_repository(repository) if repository else None
        )
        self._state = self._state.model_copy(update={"selected_state": selected})

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        """Set the missing flag on a tracked repository.

        The selection follows the repository when it is the selected one.
        Setting the flag to its current value changes nothing.

        Args:
            repository: Repository to update (matched by id)
            missing: New value of the missing flag
        """
        state = self._state
        updated = repository.with_missing(missing)

        repositories = tuple(
            updated if r.id == repository.id else r for r in state.repositories
        )
        if not any(r.id == repository.id for r in repositories):
            repositories = (*repositories, updated)

        selected = state.selected_state
        if (
            selected is not None
            and selected.repository is not None
            and selected.repository.id == repository.id
        ):
            if selected.type is SelectionType.CLONING_REPOSITORY:
                selected = selected.model_copy(update={"repository": updated})
            else:
                selected = SelectionState.for_repository(updated)

        self._state = AppState(repositories=repositories, selected_state=selected)
        logger.debug(
            "Repository missing flag updated",
            repository=repository.name,
            missing=missing,
        )
