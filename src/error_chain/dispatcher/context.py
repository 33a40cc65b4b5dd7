"""
Capabilities handed to every handler unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from error_chain.state.models import Repository, SelectionState


@runtime_checkable
class ErrorPresenter(Protocol):
    """Surface that shows an error to the user.

    Implementations must not raise for any input.
    """

    async def present(self, error: BaseException) -> None:
        """Show the error to the user."""
        ...


@runtime_checkable
class DispatchContext(Protocol):
    """Capabilities shared by all handler invocations of a session.

    One instance lives for the whole application session and is passed by
    reference, never copied.
    """

    async def present_error(self, error: BaseException) -> None:
        """Show the error to the user."""
        ...

    def get_selection_state(self) -> SelectionState | None:
        """Get the current selection, if any."""
        ...

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        """Persist whether a repository is reachable."""
        ...
