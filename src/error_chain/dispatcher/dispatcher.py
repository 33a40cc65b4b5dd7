"""
Dispatcher binding the handler chain to the application's collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from error_chain.config import ChainConfig
from error_chain.dispatcher.builder import build_default_chain

if TYPE_CHECKING:
    from error_chain.dispatcher.chain import ChainResult, ErrorHandlerChain
    from error_chain.dispatcher.context import ErrorPresenter
    from error_chain.state.models import Repository, SelectionState
    from error_chain.state.store import AppStore


class Dispatcher:
    """Routes raised errors through a handler chain.

    Implements DispatchContext for the handlers it runs. Errors raised
    concurrently by unrelated operations each get their own chain run.

    Example:
        >>> dispatcher = Dispatcher.create(store, presenter)
        >>> try:
        ...     await fetch(repository)
        ... except Exception as e:
        ...     await dispatcher.post_error(e)
    """

    def __init__(
        self,
        store: AppStore,
        presenter: ErrorPresenter,
        chain: ErrorHandlerChain,
    ) -> None:
        """Initialize dispatcher.

        Args:
            store: Application state store
            presenter: Surface errors are shown on
            chain: Handler chain errors are routed through
        """
        self._store = store
        self._presenter = presenter
        self._chain = chain

    @classmethod
    def create(
        cls,
        store: AppStore,
        presenter: ErrorPresenter,
        config: ChainConfig | None = None,
    ) -> Dispatcher:
        """Create a dispatcher with the standard chain.

        Args:
            store: Application state store
            presenter: Surface errors are shown on
            config: Configuration (default: read from the environment)

        Returns:
            Dispatcher instance
        """
        (config or ChainConfig.from_env()).apply()
        return cls(store, presenter, build_default_chain(store))

    @property
    def chain(self) -> ErrorHandlerChain:
        """Get the handler chain."""
        return self._chain

    async def present_error(self, error: BaseException) -> None:
        """Show an error to the user."""
        await self._presenter.present(error)

    def get_selection_state(self) -> SelectionState | None:
        """Get the current selection, if any."""
        return self._store.get_state().selected_state

    async def update_repository_missing(
        self, repository: Repository, missing: bool
    ) -> None:
        """Persist whether a repository is reachable."""
        await self._store.update_repository_missing(repository, missing)

    async def post_error(self, error: BaseException) -> ChainResult:
        """Route an error through the handler chain.

        Args:
            error: The raised error

        Returns:
            ChainResult of the run
        """
        return await self._chain.run(error, self)
